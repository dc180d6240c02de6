########## LICENCE ##########
# mksupergenome
# Copyright (C) 2024 Genome Research Ltd
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#############################

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from typing import Iterable

from .sequence import SequenceView


@dataclass
class Genome:
    name: str
    contigs: list[SequenceView]

    # Length of the contigs if concatenated with a separator between each pair
    joined_length: int = field(init=False)

    def __post_init__(self) -> None:
        self.joined_length = (
            sum(contig.size() for contig in self.contigs) +
            max(len(self.contigs) - 1, 0)
        )

    def __len__(self) -> int:
        return len(self.contigs)


def flatten_genomes(genomes: Iterable[Genome]) -> list[SequenceView]:
    return list(chain.from_iterable(genome.contigs for genome in genomes))
