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

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .coverage_filter import CoverageFilter
from .errors import InvalidFilterResult
from .sequence import SequenceView


def pop_longest(pool: list[SequenceView]) -> SequenceView:
    """Remove and return the first longest sequence"""

    i: int = max(range(len(pool)), key=lambda j: pool[j].size())
    return pool.pop(i)


@dataclass(slots=True, frozen=True)
class SelectionStep:
    reference: SequenceView

    # Candidates left when the reference was selected
    pool_size: int

    # Candidates not covered by the reference
    remaining: int


@dataclass(slots=True)
class SupergenomeBuilder:
    coverage_filter: CoverageFilter
    steps: list[SelectionStep] = field(default_factory=list)

    @property
    def supergenome(self) -> list[SequenceView]:
        return [step.reference for step in self.steps]

    def _filter(self, ref: SequenceView, pool: list[SequenceView]) -> list[SequenceView]:
        remaining = list(self.coverage_filter(ref, pool))

        # Views compare by identity
        pool_ids = {id(seq) for seq in pool}
        remaining_ids = {id(seq) for seq in remaining}
        if len(remaining_ids) != len(remaining) or not remaining_ids <= pool_ids:
            raise InvalidFilterResult(
                "Coverage filter returned sequences other than a subset of its candidates "
                "(reference: %s)!" % ref.name)
        return remaining

    def build(self, sequences: Sequence[SequenceView]) -> list[SequenceView]:
        self.steps.clear()

        pool = list(sequences)
        if not pool:
            logging.warning("No sequences to select from!")
            return []

        ref = pop_longest(pool)
        logging.debug("Longest sequence: %s (%d nt)." % (ref.name, ref.size()))

        while pool:
            remaining = self._filter(ref, pool)
            logging.info("set: %d nm: %d" % (len(pool), len(remaining)))
            self.steps.append(SelectionStep(ref, len(pool), len(remaining)))
            if not remaining:
                break

            ref = pop_longest(remaining)
            logging.debug("Next reference: %s (%d nt)." % (ref.name, ref.size()))
            pool = remaining

        else:
            self.steps.append(SelectionStep(ref, 0, 0))

        logging.info("Selected %d out of %d sequences." % (len(self.steps), len(sequences)))
        return self.supergenome


def build_supergenome(sequences: Sequence[SequenceView], coverage_filter: CoverageFilter) -> list[SequenceView]:
    return SupergenomeBuilder(coverage_filter).build(sequences)
