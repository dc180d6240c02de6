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
from collections.abc import Sized
from dataclasses import dataclass, field

from .constants import FASTA_LINE_LENGTH, SEQUENCE_LENGTH_LIMIT
from .errors import InvalidSubview
from .utils import gc_content, reverse_complement


@dataclass(frozen=True, slots=True, eq=False)
class SequenceView(Sized):
    """
    Read-only window over a named nucleotide buffer

    Views created by narrowing an existing view share its buffer,
    no nucleotide data is copied until requested explicitly.
    """

    base_name: str
    buffer: bytes = field(repr=False)
    offset: int = 0
    length: int | None = None

    def __post_init__(self) -> None:
        if self.length is None:
            object.__setattr__(self, 'length', len(self.buffer) - self.offset)
        if self.offset < 0 or self.length < 0 or self.offset + self.length > len(self.buffer):
            raise InvalidSubview(
                f"Invalid view [{self.offset}, {self.offset + self.length}) "
                f"over a buffer of length {len(self.buffer)}!")

    @classmethod
    def from_str(cls, name: str, nucl: str) -> SequenceView:
        view = cls(name, nucl.encode('ascii'))
        if view.size() > SEQUENCE_LENGTH_LIMIT:
            logging.warning(
                "The input sequence %s is too long. The technical limit is %d." %
                (name, SEQUENCE_LENGTH_LIMIT))
        return view

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"SequenceView({self.name!r}, length={self.length})"

    def size(self) -> int:
        return self.length

    @property
    def name(self) -> str:
        if self.offset == 0 or self.length == 0:
            return self.base_name
        return f"{self.base_name} ({self.offset}..{self.end})"

    @property
    def begin(self) -> int:
        return self.offset

    @property
    def end(self) -> int:
        return self.offset + self.length

    @property
    def data(self) -> memoryview:
        return memoryview(self.buffer)[self.begin:self.end]

    def nucleotides(self) -> str:
        return self.buffer[self.begin:self.end].decode('ascii')

    def subview(self, offset: int, length: int) -> SequenceView:
        if offset < 0 or length < 0 or offset + length > self.length:
            raise InvalidSubview(
                f"Invalid subview [{offset}, {offset + length}) "
                f"of a sequence of length {self.length}!")
        return SequenceView(self.base_name, self.buffer, self.offset + offset, length)

    def reverse_complement(self) -> str:
        return reverse_complement(self.nucleotides())

    def gc_content(self) -> float:
        return gc_content(self.nucleotides())

    def to_fasta(self, line_length: int = FASTA_LINE_LENGTH) -> str:
        data = self.data
        lines = [f">{self.name}"] + [
            data[i:i + line_length].tobytes().decode('ascii')
            for i in range(0, self.length, line_length)
        ]
        lines.append('')
        return '\n'.join(lines)
