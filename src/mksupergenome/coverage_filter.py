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

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial
from math import ceil
from typing import NamedTuple, Protocol, Sequence

from .constants import DEFAULT_KMER_LENGTH, DEFAULT_MIN_COVERAGE
from .sequence import SequenceView
from .utils import filter_nucl, reverse_complement


class CoverageFilter(Protocol):
    def __call__(self, reference: SequenceView, candidates: Sequence[SequenceView]) -> list[SequenceView]:
        """Select the candidates not represented by the reference, preserving their order"""
        ...


def get_canonical_kmers(seq: str, k: int) -> set[str]:
    n: int = len(seq)
    rc: str = reverse_complement(seq)
    return {
        min(seq[i:i + k], rc[n - i - k:n - i])
        for i in range(n - k + 1)
    }


class KmerReference(NamedTuple):
    seq: str
    rc: str
    kmers: frozenset[str]

    @classmethod
    def from_str(cls, nucl: str, k: int) -> KmerReference:
        seq = filter_nucl(nucl)
        return cls(seq, reverse_complement(seq), frozenset(get_canonical_kmers(seq, k)))


def get_coverage(ref: KmerReference, seq: str, k: int) -> float:
    kmers = get_canonical_kmers(seq, k)
    return len(kmers & ref.kmers) / len(kmers)


def is_covered(ref: KmerReference, k: int, min_coverage: float, nucl: str) -> bool:
    seq: str = filter_nucl(nucl)
    if len(seq) < k:
        return seq in ref.seq or seq in ref.rc
    return get_coverage(ref, seq, k) >= min_coverage


@dataclass(frozen=True, slots=True)
class KmerCoverageFilter:
    """
    Coverage filter based on shared canonical k-mers

    A candidate is covered by the reference when at least the given fraction
    of its distinct canonical k-mers also occur in the reference. Candidates
    shorter than the k-mer length are covered if found verbatim (on either
    strand) within the reference.

    With more than one thread, candidates are evaluated in a pool of worker
    processes, the k-mer comparisons being CPU-bound Python code.
    """

    kmer_length: int = DEFAULT_KMER_LENGTH
    min_coverage: float = DEFAULT_MIN_COVERAGE
    threads: int = 1

    def __post_init__(self) -> None:
        if self.kmer_length < 1:
            raise ValueError("Invalid k-mer length: not strictly positive!")
        if not 0.0 < self.min_coverage <= 1.0:
            raise ValueError("Invalid minimum coverage: not in (0, 1]!")
        if self.threads < 1:
            raise ValueError("Invalid thread count: not strictly positive!")

    def __call__(self, reference: SequenceView, candidates: Sequence[SequenceView]) -> list[SequenceView]:
        if not candidates:
            return []

        ref = KmerReference.from_str(reference.nucleotides(), self.kmer_length)
        is_cand_covered = partial(is_covered, ref, self.kmer_length, self.min_coverage)
        nucls = [candidate.nucleotides() for candidate in candidates]

        if self.threads > 1 and len(candidates) > 1:
            workers: int = min(self.threads, len(candidates))
            with ProcessPoolExecutor(max_workers=workers) as executor:
                covered = list(executor.map(
                    is_cand_covered, nucls, chunksize=ceil(len(nucls) / workers)))
        else:
            covered = list(map(is_cand_covered, nucls))

        return [
            candidate
            for candidate, cand_covered in zip(candidates, covered)
            if not cand_covered
        ]
