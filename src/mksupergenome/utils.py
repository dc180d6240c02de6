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

import os
import re

dna_re = re.compile('^[ACGT]+$')
non_nucl_re = re.compile('[^ACGT]')

# Characters other than ACGT (either case) map to themselves
dna_complement_tr_table = str.maketrans('ACGTacgt', 'TGCAtgca')
dna_upper_tr_table = str.maketrans('acgt', 'ACGT')


def is_dna(s: str) -> bool:
    return dna_re.match(s) is not None


def reverse_complement(seq: str) -> str:
    return seq[::-1].translate(dna_complement_tr_table)


def filter_nucl(seq: str) -> str:
    """Drop anything but nucleotides, converting lower case ones to upper case"""

    return non_nucl_re.sub('', seq.translate(dna_upper_tr_table))


def gc_content(seq: str) -> float:
    """
    Fraction of G and C nucleotides in the sequence (case insensitive);
    empty sequences have no GC content
    """

    if not seq:
        return 0.0
    s = seq.translate(dna_upper_tr_table)
    return (s.count('G') + s.count('C')) / len(s)


def get_cpu_count() -> int:
    if hasattr(os, 'sched_getaffinity'):
        return len(os.sched_getaffinity(0))
    return os.cpu_count() or 1
