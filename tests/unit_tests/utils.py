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
import pathlib
from mksupergenome.sequence import SequenceView


def get_data_file_path(fp):
    return os.path.join(pathlib.Path(__file__).parent.absolute(), 'data', fp)


def get_sequences(lengths, prefix='seq'):
    return [
        SequenceView.from_str(f"{prefix}{i}", 'A' * length)
        for i, length in enumerate(lengths)
    ]


def get_names(seqs):
    return [seq.name for seq in seqs]


class MockCoverageFilter:
    """Coverage filter removing the candidates listed for each reference"""

    def __init__(self, covered=None):
        self.covered = covered or {}
        self.calls = []

    def __call__(self, reference, candidates):
        self.calls.append((reference.name, get_names(candidates)))
        covered = self.covered.get(reference.name, set())
        return [c for c in candidates if c.name not in covered]
