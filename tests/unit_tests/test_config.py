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


from contextlib import nullcontext
import pytest
from mksupergenome.config import SupergenomeConfig
from mksupergenome.constants import DEFAULT_KMER_LENGTH, DEFAULT_MIN_COVERAGE, OUTPUT_FORMAT_NAMES
from mksupergenome.coverage_filter import KmerCoverageFilter
from mksupergenome.errors import InvalidConfig


def test_config_defaults():
    config = SupergenomeConfig(input_file_paths=['a.fa', '-'])
    assert config.kmer_length == DEFAULT_KMER_LENGTH
    assert config.min_coverage == DEFAULT_MIN_COVERAGE
    assert config.threads == 1
    assert config.output_format == OUTPUT_FORMAT_NAMES
    assert config.report_fp is None


def test_config_aliases():
    config = SupergenomeConfig(**{
        'inputFilePaths': ['a.fa', 'b.fa'],
        'kmerLength': 15,
        'minCoverage': 0.5,
        'outputFormat': 'fasta',
        'threads': 2
    })
    assert config.input_file_paths == ['a.fa', 'b.fa']
    assert config.kmer_length == 15
    assert config.output_format == 'fasta'


@pytest.mark.parametrize('params,valid', [
    ({}, True),
    ({'input_file_paths': []}, False),
    ({'kmer_length': 0}, False),
    ({'threads': 0}, False),
    ({'min_coverage': 0.0}, False),
    ({'min_coverage': 1.0}, True),
    ({'min_coverage': 1.1}, False),
    ({'output_format': 'bam'}, False)
])
def test_config_validation(params, valid):
    kwargs = {'input_file_paths': ['a.fa', 'b.fa'], **params}
    with pytest.raises(InvalidConfig) if not valid else nullcontext():
        SupergenomeConfig(**kwargs)


def test_config_get_coverage_filter():
    config = SupergenomeConfig(input_file_paths=['a.fa'], kmer_length=11, min_coverage=0.8, threads=3)
    assert config.get_coverage_filter() == KmerCoverageFilter(11, 0.8, 3)
