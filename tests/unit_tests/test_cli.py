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


import io
import subprocess
import sys
import pandas as pd
from click.testing import CliRunner
import pytest
from mksupergenome import __version__
from mksupergenome.cli import main
from mksupergenome.config import SupergenomeConfig
from mksupergenome.constants import REPORT_COLUMNS
from mksupergenome.proc import run_supergenome
from .constants import CHR1, GENOME_A_FP, GENOME_B_FP, PLASMID
from .utils import get_data_file_path, get_names

genome_fps = [
    get_data_file_path(GENOME_A_FP),
    get_data_file_path(GENOME_B_FP)
]


@pytest.mark.parametrize('kmer_length', [11, 21])
def test_run_supergenome(kmer_length):
    fh = io.StringIO()
    config = SupergenomeConfig(input_file_paths=genome_fps, kmer_length=kmer_length)

    supergenome = run_supergenome(config, fh=fh)

    assert get_names(supergenome) == ['chr1', 'plasmid']
    assert fh.getvalue() == "chr1\nplasmid\n"


def test_main_names():
    result = CliRunner().invoke(main, ['-k', '11', '-t', '1', *genome_fps])
    assert result.exit_code == 0
    assert result.stdout == "chr1\nplasmid\n"


def test_main_fasta():
    result = CliRunner().invoke(main, ['--fasta', '-vv', *genome_fps])
    assert result.exit_code == 0
    assert result.stdout == (
        f">chr1\n{CHR1[:70]}\n{CHR1[70:]}\n"
        f">plasmid\n{PLASMID}\n"
    )


def test_main_report(tmp_path):
    report_fp = tmp_path / 'report.tsv'
    result = CliRunner().invoke(main, ['--report', str(report_fp), *genome_fps])
    assert result.exit_code == 0

    df = pd.read_csv(report_fp, sep='\t')
    assert list(df.columns) == REPORT_COLUMNS
    assert df['name'].tolist() == ['chr1', 'plasmid']
    assert df['pool_size'].tolist() == [3, 0]
    assert df['remaining'].tolist() == [1, 0]


def test_main_no_files():
    result = CliRunner().invoke(main, [])
    assert result.exit_code != 0


def test_main_missing_file(tmp_path):
    result = CliRunner().invoke(main, [genome_fps[0], str(tmp_path / 'missing.fa')])
    assert result.exit_code != 0


@pytest.mark.parametrize('args', [
    ['-k', '0'],
    ['-c', '2.0']
])
def test_main_invalid_config(args):
    result = CliRunner().invoke(main, [*args, *genome_fps])
    assert result.exit_code == 1
    assert result.stdout == ''


def test_main_version():
    result = CliRunner().invoke(main, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.stdout


@pytest.mark.parametrize('opt', ['-h', '--help'])
def test_main_help(opt):
    result = CliRunner().invoke(main, [opt])
    assert result.exit_code == 0
    assert 'supergenome' in result.stdout


def test_main_stdin():

    # A single file argument is completed by the standard input
    with open(genome_fps[1]) as fh:
        result = subprocess.run(
            [sys.executable, '-m', 'mksupergenome', '-k', '11', genome_fps[0]],
            stdin=fh,
            capture_output=True,
            text=True)

    assert result.returncode == 0
    assert result.stdout == "chr1\nplasmid\n"
