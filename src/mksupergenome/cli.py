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

import logging
from typing import Optional

import click

from . import __version__
from .cli_utils import resolve_thread_count, set_logger
from .config import SupergenomeConfig
from .constants import DEFAULT_KMER_LENGTH, DEFAULT_MIN_COVERAGE, OUTPUT_FORMAT_FASTA, OUTPUT_FORMAT_NAMES
from .errors import GenomeLoadError, InvalidConfig
from .loaders.fasta import get_input_file_paths
from .proc import run_supergenome


sequence_file = click.Path(exists=True, file_okay=True, dir_okay=False, allow_dash=True)
writable_file = click.Path(file_okay=True, dir_okay=False, writable=True)

VERSION_MESSAGE = (
    "%(prog)s %(version)s\n"
    "License AGPLv3+: GNU AGPL version 3 or later <https://www.gnu.org/licenses/>.\n"
    "This is free software: you are free to change and redistribute it.\n"
    "There is NO WARRANTY, to the extent permitted by law."
)


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('file_paths', nargs=-1, required=True, type=sequence_file, metavar='FILES...')
@click.option('-v', '--verbose', 'verbosity', count=True, help="Print additional information (repeat for more)")
@click.option(
    '-t',
    '--threads',
    help="The number of threads to be used; by default, all available processors are used")
@click.option(
    '-k',
    '--kmer-length',
    type=int,
    default=DEFAULT_KMER_LENGTH,
    show_default=True,
    help="Coverage filter k-mer length")
@click.option(
    '-c',
    '--min-coverage',
    type=float,
    default=DEFAULT_MIN_COVERAGE,
    show_default=True,
    help="Minimum fraction of k-mers shared with a reference for a sequence to be covered")
@click.option('--fasta', 'fasta_output', is_flag=True, help="Print the selected sequences in FASTA format")
@click.option('--report', 'report_fp', type=writable_file, help="Selection report (TSV) file path")
@click.version_option(__version__, message=VERSION_MESSAGE)
@click.pass_context
def main(
    ctx: click.Context,
    file_paths: tuple[str, ...],
    verbosity: int,
    threads: Optional[str],
    kmer_length: int,
    min_coverage: float,
    fasta_output: bool,
    report_fp: Optional[str]
) -> None:
    """
    Build a non-redundant supergenome

    \b
    FILES... can be any sequence of FASTA files; if fewer than two are
    supplied, the standard input is read as well.
    The names of the selected sequences are printed one per line.
    """

    set_logger(verbosity)

    try:
        config = SupergenomeConfig(
            input_file_paths=get_input_file_paths(file_paths),
            threads=resolve_thread_count(threads),
            kmer_length=kmer_length,
            min_coverage=min_coverage,
            output_format=OUTPUT_FORMAT_FASTA if fasta_output else OUTPUT_FORMAT_NAMES,
            report_fp=report_fp)

    except InvalidConfig:
        logging.critical("Invalid configuration!")
        ctx.exit(1)

    try:
        run_supergenome(config)

    except GenomeLoadError:
        logging.critical("Failed to load the input sequences!")
        ctx.exit(1)

    except (PermissionError, IsADirectoryError) as ex:
        logging.critical(ex)
        ctx.exit(1)
