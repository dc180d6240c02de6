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
import sys
from typing import Iterable, TextIO

from .builder import SupergenomeBuilder
from .config import SupergenomeConfig
from .constants import OUTPUT_FORMAT_FASTA
from .genome import flatten_genomes
from .loaders.fasta import read_genomes
from .report import SelectionReport
from .sequence import SequenceView


def write_supergenome(supergenome: Iterable[SequenceView], output_format: str, fh: TextIO) -> None:
    for seq in supergenome:
        fh.write(seq.to_fasta() if output_format == OUTPUT_FORMAT_FASTA else f"{seq.name}\n")


def run_supergenome(config: SupergenomeConfig, fh: TextIO | None = None) -> list[SequenceView]:

    # Load sequences
    genomes = read_genomes(config.input_file_paths)
    sequences = flatten_genomes(genomes)
    logging.info("Loaded %d sequences from %d genomes." % (len(sequences), len(genomes)))

    # Select sequences
    builder = SupergenomeBuilder(config.get_coverage_filter())
    supergenome = builder.build(sequences)

    # Write output
    write_supergenome(supergenome, config.output_format, fh or sys.stdout)

    if config.report_fp:
        logging.debug("Writing selection report to '%s'..." % config.report_fp)
        SelectionReport.from_steps(builder.steps).write(config.report_fp)

    return supergenome
