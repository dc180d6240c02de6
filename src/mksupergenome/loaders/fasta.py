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
from contextlib import contextmanager
from typing import Generator, Iterable

from pysam import FastxFile

from ..constants import STDIN_FILE_NAME
from ..errors import GenomeLoadError
from ..genome import Genome
from ..sequence import SequenceView


def get_fastx_file(fp: str) -> FastxFile:
    try:
        return FastxFile(fp)
    except IOError as ex:
        logging.critical("Failed to open sequence file '%s'!" % fp)
        raise GenomeLoadError(fp) from ex


@contextmanager
def open_fastx(fp: str) -> Generator[FastxFile, None, None]:
    ff = get_fastx_file(fp)
    try:
        yield ff
    finally:
        ff.close()


def get_input_file_paths(fps: Iterable[str]) -> list[str]:
    """Complete the input with the standard input if fewer than two files are given"""

    file_paths = list(fps)
    if len(file_paths) < 2:
        file_paths.append(STDIN_FILE_NAME)
    return file_paths


def read_genome(fp: str) -> Genome:
    with open_fastx(fp) as ff:
        try:
            contigs = [
                SequenceView.from_str(record.name, record.sequence or '')
                for record in ff
            ]
        except (IOError, ValueError) as ex:
            logging.critical("Error while loading sequence file '%s': %s!" % (fp, ex))
            raise GenomeLoadError(fp) from ex

    logging.debug("Loaded %d sequences from '%s'." % (len(contigs), fp))
    return Genome(fp, contigs)


def read_genomes(fps: Iterable[str]) -> list[Genome]:
    return [read_genome(fp) for fp in fps]
