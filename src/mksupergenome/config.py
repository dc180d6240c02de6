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
from typing import List, Optional

from pydantic import BaseModel, Field

from .constants import DEFAULT_KMER_LENGTH, DEFAULT_MIN_COVERAGE, OUTPUT_FORMAT_NAMES, OUTPUT_FORMATS
from .coverage_filter import KmerCoverageFilter
from .errors import InvalidConfig


class SupergenomeConfig(BaseModel):

    # Paths
    input_file_paths: List[str] = Field(alias='inputFilePaths')
    report_fp: Optional[str] = Field(alias='reportFilePath', default=None)

    # Coverage filter
    kmer_length: int = Field(alias='kmerLength', default=DEFAULT_KMER_LENGTH)
    min_coverage: float = Field(alias='minCoverage', default=DEFAULT_MIN_COVERAGE)
    threads: int = Field(default=1)

    # Output
    output_format: str = Field(alias='outputFormat', default=OUTPUT_FORMAT_NAMES)

    class Config:
        populate_by_name = True

    def __init__(__pydantic_self__, **data) -> None:
        super().__init__(**data)
        if not __pydantic_self__.is_valid():
            raise InvalidConfig()

    def is_valid(self) -> bool:
        success: bool = True

        if not self.input_file_paths:
            logging.error("No input file paths!")
            success = False

        for value, label in [
            (self.kmer_length, "k-mer length"),
            (self.threads, "thread count")
        ]:
            if value < 1:
                logging.error("Invalid %s: not strictly positive!" % label)
                success = False

        if not 0.0 < self.min_coverage <= 1.0:
            logging.error("Invalid minimum coverage %s: not in (0, 1]!" % self.min_coverage)
            success = False

        if self.output_format not in OUTPUT_FORMATS:
            logging.error("Invalid output format '%s'!" % self.output_format)
            success = False

        return success

    def get_coverage_filter(self) -> KmerCoverageFilter:
        return KmerCoverageFilter(
            kmer_length=self.kmer_length,
            min_coverage=self.min_coverage,
            threads=self.threads)
