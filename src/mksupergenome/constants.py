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

# Standard input pseudo-file name
STDIN_FILE_NAME = '-'

# FASTA output line width
FASTA_LINE_LENGTH = 70

# Longest sequence supported by the length arithmetic of downstream aligners
INT_MAX = 2 ** 31 - 1
SEQUENCE_LENGTH_LIMIT = (INT_MAX - 1) // 2

# Default coverage filter parameters
DEFAULT_KMER_LENGTH = 21
DEFAULT_MIN_COVERAGE = 0.9

# Output formats
OUTPUT_FORMAT_NAMES = 'names'
OUTPUT_FORMAT_FASTA = 'fasta'
OUTPUT_FORMATS = [OUTPUT_FORMAT_NAMES, OUTPUT_FORMAT_FASTA]

# Selection report
REPORT_COLUMNS = [
    'rank',
    'name',
    'length',
    'gc_content',
    'pool_size',
    'remaining'
]
REPORT_DELIMITER = '\t'
