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

"""
Helpers for the command line interface, resolving options into run parameters.
"""

import logging

from .utils import get_cpu_count

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def get_log_level(verbosity: int) -> int:
    return LOG_LEVELS[min(max(verbosity, 0), len(LOG_LEVELS) - 1)]


def set_logger(verbosity: int) -> None:
    logging.basicConfig(level=get_log_level(verbosity))


def resolve_thread_count(value: str | None) -> int:
    """Parse the thread count, falling back to all available processors if invalid"""

    cpu_count: int = get_cpu_count()
    if value is None:
        return cpu_count

    try:
        threads = int(value)
    except ValueError:
        logging.warning(
            "Expected a number for -t argument, but '%s' was given. "
            "Ignoring -t argument." % value)
        return cpu_count

    if threads < 1 or threads > cpu_count:
        logging.warning(
            "The number of threads to be used is not between one and the number "
            "of available processors; Ignoring -t %d argument." % threads)
        return cpu_count

    return threads
