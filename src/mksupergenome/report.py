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

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from .builder import SelectionStep
from .constants import REPORT_COLUMNS, REPORT_DELIMITER


@dataclass
class SelectionReport:
    df: pd.DataFrame

    @classmethod
    def from_steps(cls, steps: Iterable[SelectionStep]) -> SelectionReport:
        return cls(pd.DataFrame.from_records([
            (
                rank,
                step.reference.name,
                step.reference.size(),
                step.reference.gc_content(),
                step.pool_size,
                step.remaining
            )
            for rank, step in enumerate(steps, start=1)
        ], columns=REPORT_COLUMNS))

    def __len__(self) -> int:
        return self.df.shape[0]

    def write(self, fp: str) -> None:
        self.df.to_csv(fp, sep=REPORT_DELIMITER, index=False)
