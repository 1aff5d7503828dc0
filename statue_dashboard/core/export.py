from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from statue_dashboard.core.records import MATERIAL_COLUMNS, MaterialRecord

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_PREFIX = "statue_rebuild_data"
_EXACT_INT_LIMIT = 2 ** 53


def _compact_numeric(series: pd.Series) -> pd.Series:
    # 31.0 -> 31 so the dump carries the numbers as they were entered;
    # only below 2**53, where every float whole number is an exact int64
    values = series.dropna()
    if (
        len(values)
        and (values % 1 == 0).all()
        and (values.abs() < _EXACT_INT_LIMIT).all()
    ):
        return series.astype("Int64")
    return series


def records_to_csv(records: Iterable[MaterialRecord]) -> bytes:
    """
    Serialise records to CSV bytes.

    Column order is fixed (Category, Weight_Tons, Cost_1886, Cost_Today).
    Numbers are written raw, no currency formatting; a missing weight is an
    empty field. An empty input gives a header-only file.
    """
    frame = pd.DataFrame(
        [r.to_row() for r in records],
        columns=list(MATERIAL_COLUMNS),
    )
    for col in MATERIAL_COLUMNS[1:]:
        frame[col] = _compact_numeric(pd.to_numeric(frame[col]))

    text = frame.to_csv(index=False, na_rep="", lineterminator="\n")
    return text.encode("utf-8")


def export_filename(prefix: str = DEFAULT_EXPORT_PREFIX, on: Optional[date] = None) -> str:
    on = on or date.today()
    return f"{prefix}_{on.isoformat()}.csv"
