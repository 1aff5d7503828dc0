from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

import pandas as pd

# Column names shared by the table, the chart and the CSV export
CATEGORY = "Category"
WEIGHT_TONS = "Weight_Tons"
COST_1886 = "Cost_1886"
COST_TODAY = "Cost_Today"

MATERIAL_COLUMNS: Tuple[str, ...] = (CATEGORY, WEIGHT_TONS, COST_1886, COST_TODAY)


@dataclass(frozen=True)
class MaterialRecord:
    """
    One row of the materials table.

    - category: unique key within the dataset
    - weight_tons: None when the row has no physical weight (e.g. labor)
    - cost_1886 / cost_today: USD, non-negative
    """
    category: str
    weight_tons: Optional[float]
    cost_1886: float
    cost_today: float

    def to_row(self) -> Dict[str, Any]:
        return {
            CATEGORY: self.category,
            WEIGHT_TONS: self.weight_tons,
            COST_1886: self.cost_1886,
            COST_TODAY: self.cost_today,
        }


@dataclass(frozen=True)
class WorkflowStage:
    stage: str
    time_days: float


@dataclass(frozen=True)
class DerivedView:
    """
    The records currently visible for a given selection, in dataset order.

    Produced by Dataset.subset and handed to every consumer (chart, table,
    export) so they all render the same rows.
    """
    selection: FrozenSet[str]
    records: Tuple[MaterialRecord, ...] = ()

    def __iter__(self) -> Iterator[MaterialRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def categories(self) -> List[str]:
        return [r.category for r in self.records]

    def to_frame(self) -> pd.DataFrame:
        """DataFrame with MATERIAL_COLUMNS, one row per visible record."""
        return pd.DataFrame(
            [r.to_row() for r in self.records],
            columns=list(MATERIAL_COLUMNS),
        )
