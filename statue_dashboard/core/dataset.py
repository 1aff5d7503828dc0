from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from statue_dashboard.core import static_data
from statue_dashboard.core.exceptions import DatasetError
from statue_dashboard.core.records import DerivedView, MaterialRecord, WorkflowStage


def _is_amount(value: float) -> bool:
    # NaN compares false against 0 in both directions
    return math.isfinite(value) and value >= 0


@dataclass(frozen=True)
class Dataset:
    """
    Immutable holder for the material and workflow tables.

    Built once at process start and shared by every session. The only
    per-session thing is the category selection, which is applied through
    {@link subset()} and never mutates the dataset.

    Invariants (checked on construction):
    - material categories are unique
    - costs and weights are finite and non-negative
    - workflow stage names are unique and durations finite and non-negative
    """

    name: str
    materials: Tuple[MaterialRecord, ...]
    stages: Tuple[WorkflowStage, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for rec in self.materials:
            if rec.category in seen:
                raise DatasetError(f"Duplicate material category '{rec.category}'")
            seen.add(rec.category)
            if not (_is_amount(rec.cost_1886) and _is_amount(rec.cost_today)):
                raise DatasetError(f"Invalid cost for material '{rec.category}'")
            if rec.weight_tons is not None and not _is_amount(rec.weight_tons):
                raise DatasetError(f"Invalid weight for material '{rec.category}'")

        stage_names: set[str] = set()
        for st in self.stages:
            if st.stage in stage_names:
                raise DatasetError(f"Duplicate workflow stage '{st.stage}'")
            stage_names.add(st.stage)
            if not _is_amount(st.time_days):
                raise DatasetError(f"Invalid duration for stage '{st.stage}'")

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------
    @classmethod
    def from_rows(
        cls,
        name: str,
        materials: Iterable[Sequence],
        stages: Iterable[Sequence] = (),
    ) -> Dataset:
        """
        Build a Dataset from plain (category, weight, cost_1886, cost_today)
        and (stage, days) tuples.
        """
        return cls(
            name=name,
            materials=tuple(
                MaterialRecord(
                    category=str(category),
                    weight_tons=None if weight is None else float(weight),
                    cost_1886=float(c1886),
                    cost_today=float(today),
                )
                for category, weight, c1886, today in materials
            ),
            stages=tuple(
                WorkflowStage(stage=str(stage), time_days=float(days))
                for stage, days in stages
            ),
        )

    @classmethod
    def from_static(cls, name: str = "Statue of Liberty") -> Dataset:
        return cls.from_rows(name, static_data.MATERIALS, static_data.WORKFLOW_STAGES)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    @property
    def categories(self) -> List[str]:
        return [r.category for r in self.materials]

    def subset(self, selection: Iterable[str]) -> DerivedView:
        """
        Records whose category is in selection, in dataset order.

        Unknown categories simply match nothing.
        """
        wanted = frozenset(str(c) for c in selection)
        return DerivedView(
            selection=wanted,
            records=tuple(r for r in self.materials if r.category in wanted),
        )

    def stages_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [{"Stage": s.stage, "Time_Days": s.time_days} for s in self.stages],
            columns=["Stage", "Time_Days"],
        )
