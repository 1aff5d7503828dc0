from __future__ import annotations

from dataclasses import dataclass

from statue_dashboard.core.export import DEFAULT_EXPORT_PREFIX


@dataclass(frozen=True)
class GlobalConfig:
    ui_title: str = "Statue Rebuild Costs"
    subtitle: str = "What would it cost to build Lady Liberty today?"
    dataset_name: str = "Statue of Liberty"
    export_prefix: str = DEFAULT_EXPORT_PREFIX
