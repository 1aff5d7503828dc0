from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, Optional


@dataclass
class FilterState:
    """
    Represents the current user selection, as stored in the session store.

    Fields:

    - dataset_name: Name of the dataset the selection applies to.
    - categories: Material categories ticked by the user. Empty means nothing is shown,
      not "show everything".
    """

    dataset_name: str
    categories: List[str] = field(default_factory=list)

    @classmethod
    def initial(cls, dataset_name: str, categories: Iterable[str]) -> FilterState:
        """Initial selection: every category of the dataset."""
        return cls(dataset_name=dataset_name, categories=list(categories))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        data = data or {}
        return cls(
            dataset_name=data.get("dataset_name") or "",
            categories=[str(c) for c in (data.get("categories") or []) if c is not None],
        )
