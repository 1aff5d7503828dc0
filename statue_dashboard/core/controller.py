from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Callable, FrozenSet, Iterable, List, Optional

from statue_dashboard.core.dataset import Dataset
from statue_dashboard.core.exceptions import ReentrantUpdateError
from statue_dashboard.core.export import DEFAULT_EXPORT_PREFIX, export_filename, records_to_csv
from statue_dashboard.core.records import DerivedView

logger = logging.getLogger(__name__)

Consumer = Callable[[DerivedView], None]


class ControllerState(Enum):
    IDLE = "idle"
    RECOMPUTING = "recomputing"


class ViewController:
    """
    Owns the category selection for one session and the view derived from it.

    Contract:
    - {@link set_filter()} recomputes the view and pushes it to every subscribed
      consumer before returning
    - the new view replaces the old one in a single assignment, so a reader never
      sees a half-updated view
    - one set_filter runs to completion before the next is accepted; calling it from
      inside a consumer raises ReentrantUpdateError
    - the dataset is never mutated; the controller only holds a reference to it
    """

    def __init__(
        self,
        dataset: Dataset,
        selection: Optional[Iterable[str]] = None,
        *,
        export_prefix: str = DEFAULT_EXPORT_PREFIX,
    ) -> None:
        self._dataset = dataset
        self._export_prefix = export_prefix
        self._consumers: List[Consumer] = []
        self._state = ControllerState.IDLE

        initial = dataset.categories if selection is None else selection
        self._view: DerivedView = dataset.subset(initial)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, consumer: Consumer) -> Callable[[], None]:
        """
        Register a consumer. It is called with the new DerivedView after every
        set_filter, in subscription order.

        :return: a function that removes the consumer again
        """
        self._consumers.append(consumer)

        def unsubscribe() -> None:
            if consumer in self._consumers:
                self._consumers.remove(consumer)

        return unsubscribe

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def set_filter(self, selection: Iterable[str]) -> None:
        if self._state is ControllerState.RECOMPUTING:
            raise ReentrantUpdateError("set_filter called while a previous update is being delivered")

        self._state = ControllerState.RECOMPUTING
        try:
            view = self._dataset.subset(selection)
            self._view = view

            logger.debug(
                "filter_applied",
                extra={
                    "dataset": self._dataset.name,
                    "n_selected": len(view.selection),
                    "n_visible": len(view),
                },
            )

            for consumer in list(self._consumers):
                consumer(view)
        finally:
            self._state = ControllerState.IDLE

    def get_derived_view(self) -> DerivedView:
        return self._view

    def export_csv(self) -> bytes:
        return records_to_csv(self._view.records)

    def export_filename(self, on: Optional[date] = None) -> str:
        return export_filename(self._export_prefix, on)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def selection(self) -> FrozenSet[str]:
        return self._view.selection

    @property
    def state(self) -> ControllerState:
        return self._state
