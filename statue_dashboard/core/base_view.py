from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import plotly.graph_objs as go

from .dataset import Dataset
from .records import DerivedView

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all presentation views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - used to compute the data for the current DerivedView
    - implement 'render' - used to turn that data into a Plotly figure or component payload

    A view instance is also a controller consumer: calling it with a DerivedView
    computes + renders and keeps the result on 'output'.
    """

    id: str = None
    label: str = None

    def __init__(self, dataset: Dataset):
        self.dataset = dataset
        self.output: Any = None

    @abstractmethod
    def compute_data(self, view: DerivedView) -> Any:
        """
        Compute the data given the current DerivedView
        :param view: the records currently visible
        :return: data: whatever {@link render()} expects
        """
        raise NotImplementedError()

    @abstractmethod
    def render(self, data: Any) -> Any:
        """
        Render the computed data
        :param data: the data provided by {@link compute_data()}
        :return: the figure or component payload
        """
        raise NotImplementedError()

    def __call__(self, view: DerivedView) -> None:
        self.output = self.render(self.timed_compute(view))

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def timed_compute(self, view: DerivedView) -> Any:
        start = time.perf_counter()
        data = self.compute_data(view)
        logger.info(
            "compute_done",
            extra={
                "view_id": self.id,
                "dataset": self.dataset.name,
                "n_records": len(view),
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 3),
            },
        )
        return data

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all chart views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
