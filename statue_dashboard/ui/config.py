from dataclasses import dataclass
from typing import Iterable, Optional

from statue_dashboard.config.model import GlobalConfig
from statue_dashboard.core.controller import ViewController
from statue_dashboard.core.dataset import Dataset
from statue_dashboard.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Shared, read-only context for layout builders and callbacks.

    Holds no per-session state: callbacks build a fresh ViewController from
    the dataset and the session's FilterState on every request.
    """
    global_config: GlobalConfig
    dataset: Dataset
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")

    def new_controller(self, selection: Optional[Iterable[str]] = None) -> ViewController:
        return ViewController(
            self.dataset,
            selection,
            export_prefix=self.global_config.export_prefix,
        )
