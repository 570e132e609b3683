"""
Dropdown and zoom state of the dashboard.

The window holds the current :class:`SelectionState` and replaces it on every
user event; the chart-model builder only reads it.
"""
from dataclasses import dataclass, replace
from typing import Optional

from .catalog import LaunchCatalog
from .model import METRICS

ALL_LAUNCHES = "all"
NO_COMPARE = "none"


def _check_metric(metric: str) -> str:
    if metric not in METRICS:
        raise ValueError(f"Unknown metric '{metric}'. Use one of {', '.join(METRICS)}.")
    return metric


@dataclass(frozen=True)
class SelectionState:
    selected_launch: Optional[str] = None
    compare_launch: Optional[str] = None
    selected_metric: str = "thrust"
    compare_metric: str = "thrust"
    zoomed_metric: Optional[str] = None

    @classmethod
    def initial(cls, catalog: LaunchCatalog) -> "SelectionState":
        return cls(selected_launch=catalog.default_launch())

    # ------------------------------------------------------------------
    # Derived flags
    # ------------------------------------------------------------------

    @property
    def has_main(self) -> bool:
        return self.selected_launch is not None and self.selected_launch != ALL_LAUNCHES

    @property
    def has_compare(self) -> bool:
        return self.compare_launch is not None

    @property
    def is_zoomed(self) -> bool:
        return self.zoomed_metric is not None

    @property
    def is_combined(self) -> bool:
        """Two launches selected with different metrics: one overlay chart."""
        return self.has_main and self.has_compare and self.selected_metric != self.compare_metric

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def with_launch(self, launch_id: Optional[str]) -> "SelectionState":
        return replace(self, selected_launch=launch_id or None)

    def with_compare(self, launch_id: Optional[str]) -> "SelectionState":
        if not launch_id or launch_id == NO_COMPARE:
            launch_id = None
        return replace(self, compare_launch=launch_id)

    def with_metric(self, metric: str) -> "SelectionState":
        return replace(self, selected_metric=_check_metric(metric))

    def with_compare_metric(self, metric: str) -> "SelectionState":
        return replace(self, compare_metric=_check_metric(metric))

    def zoom(self, panel_index: int) -> "SelectionState":
        """
        Zoom into the clicked panel. Clicks while already zoomed are ignored.

        The panel index only picks which panel is enlarged; the zoomed chart
        still plots the metrics chosen in the dropdowns.
        """
        if not 0 <= panel_index < len(METRICS):
            raise IndexError(f"Panel index {panel_index} out of range")
        if self.is_zoomed:
            return self
        return replace(self, zoomed_metric=METRICS[panel_index])

    def unzoom(self) -> "SelectionState":
        return replace(self, zoomed_metric=None)
