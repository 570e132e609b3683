"""
Chart-model builder.

``build_dashboard`` turns the parsed telemetry and the current selection into
plain, immutable chart descriptions. The canvases draw them; nothing here
touches Qt or matplotlib.
"""
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from . import catalog as ref
from .catalog import LaunchCatalog
from .model import METRICS, LaunchSeries, TelemetryData
from .selection import SelectionState

RGBA = Tuple[float, float, float, float]

MODE_OVERVIEW = "overview"
MODE_COMBINED = "combined"
MODE_ZOOMED = "zoomed"

SELECTED_PLACEHOLDER = "Selected"
COMPARED_PLACEHOLDER = "Compared"

_EMPTY_SERIES = LaunchSeries()


def rgba(rgb: Tuple[int, int, int], alpha: float = 1.0) -> RGBA:
    """Convert 0-255 RGB to a matplotlib RGBA tuple."""
    r, g, b = rgb
    return (r / 255.0, g / 255.0, b / 255.0, alpha)


@dataclass(frozen=True)
class DatasetModel:
    label: str
    values: Tuple[float, ...]
    color: RGBA
    fill_color: RGBA
    fill: bool = False
    tension: float = 0.1
    point_radius: float = 1

    @property
    def is_empty(self) -> bool:
        return len(self.values) == 0


@dataclass(frozen=True)
class ChartModel:
    metric: str          # panel this chart occupies
    panel_index: int
    labels: Tuple[str, ...]
    current: DatasetModel
    compare: DatasetModel
    suggested_max: float
    begin_at_zero: bool = False

    def datasets(self) -> Tuple[DatasetModel, ...]:
        """Datasets worth drawing; an empty compare dataset is dropped."""
        return tuple(d for d in (self.current, self.compare) if not d.is_empty)


@dataclass(frozen=True)
class DashboardModel:
    mode: str
    charts: Tuple[ChartModel, ...]

    @property
    def zoomed(self) -> bool:
        return self.mode == MODE_ZOOMED


def suggested_max(
    metric_a: str,
    metric_b: str,
    axis_max: Mapping[str, float] = ref.AXIS_MAX,
    priority: Sequence[str] = ref.AXIS_MAX_PRIORITY,
    fallback: float = ref.AXIS_MAX_FALLBACK,
) -> float:
    """Axis maximum for a chart showing two metrics: first match in priority order wins."""
    chosen = (metric_a, metric_b)
    for metric in priority:
        if metric in chosen:
            return axis_max[metric]
    return fallback


def resolve_current(data: TelemetryData, selection: SelectionState) -> LaunchSeries:
    if not selection.has_main:
        return data.aggregate
    return data.series_for(selection.selected_launch) or _EMPTY_SERIES


def resolve_compare(data: TelemetryData, selection: SelectionState) -> Optional[LaunchSeries]:
    if not selection.has_compare:
        return None
    return data.series_for(selection.compare_launch) or _EMPTY_SERIES


def _dataset(label: str, values: Sequence[float], rgb: Tuple[int, int, int]) -> DatasetModel:
    return DatasetModel(
        label=label,
        values=tuple(values),
        color=rgba(rgb),
        fill_color=rgba(rgb, ref.FILL_ALPHA),
    )


def _dataset_label(metric: str, launch_id: Optional[str], catalog: LaunchCatalog, placeholder: str) -> str:
    return f"{ref.METRIC_LABELS[metric]} - {catalog.name_for(launch_id) or placeholder}"


def _chart(
    panel_metric: str,
    current_metric: str,
    compare_metric: str,
    current: LaunchSeries,
    compare: Optional[LaunchSeries],
    selection: SelectionState,
    catalog: LaunchCatalog,
    colors,
    y_max: float,
    begin_at_zero: bool,
) -> ChartModel:
    current_rgb, compare_rgb = colors
    compare_values = compare.values(compare_metric) if compare is not None else ()
    return ChartModel(
        metric=panel_metric,
        panel_index=METRICS.index(panel_metric),
        labels=tuple(current.labels),
        current=_dataset(
            _dataset_label(current_metric, selection.selected_launch, catalog, SELECTED_PLACEHOLDER),
            current.values(current_metric),
            current_rgb,
        ),
        compare=_dataset(
            _dataset_label(compare_metric, selection.compare_launch, catalog, COMPARED_PLACEHOLDER),
            compare_values,
            compare_rgb,
        ),
        suggested_max=y_max,
        begin_at_zero=begin_at_zero,
    )


def build_dashboard(
    data: TelemetryData,
    selection: SelectionState,
    catalog: Optional[LaunchCatalog] = None,
    axis_max: Mapping[str, float] = ref.AXIS_MAX,
) -> DashboardModel:
    """
    Build every chart for the current selection.

    Modes:
      - zoomed: one chart on the clicked panel, plotting the dropdown metrics
      - combined: main and compare launches with different metrics, one overlay chart
      - overview: one chart per metric
    """
    catalog = catalog or LaunchCatalog()
    current = resolve_current(data, selection)
    compare = resolve_compare(data, selection)

    if selection.is_zoomed or selection.is_combined:
        panel = selection.zoomed_metric if selection.is_zoomed else METRICS[0]
        chart = _chart(
            panel,
            selection.selected_metric,
            selection.compare_metric,
            current,
            compare,
            selection,
            catalog,
            ref.FOCUS_COLORS,
            suggested_max(selection.selected_metric, selection.compare_metric, axis_max),
            begin_at_zero=True,
        )
        mode = MODE_ZOOMED if selection.is_zoomed else MODE_COMBINED
        return DashboardModel(mode=mode, charts=(chart,))

    charts = tuple(
        _chart(
            metric,
            metric,
            metric,
            current,
            compare,
            selection,
            catalog,
            ref.PANEL_COLORS[metric],
            axis_max[metric],
            begin_at_zero=False,
        )
        for metric in METRICS
    )
    return DashboardModel(mode=MODE_OVERVIEW, charts=charts)
