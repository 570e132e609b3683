"""
Chart canvas for launch telemetry visualization.
"""
import numpy as np
from PyQt5 import QtCore
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from telemetry.chart_model import ChartModel
from ui.styles import BORDER_COLOR, GRID_COLOR, PANEL_COLOR, TEXT_COLOR, TEXT_COLOR_DIM

MAX_X_TICKS = 6


class LaunchChartCanvas(FigureCanvas):
    """
    Matplotlib canvas that draws one :class:`ChartModel`.

    Shows the current launch line and, when present, the compared launch
    line on a shared categorical X-axis (one tick per CSV row label).
    Clicking the canvas emits ``clicked`` with the chart's panel index.
    """

    clicked = QtCore.pyqtSignal(int)

    def __init__(self, parent=None, width=4, height=2.5, dpi=100):
        """
        Initialize chart canvas.

        Args:
            parent: Parent QWidget
            width: Figure width in inches
            height: Figure height in inches
            dpi: Dots per inch resolution
        """
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self.fig.patch.set_facecolor(PANEL_COLOR)
        self.model = None
        self._style_axes()
        self.fig.tight_layout(pad=0.5)

    def _style_axes(self):
        self.ax.set_facecolor(PANEL_COLOR)
        for spine in self.ax.spines.values():
            spine.set_color(BORDER_COLOR)
        self.ax.tick_params(colors=TEXT_COLOR_DIM, labelsize=7)
        self.ax.grid(True, color=GRID_COLOR, alpha=0.8)

    def render_model(self, model: ChartModel):
        """
        Redraw the canvas from a chart model.

        Args:
            model: Labels, datasets and axis settings to draw
        """
        self.model = model
        self.ax.clear()
        self._style_axes()

        datasets = model.datasets()
        for dataset in datasets:
            y = np.asarray(dataset.values, dtype=float)
            x = np.arange(y.size)
            self.ax.plot(
                x,
                y,
                color=dataset.color,
                linewidth=1.5,
                marker="o",
                markersize=dataset.point_radius,
                label=dataset.label,
            )
            if dataset.fill:
                self.ax.fill_between(x, y, color=dataset.fill_color)

        self._set_x_ticks(model.labels)
        self._set_y_limits(model, datasets)

        if datasets:
            self.ax.legend(
                loc="lower center",
                bbox_to_anchor=(0.5, 1.0),
                ncol=len(datasets),
                fontsize=7,
                frameon=False,
                labelcolor=TEXT_COLOR,
            )
        self.fig.tight_layout(pad=0.5)
        self.draw_idle()

    def _set_x_ticks(self, labels):
        if not labels:
            self.ax.set_xticks([])
            return
        step = max(1, len(labels) // MAX_X_TICKS)
        ticks = list(range(0, len(labels), step))
        self.ax.set_xticks(ticks)
        self.ax.set_xticklabels([labels[i] for i in ticks], rotation=30, ha="right")

    def _set_y_limits(self, model: ChartModel, datasets):
        values = [v for d in datasets for v in d.values]
        data_min = min(values) if values else 0.0
        data_max = max(values) if values else 0.0

        # Suggested max only ever widens the axis
        top = max(model.suggested_max, data_max)
        bottom = min(0.0, data_min) if model.begin_at_zero else data_min
        if bottom >= top:
            bottom = top - 1.0
        self.ax.set_ylim(bottom, top)

    def mousePressEvent(self, event):
        if self.model is not None:
            self.clicked.emit(self.model.panel_index)
        super().mousePressEvent(event)
