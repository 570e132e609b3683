"""
Main window for the Starship Test Analyzer.
"""
import logging

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QComboBox,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from telemetry.catalog import METRIC_LABELS, LaunchCatalog
from telemetry.chart_model import DashboardModel, build_dashboard
from telemetry.loader import TelemetryState
from telemetry.model import METRICS
from telemetry.selection import ALL_LAUNCHES, NO_COMPARE, SelectionState
from ui.canvases import LaunchChartCanvas
from ui.styles import LIGHT_STYLESHEET

logger = logging.getLogger(__name__)

OVERVIEW_COLUMNS = 3


class MainWindow(QMainWindow):
    """
    Main dashboard window for launch telemetry.

    Displays:
    - Main launch + metric selectors
    - Compare launch + metric selectors
    - Five metric panels, one combined overlay chart, or one zoomed chart
    - Loading / fetch error messages
    """

    def __init__(self, catalog: LaunchCatalog = None, title: str = "Starship Test Analyzer"):
        super().__init__()

        self.catalog = catalog or LaunchCatalog()
        self.telemetry = TelemetryState.pending()
        self.selection = SelectionState()
        self.dashboard = None

        self.setWindowTitle(title)
        self.resize(1400, 900)

        central = QWidget()
        self.setCentralWidget(central)

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(16, 16, 16, 16)
        root_layout.setSpacing(12)
        central.setLayout(root_layout)

        title_label = QLabel(title)
        title_label.setObjectName("title")
        title_label.setAlignment(QtCore.Qt.AlignCenter)
        root_layout.addWidget(title_label)

        root_layout.addLayout(self._build_selectors())

        self.status_label = QLabel("Loading Starship Data...")
        self.status_label.setObjectName("status")
        self.status_label.setAlignment(QtCore.Qt.AlignCenter)
        root_layout.addWidget(self.status_label)

        self.error_label = QLabel("")
        self.error_label.setObjectName("error")
        self.error_label.setAlignment(QtCore.Qt.AlignCenter)
        self.error_label.hide()
        root_layout.addWidget(self.error_label)

        self.overview_widget = self._build_overview()
        self.focus_widget = self._build_focus()
        root_layout.addWidget(self.overview_widget, 1)
        root_layout.addWidget(self.focus_widget, 1)

        hint = QLabel("Change dropdowns to update charts, or click a chart box to zoom and compare.")
        hint.setAlignment(QtCore.Qt.AlignCenter)
        root_layout.addWidget(hint)

        self.setStyleSheet(LIGHT_STYLESHEET)
        self._show_charts(False)

    # ==========================================================================
    # Layout
    # ==========================================================================

    def _build_selectors(self):
        """Build main / compare selector groups."""
        row = QHBoxLayout()
        row.setSpacing(16)

        main_group = QGroupBox("Main Launch")
        main_layout = QVBoxLayout()
        main_group.setLayout(main_layout)

        self.launch_combo = QComboBox()
        self.launch_combo.addItem("All Launches", ALL_LAUNCHES)
        for launch_id, name in self.catalog.items():
            self.launch_combo.addItem(name, launch_id)
        self.metric_combo = self._metric_combo()

        main_layout.addWidget(self.launch_combo)
        main_layout.addWidget(self.metric_combo)

        compare_group = QGroupBox("Compare Launch")
        compare_layout = QVBoxLayout()
        compare_group.setLayout(compare_layout)

        self.compare_combo = QComboBox()
        self.compare_combo.addItem("None", NO_COMPARE)
        for launch_id, name in self.catalog.items():
            self.compare_combo.addItem(name, launch_id)
        self.compare_metric_combo = self._metric_combo()

        compare_layout.addWidget(self.compare_combo)
        compare_layout.addWidget(self.compare_metric_combo)

        self.launch_combo.currentIndexChanged.connect(self._on_launch_changed)
        self.metric_combo.currentIndexChanged.connect(self._on_metric_changed)
        self.compare_combo.currentIndexChanged.connect(self._on_compare_changed)
        self.compare_metric_combo.currentIndexChanged.connect(self._on_compare_metric_changed)

        row.addWidget(main_group)
        row.addWidget(compare_group)
        return row

    def _metric_combo(self):
        combo = QComboBox()
        for metric in METRICS:
            combo.addItem(METRIC_LABELS[metric], metric)
        return combo

    def _build_overview(self):
        """Grid of one clickable canvas per metric."""
        widget = QWidget()
        grid = QGridLayout()
        grid.setSpacing(10)
        widget.setLayout(grid)

        self.panel_canvases = []
        for i, _metric in enumerate(METRICS):
            canvas = LaunchChartCanvas(widget)
            canvas.setCursor(QtCore.Qt.PointingHandCursor)
            canvas.clicked.connect(self.handle_panel_click)
            grid.addWidget(canvas, i // OVERVIEW_COLUMNS, i % OVERVIEW_COLUMNS)
            self.panel_canvases.append(canvas)
        return widget

    def _build_focus(self):
        """Single full-width canvas used for combined and zoomed charts."""
        widget = QWidget()
        layout = QVBoxLayout()
        widget.setLayout(layout)

        self.back_button = QPushButton("Back to All Charts")
        self.back_button.setFixedWidth(180)
        self.back_button.clicked.connect(self.handle_back)
        layout.addWidget(self.back_button)

        self.focus_canvas = LaunchChartCanvas(widget, width=10, height=5)
        self.focus_canvas.setCursor(QtCore.Qt.PointingHandCursor)
        self.focus_canvas.clicked.connect(self.handle_panel_click)
        layout.addWidget(self.focus_canvas, 1)
        return widget

    def _show_charts(self, visible: bool):
        self.overview_widget.setVisible(visible)
        self.focus_widget.setVisible(visible)

    # ==========================================================================
    # Data Update Methods
    # ==========================================================================

    def handle_telemetry_loaded(self, state: TelemetryState):
        """
        Receive the loader result.

        Args:
            state: Final TelemetryState from the load worker
        """
        self.telemetry = state
        self.status_label.hide()

        if state.error:
            logger.error(f"Telemetry unavailable: {state.error}")
            self.error_label.setText(state.error)
            self.error_label.show()
            self._show_charts(False)
            return

        self.set_selection(SelectionState.initial(self.catalog))

    def set_selection(self, selection: SelectionState):
        """Replace the selection, sync the dropdowns and re-render."""
        self.selection = selection
        self._sync_combos()
        self.refresh()

    def refresh(self):
        """Rebuild chart models from the current telemetry and selection."""
        if self.telemetry.data is None:
            return

        self.dashboard = build_dashboard(self.telemetry.data, self.selection, self.catalog)
        self._render(self.dashboard)

    def _render(self, dashboard: DashboardModel):
        if len(dashboard.charts) == 1:
            self.overview_widget.hide()
            self.focus_widget.show()
            self.back_button.setVisible(dashboard.zoomed)
            self.focus_canvas.render_model(dashboard.charts[0])
        else:
            self.focus_widget.hide()
            self.overview_widget.show()
            for canvas, chart in zip(self.panel_canvases, dashboard.charts):
                canvas.render_model(chart)

        logger.debug(f"Rendered {dashboard.mode} view with {len(dashboard.charts)} chart(s)")

    def _sync_combos(self):
        pairs = (
            (self.launch_combo, self.selection.selected_launch or ALL_LAUNCHES),
            (self.metric_combo, self.selection.selected_metric),
            (self.compare_combo, self.selection.compare_launch or NO_COMPARE),
            (self.compare_metric_combo, self.selection.compare_metric),
        )
        for combo, value in pairs:
            index = combo.findData(value)
            if index >= 0 and index != combo.currentIndex():
                combo.blockSignals(True)
                combo.setCurrentIndex(index)
                combo.blockSignals(False)

    # ==========================================================================
    # UI Events
    # ==========================================================================

    def _on_launch_changed(self, _index):
        self.set_selection(self.selection.with_launch(self.launch_combo.currentData()))

    def _on_metric_changed(self, _index):
        self.set_selection(self.selection.with_metric(self.metric_combo.currentData()))

    def _on_compare_changed(self, _index):
        self.set_selection(self.selection.with_compare(self.compare_combo.currentData()))

    def _on_compare_metric_changed(self, _index):
        self.set_selection(self.selection.with_compare_metric(self.compare_metric_combo.currentData()))

    def handle_panel_click(self, panel_index: int):
        """Zoom into the clicked panel."""
        if self.telemetry.data is None:
            return
        self.set_selection(self.selection.zoom(panel_index))

    def handle_back(self):
        """Leave zoom mode."""
        self.set_selection(self.selection.unzoom())
