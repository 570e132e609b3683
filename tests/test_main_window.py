from telemetry.loader import TelemetryState
from telemetry.selection import SelectionState
from ui.main_window import MainWindow


def test_loading_then_ready(qapp, telemetry_data):
    window = MainWindow()
    assert window.dashboard is None

    window.handle_telemetry_loaded(TelemetryState.ready(telemetry_data))

    assert window.selection.selected_launch == "S009"
    assert window.dashboard.mode == "overview"
    assert window.launch_combo.currentData() == "S009"
    assert window.error_label.isHidden()


def test_fetch_error_blocks_rendering(qapp):
    window = MainWindow()
    window.handle_telemetry_loaded(TelemetryState.failed("Failed to load rocket logs. Check CSV path."))

    assert window.dashboard is None
    assert not window.error_label.isHidden()
    assert window.overview_widget.isHidden()
    assert window.focus_widget.isHidden()


def test_panel_click_zooms_and_back_returns(qapp, telemetry_data):
    window = MainWindow()
    window.handle_telemetry_loaded(TelemetryState.ready(telemetry_data))
    window.set_selection(SelectionState(selected_launch="S001"))

    window.handle_panel_click(3)
    assert window.dashboard.zoomed
    assert window.dashboard.charts[0].current.label.startswith("Thrust (N)")
    assert not window.back_button.isHidden()

    window.handle_back()
    assert window.dashboard.mode == "overview"


def test_compare_dropdown_switches_to_combined(qapp, telemetry_data):
    window = MainWindow()
    window.handle_telemetry_loaded(TelemetryState.ready(telemetry_data))

    window.launch_combo.setCurrentIndex(window.launch_combo.findData("S001"))
    window.compare_combo.setCurrentIndex(window.compare_combo.findData("S002"))
    window.compare_metric_combo.setCurrentIndex(window.compare_metric_combo.findData("pressure"))

    assert window.selection.compare_launch == "S002"
    assert window.dashboard.mode == "combined"
    assert window.back_button.isHidden()


def test_infinite_cells_render_without_error(qapp):
    from telemetry.csv_parser import parse_csv
    from conftest import make_csv

    data = parse_csv(make_csv([
        "S009,2024-01-09T10:30:45,inf,50,300,2.5,10,1e999,15,3,boost,2",
        "S009,2024-01-09T10:30:46,-inf,60,310,2.6,10,410,15,3,boost,2",
    ]))
    window = MainWindow()
    window.handle_telemetry_loaded(TelemetryState.ready(data))

    assert window.dashboard.mode == "overview"
    assert window.dashboard.charts[0].current.values == (0.0, 0.0)
    assert window.dashboard.charts[4].current.values == (0.0, 410.0)
    assert window.error_label.isHidden()
