from collections import Counter

import pytest

from telemetry.csv_parser import COLUMNS, coerce_float, parse_csv, parse_row
from telemetry.model import METRICS

from conftest import ROWS, make_csv


def test_columns_fixed_order():
    assert len(COLUMNS) == 12
    assert COLUMNS[7] == "heat_shield_temp"
    assert COLUMNS[10] == "stage"


def test_per_launch_series_aligned(telemetry_data):
    counts = Counter(row.split(",")[0] for row in ROWS)
    for launch_id, series in telemetry_data.launches.items():
        assert len(series.labels) == counts[launch_id]
        for metric in METRICS:
            assert len(series.values(metric)) == counts[launch_id]


def test_aggregate_spans_all_rows(telemetry_data):
    assert telemetry_data.row_count == len(ROWS)
    for metric in METRICS:
        assert len(telemetry_data.aggregate.values(metric)) == len(ROWS)


def test_launch_lengths_sum_to_aggregate(telemetry_data):
    total = sum(len(s) for s in telemetry_data.launches.values())
    assert total == len(telemetry_data.aggregate)


def test_rows_keep_file_order(telemetry_data):
    assert telemetry_data.launch_ids() == ["S001", "S002"]
    assert telemetry_data.launches["S001"].thrust == [1000.0, 5000.0, 9000.0]
    assert telemetry_data.aggregate.thrust == [1000.0, 5000.0, 1200.0, 9000.0, 6000.0]


def test_labels_use_last_eight_timestamp_chars(telemetry_data):
    assert telemetry_data.launches["S001"].labels[0] == "10:30:45 (ignition)"
    assert telemetry_data.aggregate.labels[0] == "S001 - 10:30:45 (ignition)"
    assert telemetry_data.aggregate.labels[2] == "S002 - 11:00:00 (ignition)"


def test_label_with_zone_suffix_is_cut_at_eight_chars():
    data = parse_csv(make_csv(["S001,2024-01-01T10:30:45Z,1,1,1,1,1,1,1,1,boost,1"]))
    assert data.aggregate.labels == ["S001 - 0:30:45Z (boost)"]


def test_blank_lines_skipped():
    text = make_csv(ROWS[:2]) + "\n\n"
    data = parse_csv(text)
    assert data.row_count == 2


def test_header_only():
    data = parse_csv(make_csv([]))
    assert data.row_count == 0
    assert data.launches == {}


def test_non_numeric_cell_defaults_to_zero():
    rows = [
        "S001,2024-01-01T10:30:45,abc,50,300,2.5,10,400,15,3,ignition,1",
        "S001,2024-01-01T10:30:46,5000,90,450,4.0,12,600,15,3,boost,1",
    ]
    data = parse_csv(make_csv(rows))
    series = data.launches["S001"]
    assert series.thrust == [0.0, 5000.0]
    assert series.pressure == [50.0, 90.0]
    assert series.heat_shield_temp == [400.0, 600.0]
    assert data.coerced_cells == 1


@pytest.mark.parametrize(
    "raw", ["", "abc", "nan", "12..5", None, "inf", "-inf", "infinity", "1e999", "1_000"]
)
def test_coerce_float_lossy(raw):
    assert coerce_float(raw) == (0.0, False)


def test_coerce_float_valid():
    assert coerce_float("12.5") == (12.5, True)
    assert coerce_float(" -3 ") == (-3.0, True)


def test_short_row_reads_missing_fields_as_empty():
    sample, coerced = parse_row(["S003", "2024-01-03T09:00:00", "700"], line_no=5)
    assert sample.launch_id == "S003"
    assert sample.thrust == 700.0
    assert sample.heat_shield_temp == 0.0
    assert sample.stage == ""
    assert coerced == 4


def test_long_row_ignores_extra_fields():
    fields = ROWS[0].split(",") + ["extra", "more"]
    sample, coerced = parse_row(fields)
    assert sample.stage == "ignition"
    assert sample.vibration == 2.5
    assert coerced == 0


def test_crlf_line_endings():
    text = "\r\n".join([make_csv([]).strip()] + ROWS[:2]) + "\r\n"
    data = parse_csv(text)
    assert data.row_count == 2
    assert data.launches["S001"].labels[1] == "10:30:46 (boost)"


def test_infinite_cell_defaults_to_zero():
    data = parse_csv(make_csv(["S001,2024-01-01T10:30:45,inf,1e999,300,2.5,10,400,15,3,boost,1"]))
    series = data.launches["S001"]
    assert series.thrust == [0.0]
    assert series.pressure == [0.0]
    assert series.temperature == [300.0]
    assert data.coerced_cells == 2


def test_rows_split_only_on_newline():
    rows = [
        "S001,2024-01-01T10:30:45,1000,50,300,2.5,10,400,15,3,bo\x0cost,1",
        "S001,2024-01-01T10:30:46,2000,60,310,2.6,10,410,15,3,ign ition,1",
    ]
    data = parse_csv(make_csv(rows))
    assert data.row_count == 2
    assert data.launches["S001"].labels[0] == "10:30:45 (bo\x0cost)"
    assert data.launches["S001"].thrust == [1000.0, 2000.0]
