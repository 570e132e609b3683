"""
CSV parser for rocket static-fire logs.

Turns the raw text of ``rocket_logs.csv`` into a :class:`TelemetryData`:
one aggregate series over every row plus one series per launch id.

Bad numeric cells are not errors. Each one is replaced with 0.0 and counted,
so a single corrupt row never aborts the session.
"""
import logging
import math
from typing import List, Sequence, Tuple

from .model import AggregateSeries, LaunchSeries, TelemetryData, TelemetrySample

logger = logging.getLogger(__name__)

COLUMNS = (
    "launch_id",
    "timestamp",
    "thrust",
    "pressure",
    "temperature",
    "vibration",
    "stress",
    "heat_shield_temp",
    "ambient",
    "wind",
    "stage",
    "block",
)

_INDEX = {name: i for i, name in enumerate(COLUMNS)}


def coerce_float(raw: str) -> Tuple[float, bool]:
    """
    Parse one numeric cell.

    Returns (value, ok). Empty, non-numeric, infinite and NaN cells give
    (0.0, False). Digit-group underscores are not accepted.
    """
    if raw is None or "_" in raw:
        return 0.0, False
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0, False
    if not math.isfinite(value):
        return 0.0, False
    return value, True


def parse_row(fields: Sequence[str], line_no: int = 0) -> Tuple[TelemetrySample, int]:
    """
    Build a sample from one split CSV row.

    Returns the sample and the number of numeric cells that were defaulted.
    Short rows read missing fields as empty strings; extra fields are ignored.
    """
    if len(fields) != len(COLUMNS):
        logger.warning(
            f"Line {line_no}: expected {len(COLUMNS)} fields, got {len(fields)}"
        )

    def field(name: str) -> str:
        i = _INDEX[name]
        return fields[i] if i < len(fields) else ""

    coerced = 0
    metrics = {}
    for name in ("thrust", "pressure", "temperature", "vibration", "heat_shield_temp"):
        raw = field(name)
        value, ok = coerce_float(raw)
        if not ok:
            coerced += 1
            logger.debug(f"Line {line_no}: {name}={raw!r} is not numeric, using 0.0")
        metrics[name] = value

    sample = TelemetrySample(
        launch_id=field("launch_id"),
        timestamp=field("timestamp"),
        stage=field("stage"),
        **metrics,
    )
    return sample, coerced


def parse_rows(text: str) -> List[Tuple[int, List[str]]]:
    """Split CSV text into (line number, fields), dropping the header and blank lines."""
    rows = []
    for line_no, line in enumerate(text.split("\n")[1:], start=2):
        line = line.rstrip("\r")
        if not line:
            continue
        rows.append((line_no, line.split(",")))
    return rows


def parse_csv(text: str) -> TelemetryData:
    """
    Parse a whole log.

    Rows are appended in file order to the aggregate series and to the series
    of their launch id, which is created on first occurrence. Nothing is
    re-sorted by timestamp.
    """
    aggregate = AggregateSeries()
    launches = {}
    coerced_total = 0

    for line_no, fields in parse_rows(text):
        sample, coerced = parse_row(fields, line_no)
        coerced_total += coerced

        series = launches.get(sample.launch_id)
        if series is None:
            series = launches[sample.launch_id] = LaunchSeries()
        series.append(sample.label, sample)
        aggregate.append(sample.aggregate_label, sample)

    data = TelemetryData(aggregate=aggregate, launches=launches, coerced_cells=coerced_total)
    logger.info(
        f"Parsed {data.row_count} rows across {len(launches)} launches "
        f"({coerced_total} cells defaulted to 0.0)"
    )
    return data
