import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from telemetry.csv_parser import parse_csv  # noqa: E402

HEADER = "launch_id,timestamp,thrust,pressure,temperature,vibration,stress,heat_shield_temp,ambient,wind,stage,block"

ROWS = [
    "S001,2024-01-01T10:30:45,1000,50,300,2.5,10,400,15,3,ignition,1",
    "S001,2024-01-01T10:30:46,5000,90,450,4.0,12,600,15,3,boost,1",
    "S002,2024-01-02T11:00:00,1200,55,310,3.0,11,420,16,4,ignition,1",
    "S001,2024-01-01T10:30:47,9000,120,700,6.5,14,900,15,3,boost,1",
    "S002,2024-01-02T11:00:01,6000,95,460,5.5,13,650,16,4,boost,1",
]


def make_csv(rows, trailing_newline=True):
    text = "\n".join([HEADER] + list(rows))
    return text + "\n" if trailing_newline else text


@pytest.fixture
def csv_text():
    return make_csv(ROWS)


@pytest.fixture
def telemetry_data(csv_text):
    return parse_csv(csv_text)


@pytest.fixture(scope="session")
def qapp():
    from PyQt5 import QtWidgets

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    yield app
