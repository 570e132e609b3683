"""
One-shot telemetry loader.

Fetches the CSV log (local file or HTTP URL), parses it and hands the result
to the UI as an immutable :class:`TelemetryState`. The Qt worker runs the
fetch once at startup, off the UI thread; there is no retry and no timeout.
"""
import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import aiohttp
from PyQt5 import QtCore

from .csv_parser import parse_csv
from .model import TelemetryData

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load rocket logs. Check CSV path."


class TelemetryFetchError(Exception):
    """The CSV log could not be fetched (network failure or missing file)."""


@dataclass(frozen=True)
class TelemetryState:
    loading: bool
    error: Optional[str] = None
    data: Optional[TelemetryData] = None

    @classmethod
    def pending(cls) -> "TelemetryState":
        return cls(loading=True)

    @classmethod
    def ready(cls, data: TelemetryData) -> "TelemetryState":
        return cls(loading=False, data=data)

    @classmethod
    def failed(cls, message: str) -> "TelemetryState":
        return cls(loading=False, error=message)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def fetch_url(url: str) -> str:
    """GET the log over HTTP and return the body as text."""
    timeout = aiohttp.ClientTimeout(total=None)

    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.get(url) as response:
            if response.status != 200:
                raise TelemetryFetchError(f"HTTP {response.status} fetching {url}")
            return await response.text()


def read_source(source: str) -> str:
    """
    Return the raw CSV text from a path or URL.

    Raises:
        TelemetryFetchError: on any network or filesystem failure
    """
    if is_url(source):
        try:
            return asyncio.run(fetch_url(source))
        except (aiohttp.ClientError, UnicodeDecodeError) as e:
            raise TelemetryFetchError(f"Could not fetch {source}: {e}") from e

    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TelemetryFetchError(f"Could not read {source}: {e}") from e


def load_telemetry(source: str) -> TelemetryState:
    """Fetch and parse the log. Fetch failures become a failed state."""
    logger.info(f"Loading telemetry from {source}")
    try:
        text = read_source(source)
    except TelemetryFetchError as e:
        logger.error(f"CSV fetch error: {e}", exc_info=True)
        return TelemetryState.failed(LOAD_ERROR_MESSAGE)
    return TelemetryState.ready(parse_csv(text))


class CsvLoadWorker(QtCore.QThread):
    """
    Background thread that loads the telemetry log once.

    Signals:
        loaded(TelemetryState) - Emitted exactly once with the final state
        status_update(str message) - Status messages for logging
    """

    loaded = QtCore.pyqtSignal(object)
    status_update = QtCore.pyqtSignal(str)

    def __init__(self, source: str, parent=None):
        super().__init__(parent)
        self.source = source

    def run(self):
        self.status_update.emit(f"Loading {self.source}...")
        try:
            state = load_telemetry(self.source)
        except Exception as e:
            logger.error(f"Telemetry load error: {e}", exc_info=True)
            state = TelemetryState.failed(LOAD_ERROR_MESSAGE)
        if state.error:
            self.status_update.emit(state.error)
        else:
            self.status_update.emit(f"Loaded {state.data.row_count} rows")
        self.loaded.emit(state)
