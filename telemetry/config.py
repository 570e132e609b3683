"""
Application configuration.

Values come from the environment (optionally a ``.env`` file loaded with
python-dotenv by ``main.py``), then from command-line overrides.
"""
import logging
import os
from dataclasses import dataclass, replace
from typing import List, Optional

DEFAULT_CSV_SOURCE = "data/rocket_logs.csv"
DEFAULT_WINDOW_TITLE = "Starship Test Analyzer"


@dataclass(frozen=True)
class AppConfig:
    csv_source: str = DEFAULT_CSV_SOURCE
    log_level: str = "INFO"
    window_title: str = DEFAULT_WINDOW_TITLE

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        return cls(
            csv_source=env.get("STARSHIP_CSV_SOURCE", DEFAULT_CSV_SOURCE),
            log_level=env.get("STARSHIP_LOG_LEVEL", "INFO").upper(),
            window_title=env.get("STARSHIP_WINDOW_TITLE", DEFAULT_WINDOW_TITLE),
        )

    def with_args(self, argv: List[str]) -> "AppConfig":
        """
        Apply command-line overrides.

        ``--debug`` switches logging to DEBUG; the first non-flag argument
        replaces the CSV source.
        """
        config = self
        if "--debug" in argv:
            config = replace(config, log_level="DEBUG")
        positional = [arg for arg in argv if not arg.startswith("-")]
        if positional:
            config = replace(config, csv_source=positional[0])
        return config

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO
