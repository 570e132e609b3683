#!/usr/bin/env python3
"""
Starship Test Analyzer - Main Entry Point

Loads a CSV log of static-fire telemetry and shows per-launch charts with
comparison overlay and zoom.

Usage:
    python main.py                          # Use STARSHIP_CSV_SOURCE or data/rocket_logs.csv
    python main.py path/or/url.csv          # Load a specific log
    python main.py --debug                  # Verbose logging
"""
import sys
import logging
from PyQt5 import QtWidgets

# Configure logging FIRST - before any other imports
logging.basicConfig(
    level=logging.INFO,
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from telemetry.catalog import LaunchCatalog
from telemetry.config import AppConfig
from telemetry.loader import CsvLoadWorker
from ui.main_window import MainWindow

logger = logging.getLogger("main")


def main(config: AppConfig):
    """
    Entry point for the dashboard.

    Args:
        config: Resolved application configuration
    """
    logging.getLogger().setLevel(config.log_level_value)
    logger.info(f"Starting dashboard with source {config.csv_source}")

    app = QtWidgets.QApplication(sys.argv)

    window = MainWindow(catalog=LaunchCatalog(), title=config.window_title)

    loader_thread = CsvLoadWorker(config.csv_source)
    loader_thread.loaded.connect(window.handle_telemetry_loaded)
    loader_thread.status_update.connect(lambda msg: logger.info(f"[Loader] {msg}"))
    loader_thread.start()

    window.show()

    # Run Qt event loop
    result = app.exec_()

    loader_thread.wait()
    logger.info("Shutting down")
    sys.exit(result)


def run():
    """Console-script entry: resolve config from env + argv and start the app."""
    config = AppConfig.from_env().with_args(sys.argv[1:])

    try:
        main(config)
    except Exception as e:
        print("\n" + "="*60)
        print("FATAL ERROR:")
        print("="*60)
        print(f"Error type: {type(e).__name__}")
        print(f"Error message: {e}")
        import traceback
        print("\nFull traceback:")
        traceback.print_exc()
        print("="*60)
        sys.exit(1)


if __name__ == "__main__":
    run()
