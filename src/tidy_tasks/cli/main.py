# src/tidy_tasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console connector in the
main thread until the user quits.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleSurface, run_console_loop
from ..logging_setup import setup_logging
from ..view.binder import ViewBinder

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file or "off")

    state = create_initial_state(settings=settings)
    surface = ConsoleSurface(
        color=settings.color and sys.stdout.isatty(),
        title=settings.app_name,
    )
    binder = ViewBinder(state, surface)

    try:
        run_console_loop(binder, surface)
    finally:
        state.close()
        logger.info("Bye.")


if __name__ == "__main__":
    main()
