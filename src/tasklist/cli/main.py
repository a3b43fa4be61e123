# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the task file, then runs the
console REPL until quit or end of input.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, load_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "ERROR")).upper()
    console_level = getattr(logging, level_name, logging.ERROR)
    log_dir = settings.log_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (data_file=%s)...", settings.app_name, settings.data_file)

    state = create_initial_state(settings=settings)
    load_tasks(state, emit=print)

    run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
