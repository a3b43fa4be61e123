# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import QuitRequested
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_view import render_task_list

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "> "


def _emit(text: str) -> None:
    # Immediate user-visible notices (e.g. a failed write) ahead of the command output.
    print(text, flush=True)


def run_console_loop(state: AppState) -> None:
    """
    Read-eval-print loop over stdin/stdout.

    Stops on the quit command, end of input, or Ctrl+C.
    """
    prompt = str(getattr(getattr(state, "settings", None), "prompt", DEFAULT_PROMPT))
    logger.info("Console connector started (file=%s).", getattr(state.task_store, "path", "?"))

    print(render_task_list(state.task_store.tasks))

    while True:
        try:
            line = input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        try:
            response = command_registry.handle(state, line, emit=_emit)
        except QuitRequested:
            logger.info("Console quit command received.")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            print(response)

    logger.info("Console connector finished.")
