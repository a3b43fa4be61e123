# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

from ..core.ports import CommandEmitter
from ..core.state import AppState
from ..tasks.task_store import CannotMoveTask, InvalidTaskNumber, StorageError
from ..tasks.task_view import render_rename, render_task_list

CommandHandler = Callable[[AppState, str | None, CommandEmitter | None], str]

HELP_COMMAND = "?"
UNKNOWN_COMMAND = f'Unknown command. Type "{HELP_COMMAND}" for help.'
INVALID_NUMBER = "Invalid task number."

_DIGITS_RE = re.compile(r"[0-9]+")

logger = logging.getLogger(__name__)


class QuitRequested(Exception):
    """Raised by the quit command; the console loop stops on it."""


def split_command(line: str) -> tuple[str, str | None]:
    """
    "r 2 call the bank" -> ("r", "2 call the bank")

    Only the first token is split off, so multi-word arguments stay intact.
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", None
    name = parts[0].lower()
    rest = parts[1] if len(parts) > 1 else None
    return name, rest


def parse_task_number(raw: str) -> int | None:
    """User-facing 1-based number -> 0-based index, or None if not a run of digits."""
    if not _DIGITS_RE.fullmatch(raw):
        return None
    try:
        return int(raw) - 1
    except ValueError:
        # Past the int conversion digit limit.
        return None


class CommandRegistry:
    """Single-letter command registry used by the console connector (a, x, d, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage or key, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle one input line like "x 3".
        Returns the text to show, or None for an empty line.
        Raises QuitRequested for the quit command.
        """
        name, rest = split_command(line)
        if not name:
            return None

        handler = self._handlers.get(name)
        if not handler:
            return UNKNOWN_COMMAND

        return handler(state, rest, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _persist(
    notices: list[str],
    emit: CommandEmitter | None,
    op: Callable[..., Any],
    *args: Any,
) -> None:
    """
    Run a store mutation.

    The store applies the change before writing, so a StorageError here means
    the in-memory list changed but the file did not. Report it and go on.
    """
    try:
        op(*args)
    except StorageError as e:
        logger.warning("Task file write failed: %s", e)
        if emit is not None:
            emit(str(e))
        else:
            notices.append(str(e))


def _with_list(state: AppState, notices: list[str], *extra: str) -> str:
    return "\n".join([*notices, *extra, render_task_list(state.task_store.tasks)])


def _run_indexed(
    state: AppState,
    rest: str | None,
    emit: CommandEmitter | None,
    usage: str,
    op: Callable[[int], Any],
) -> str:
    if rest is None:
        return f"Usage: {usage}"
    index = parse_task_number(rest)
    if index is None:
        return INVALID_NUMBER

    notices: list[str] = []
    try:
        _persist(notices, emit, op, index)
    except (InvalidTaskNumber, CannotMoveTask) as e:
        return str(e)
    return _with_list(state, notices)


def cmd_add(state: AppState, rest: str | None, emit: CommandEmitter | None = None) -> str:
    if not rest:
        return "Usage: a <task description>"
    notices: list[str] = []
    _persist(notices, emit, state.task_store.add, rest)
    return _with_list(state, notices)


def cmd_list(state: AppState, rest: str | None, emit: CommandEmitter | None = None) -> str:
    return render_task_list(state.task_store.tasks)


def cmd_toggle(state: AppState, rest: str | None, emit: CommandEmitter | None = None) -> str:
    return _run_indexed(state, rest, emit, "x <task number>", state.task_store.toggle)


def cmd_remove(state: AppState, rest: str | None, emit: CommandEmitter | None = None) -> str:
    return _run_indexed(state, rest, emit, "d <task number>", state.task_store.remove)


def cmd_move_up(state: AppState, rest: str | None, emit: CommandEmitter | None = None) -> str:
    return _run_indexed(state, rest, emit, "h <task number>", state.task_store.move_up)


def cmd_move_down(state: AppState, rest: str | None, emit: CommandEmitter | None = None) -> str:
    return _run_indexed(state, rest, emit, "l <task number>", state.task_store.move_down)


def cmd_rename(state: AppState, rest: str | None, emit: CommandEmitter | None = None) -> str:
    """
    r <n> <new description>

    A missing part is a usage error; a non-numeric <n> is an invalid number.
    """
    usage = "Usage: r <task number> <new task description>"
    parts = rest.split(maxsplit=1) if rest else []
    if len(parts) < 2:
        return usage

    index = parse_task_number(parts[0])
    if index is None:
        return INVALID_NUMBER
    new_description = parts[1]

    store = state.task_store
    try:
        # Read before renaming: a failed write must not lose the old text.
        old = store.get(index).description
    except InvalidTaskNumber as e:
        return str(e)

    notices: list[str] = []
    _persist(notices, emit, store.rename, index, new_description)
    return _with_list(state, notices, render_rename(old, new_description))


def cmd_help(state: AppState, rest: str | None, emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_quit(state: AppState, rest: str | None, emit: CommandEmitter | None = None) -> str:
    raise QuitRequested()


registry.register("a", cmd_add, help_text="Add a new task", usage="a <task description>")
registry.register("t", cmd_list, help_text="List all tasks")
registry.register(
    "x", cmd_toggle, help_text="Mark task as complete/incomplete", usage="x <task number>"
)
registry.register("d", cmd_remove, help_text="Remove task", usage="d <task number>")
registry.register("h", cmd_move_up, help_text="Move task higher", usage="h <task number>")
registry.register("l", cmd_move_down, help_text="Move task lower", usage="l <task number>")
registry.register(
    "r", cmd_rename, help_text="Rename task", usage="r <task number> <new description>"
)
registry.register(HELP_COMMAND, cmd_help, help_text="Show this help message")
registry.register("q", cmd_quit, help_text="Quit the application")
