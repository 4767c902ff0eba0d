# src/tasktrack/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_models import Task

Prompt = Callable[[str], str]
# Reads one line from the user after showing a prompt (input() in the console).

CommandHandler = Callable[[AppState, Prompt], str]

EXIT_KEY = "5"
EXIT_LABEL = "Exit"

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MenuEntry:
    key: str
    label: str


class CommandRegistry:
    """Numbered menu registry used by the console connector (1..4, plus aliases)."""

    def __init__(self) -> None:
        self._entries: dict[str, MenuEntry] = {}
        self._handlers: dict[str, CommandHandler] = {}

    def register(
        self,
        key: str,
        handler: CommandHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        k = key.lower()
        self._entries[k] = MenuEntry(key=key, label=label)
        self._handlers[k] = handler
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def register_hidden(self, handler: CommandHandler, aliases: list[str]) -> None:
        """Route aliases to a handler without adding a menu line."""
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, choice: str, prompt: Prompt) -> str:
        """
        Run the command for a menu choice like "1" or "add".
        Returns the text to show the user.
        """
        name = choice.strip().lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown choice: {choice.strip()}. Pick a number from the menu."
        return handler(state, prompt)

    def build_menu(self) -> str:
        lines = [f"{e.key}. {e.label}" for e in self._entries.values()]
        lines.append(f"{EXIT_KEY}. {EXIT_LABEL}")
        return "\n".join(lines)


registry = CommandRegistry()


def render_task(task: Task) -> str:
    return f"[ {task.status_mark} ] {task.title}"


def _plural(n: int) -> str:
    return "task" if n == 1 else "tasks"


def cmd_add(state: AppState, prompt: Prompt) -> str:
    title = prompt("Enter task title: ")
    state.task_store.add_task(title)
    logger.debug("add command title=%r", title)
    return f"Added: {title}"


def cmd_list(state: AppState, prompt: Prompt) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks."
    return "\n".join(render_task(t) for t in tasks)


def cmd_complete(state: AppState, prompt: Prompt) -> str:
    title = prompt("Enter task title to complete: ")
    n = state.task_store.complete_task(title)
    if n == 0:
        return f"No task titled {title!r}."
    return f"Completed {n} {_plural(n)} titled {title!r}."


def cmd_delete(state: AppState, prompt: Prompt) -> str:
    title = prompt("Enter task title to delete: ")
    n = state.task_store.delete_task(title)
    if n == 0:
        return f"No task titled {title!r}."
    return f"Deleted {n} {_plural(n)} titled {title!r}."


def cmd_help(state: AppState, prompt: Prompt) -> str:
    return registry.build_menu()


registry.register("1", cmd_add, "Add Task", aliases=["add"])
registry.register("2", cmd_list, "List Tasks", aliases=["list", "ls"])
registry.register("3", cmd_complete, "Complete Task", aliases=["complete", "done"])
registry.register("4", cmd_delete, "Delete Task", aliases=["delete", "rm"])

registry.register_hidden(cmd_help, ["help", "h", "?"])
