# src/tasktrack/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import EXIT_KEY, Prompt
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_CHOICES = frozenset({EXIT_KEY, "exit", "quit", "q"})
CHOICE_PROMPT = "> "

Writer = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    read: Prompt = input,
    write: Writer = print,
) -> None:
    """
    Interactive menu loop. Returns when the user exits (menu 5, EOF or Ctrl+C).

    Titles are passed to the store exactly as read; only the menu choice is trimmed.
    """
    logger.info("Console connector started.")
    menu = command_registry.build_menu()

    while True:
        write(menu)
        try:
            choice = read(CHOICE_PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not choice:
            continue

        if choice.lower() in EXIT_CHOICES:
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, choice, read)
        except EOFError:
            logger.info("Console EOF received during a prompt, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt during a prompt, exiting.")
            write("")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response:
            write(response)

    logger.info("Console connector finished.")
