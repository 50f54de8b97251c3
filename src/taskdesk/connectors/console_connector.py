# src/taskdesk/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import EXIT_CHOICES
from ..cli.commands import registry as menu_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    read: Reader = input,
    write: Writer = print,
) -> None:
    """
    Menu loop: show the menu, read a choice, run it, print the reply.

    Ends on the exit choice, EOF or Ctrl+C. Task errors are already turned
    into replies by the registry; anything else is logged and reported, and
    the loop carries on.
    """
    app_name = str(getattr(state.settings, "app_name", "taskdesk"))
    logger.info("Console connector started (capacity=%s).", state.active.capacity)

    while True:
        write("")
        write(menu_registry.build_menu(app_name))
        try:
            choice = read("Choose an option: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if choice.lower() in EXIT_CHOICES:
            logger.info("Console exit command received.")
            write("Goodbye!")
            break

        try:
            reply = menu_registry.handle(state, choice, read)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed while handling choice %s, exiting.", choice)
            write("")
            break
        except Exception:
            logger.exception("Menu handler crashed (choice=%s).", choice)
            reply = "Internal error while handling that option."

        if reply is not None:
            write(reply)

    logger.info(
        "Console connector finished (active=%s completed=%s urgent=%s).",
        state.active.count,
        len(state.history),
        len(state.urgent),
    )
