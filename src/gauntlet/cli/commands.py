# src/gauntlet/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks import task_api

CommandHandler = Callable[[AppState, list[str]], None]

logger = logging.getLogger(__name__)

PROG = "gauntlet"


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    usage: str


class CommandRegistry:
    """argv command registry: one command per process run."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str, usage: str = "") -> None:
        key = name.lower()
        self._commands[key] = Command(
            name=key,
            handler=handler,
            help_text=help_text,
            usage=usage or key,
        )

    def get(self, name: str) -> Command | None:
        return self._commands.get(name.lower())

    def usage_line(self) -> str:
        return f"Usage: {PROG} [{'|'.join(n for n in self._commands if n != 'help')}]"

    def unknown_line(self) -> str:
        names = [n for n in self._commands if n != "help"]
        listed = ", ".join(names[:-1]) + f", or {names[-1]}" if len(names) > 1 else "".join(names)
        return f"Unknown command. Use: {listed}"

    def build_help(self) -> str:
        lines = [self.usage_line(), "", "Commands:"]
        width = max((len(c.usage) for c in self._commands.values()), default=0)
        for cmd in self._commands.values():
            lines.append(f"  {cmd.usage.ljust(width)}  {cmd.help_text}")
        return "\n".join(lines)

    def dispatch(self, state: AppState, argv: list[str]) -> None:
        """
        Run the command named by argv[0] with the remaining arguments.

        Missing or unknown commands print a hint and return normally.
        Errors raised by handlers propagate to the caller.
        """
        if not argv:
            state.console.emit(self.usage_line())
            return

        cmd = self.get(argv[0])
        if cmd is None:
            logger.debug("Unknown command: %r", argv[0])
            state.console.emit(self.unknown_line())
            return

        logger.debug("Dispatching command=%s args=%d", cmd.name, len(argv) - 1)
        cmd.handler(state, argv[1:])


registry = CommandRegistry()


def cmd_add(state: AppState, args: list[str]) -> None:
    if len(args) != 2:
        state.console.emit(f"Usage: {PROG} add <task-name> <task-description>")
        return
    name, description = args
    task_api.add_task(state, name, description)


def cmd_score(state: AppState, args: list[str]) -> None:
    task_api.score_pending_tasks(state)


def cmd_recommend(state: AppState, args: list[str]) -> None:
    task_api.recommend_task(state)


def cmd_done(state: AppState, args: list[str]) -> None:
    """
    done        -> prompt for the id on stdin
    done <id>   -> use the given id
    """
    task_api.complete_task(state, args[0] if args else None)


def cmd_help(state: AppState, args: list[str]) -> None:
    state.console.emit(registry.build_help())


registry.register(
    "add",
    cmd_add,
    help_text="Add a new unscored task.",
    usage="add <task-name> <task-description>",
)
registry.register("score", cmd_score, help_text="Answer the questionnaire for every unscored task.")
registry.register("recommend", cmd_recommend, help_text="Show the highest-scored task.")
registry.register("done", cmd_done, help_text="Remove a finished task (prompts for its id).", usage="done [id]")
registry.register("help", cmd_help, help_text="Show available commands.")
