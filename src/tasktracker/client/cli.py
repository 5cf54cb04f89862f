"""Interactive terminal front-end for the task board.

Each cycle renders the board, reads one command and applies it. The board
re-fetches from the API after every mutation, so the frame always shows the
server's view.
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from ..logging_setup import setup_logging
from ..settings import get_settings
from .board import FILTERS, TaskBoard
from .http import TaskApiClient
from .render import render_board

logger = logging.getLogger(__name__)

HELP = "\n".join(
    [
        "Commands:",
        "  add <title...>      Add a new task",
        "  toggle <id>         Mark a task done / undo",
        "  delete <id>         Delete a task (also: rm <id>)",
        f"  filter <name>       Show {', '.join(FILTERS)} tasks",
        "  refresh             Reload tasks from the server",
        "  help                Show this help",
        "  quit                Exit (also: exit)",
    ]
)


class CLI:
    def __init__(
        self,
        board: TaskBoard,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.board = board
        self._read = read
        self._write = write

    def run(self) -> None:
        """Main loop; returns on quit, end of input or Ctrl+C."""
        self.board.fetch()
        try:
            while True:
                self._write(render_board(self.board.view(), self.board.message))
                line = self._read("\n> ").strip()
                if not line:
                    continue
                if not self.handle(line):
                    break
        except (KeyboardInterrupt, EOFError):
            pass
        self._write("Goodbye.")

    def handle(self, line: str) -> bool:
        """Apply one command. Returns False when the loop should stop."""
        tokens = line.split()
        cmd = tokens[0].lower()
        args = tokens[1:]
        self.board.message = ""

        if cmd in {"quit", "exit"}:
            return False
        if cmd == "help":
            self.board.message = HELP
        elif cmd == "add":
            self.board.title = line.split(None, 1)[1] if args else ""
            if not self.board.add():
                if not self.board.message:
                    self.board.message = "Title required."
        elif cmd == "toggle":
            self._with_task(args, "toggle", lambda task_id: self.board.toggle(self.board.find(task_id)))
        elif cmd in {"delete", "rm"}:
            self._with_task(args, "delete", self.board.delete)
        elif cmd == "filter":
            if len(args) != 1:
                self.board.message = f"Usage: filter <{'|'.join(f.lower() for f in FILTERS)}>"
            else:
                try:
                    self.board.set_filter(args[0])
                except ValueError as exc:
                    self.board.message = str(exc)
        elif cmd == "refresh":
            self.board.fetch()
        else:
            self.board.message = "Unknown command. Type 'help' for instructions."
        return True

    def _with_task(self, args: List[str], verb: str, action: Callable[[int], bool]) -> None:
        if len(args) != 1 or not args[0].isdecimal():
            self.board.message = f"Usage: {verb} <id>"
            return
        task_id = int(args[0])
        try:
            action(task_id)
        except KeyError:
            self.board.message = f"No task with id {task_id}."


# PUBLIC_INTERFACE
def main(argv: Optional[List[str]] = None) -> None:
    """Console entry point for the task board client."""
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="tasktracker-client", description="Terminal task board.")
    parser.add_argument("--api-url", default=settings.api_url, help="Base URL of the task API")
    parser.add_argument("--log-level", default="WARNING", help="Console log level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger.debug("Using task API at %s", args.api_url)
    with TaskApiClient(args.api_url) as api:
        CLI(TaskBoard(api)).run()


if __name__ == "__main__":
    main()
