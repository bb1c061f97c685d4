"""
Design (shell.py)
- Purpose: The interactive menu loop: read one line at a time, map the first character to an
           operation, and prompt for that operation's parameters.
- Inputs: BoatRepo (shared state), data file path (saved on exit), text streams.
- Outputs: Exit status from run().
- Side effects: Writes prompts/listings to stdout; mutates the repo; saves on exit.
- Thread-safety: Single-threaded; blocks on stdin reads only.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, TextIO

from .config import ADD_PROMPT, AMOUNT_PROMPT, EXIT_MESSAGE, MENU_PROMPT, NAME_PROMPT, WELCOME_BANNER
from .errors import MarinaError, StorageError
from .logging import get_logger
from .operations import (
    accept_payment,
    add_boat,
    apply_monthly_charges,
    list_inventory,
    parse_amount,
    remove_boat,
)
from .repository import BoatRepo
from .storage import save_boats

logger = get_logger(__name__)


class ShellState(Enum):
    AWAITING_COMMAND = "command"
    AWAITING_ADD_CSV = "add_csv"
    AWAITING_REMOVE_NAME = "remove_name"
    AWAITING_PAYMENT_NAME = "payment_name"
    AWAITING_PAYMENT_AMOUNT = "payment_amount"
    EXITED = "exited"


PROMPTS = {
    ShellState.AWAITING_COMMAND: MENU_PROMPT,
    ShellState.AWAITING_ADD_CSV: ADD_PROMPT,
    ShellState.AWAITING_REMOVE_NAME: NAME_PROMPT,
    ShellState.AWAITING_PAYMENT_NAME: NAME_PROMPT,
    ShellState.AWAITING_PAYMENT_AMOUNT: AMOUNT_PROMPT,
}


class MarinaShell:
    """
    Design (MarinaShell)
    - Purpose: Encapsulate the prompt loop and its small state machine.
    - State:
        state: current ShellState
        exit_status: 0 after a clean save on exit, 1 if the save failed
        _pending_name: boat name remembered between the two payment prompts
    - Public methods:
        run(): loop until X (or end of input); returns exit status
        handle_line(line): feed one input line (used by run and by tests)
    """

    def __init__(
        self,
        repo: BoatRepo,
        data_path: Path,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.repo = repo
        self.data_path = data_path
        # resolved at call time so test runners that swap sys.std* are honoured
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

        self.state = ShellState.AWAITING_COMMAND
        self.exit_status = 0
        self._pending_name = ""

        self._commands: Dict[str, Callable[[], None]] = {
            "i": self.show_inventory,
            "a": lambda: self._goto(ShellState.AWAITING_ADD_CSV),
            "r": lambda: self._goto(ShellState.AWAITING_REMOVE_NAME),
            "p": lambda: self._goto(ShellState.AWAITING_PAYMENT_NAME),
            "m": self.charge_month,
            "x": self.exit,
        }
        self._handlers: Dict[ShellState, Callable[[str], None]] = {
            ShellState.AWAITING_COMMAND: self._on_command,
            ShellState.AWAITING_ADD_CSV: self._on_add_csv,
            ShellState.AWAITING_REMOVE_NAME: self._on_remove_name,
            ShellState.AWAITING_PAYMENT_NAME: self._on_payment_name,
            ShellState.AWAITING_PAYMENT_AMOUNT: self._on_payment_amount,
        }

    # ---------- Loop ----------

    def run(self) -> int:
        self._echo(WELCOME_BANNER)
        while self.state is not ShellState.EXITED:
            self._echo(PROMPTS[self.state], end="")
            line = self.stdin.readline()
            if line == "":
                # stdin closed: behave as if X had been typed
                logger.info("End of input; saving and exiting")
                self._echo("")
                self.exit()
                break
            self.handle_line(line)
        return self.exit_status

    def handle_line(self, line: str) -> None:
        if self.state is ShellState.EXITED:
            raise RuntimeError("shell has already exited")
        handler = self._handlers[self.state]
        try:
            handler(line)
        except MarinaError as exc:
            self._echo(str(exc))
            self.state = ShellState.AWAITING_COMMAND

    # ---------- Commands ----------

    def show_inventory(self) -> None:
        for row in list_inventory(self.repo):
            self._echo(row)

    def charge_month(self) -> None:
        for boat in apply_monthly_charges(self.repo):
            self._echo(f"{boat.name} has no valid storage type; not billed")

    def exit(self) -> None:
        self._echo(EXIT_MESSAGE)
        self.state = ShellState.EXITED
        try:
            save_boats(self.repo, self.data_path)
        except StorageError as exc:
            print(exc, file=self.stderr)
            self.exit_status = 1

    # ---------- State handlers ----------

    def _on_command(self, line: str) -> None:
        first = line.rstrip("\r\n")[:1]
        command = self._commands.get(first.lower())
        if command is None:
            self._echo(f"Invalid option {first}")
            return
        command()

    def _on_add_csv(self, line: str) -> None:
        self.state = ShellState.AWAITING_COMMAND
        add_boat(self.repo, line)

    def _on_remove_name(self, line: str) -> None:
        self.state = ShellState.AWAITING_COMMAND
        remove_boat(self.repo, line.rstrip("\r\n"))

    def _on_payment_name(self, line: str) -> None:
        self._pending_name = line.rstrip("\r\n")
        self.state = ShellState.AWAITING_PAYMENT_AMOUNT

    def _on_payment_amount(self, line: str) -> None:
        self.state = ShellState.AWAITING_COMMAND
        name, self._pending_name = self._pending_name, ""
        accept_payment(self.repo, name, parse_amount(line))

    # ---------- internal helpers ----------

    def _goto(self, state: ShellState) -> None:
        self.state = state

    def _echo(self, text: str, end: str = "\n") -> None:
        print(text, end=end, file=self.stdout, flush=True)
