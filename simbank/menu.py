"""
Menu controller – shows the transaction menu, dispatches, and asks whether
to return to the menu or exit.
"""
import logging
from typing import Optional

from .config import CONFIG
from .console import Console
from .errors import OperationAborted, UnrecognizedMenuChoice
from .operations import OPERATIONS
from .session import Session
from .validation import parse_menu_choice, parse_yes_no, prompt_until_valid

logger = logging.getLogger(__name__)

FAREWELL = "Thank you for using the program!"


class MenuController:
    """
    Drives one Session from start to exit. The session is built here unless
    one is passed in, and is closed when the operator leaves.
    """

    def __init__(self, session: Optional[Session] = None, console: Optional[Console] = None):
        self.session = session if session is not None else Session()
        self.console = console if console is not None else Console()

    def print_menu(self) -> None:
        self.console.say(f"\n===== {CONFIG['app_name'].upper()} =====")
        self.console.say("Select Transaction:")
        for number, (label, _) in OPERATIONS.items():
            self.console.say(f"[{number}]. {label}")
        self.console.say()

    def dispatch(self, choice: int) -> None:
        """Run the operation for `choice`; report it if it aborts."""
        label, operation = OPERATIONS[choice]
        logger.info("Selected %s", label)
        try:
            operation(self.session, self.console)
        except OperationAborted as e:
            logger.warning("%s aborted: %s", label, e)
            self.console.say(str(e))

    def ask_return_to_menu(self) -> bool:
        answer = prompt_until_valid(self.console, "Back to the main menu (Y/N): ", parse_yes_no)
        return answer == "Y"

    def run(self) -> None:
        try:
            while True:
                self.print_menu()
                try:
                    choice = parse_menu_choice(self.console.ask("Please select an option: "))
                except UnrecognizedMenuChoice as e:
                    self.console.say(str(e))
                    continue
                self.dispatch(choice)
                if not self.ask_return_to_menu():
                    break
        except EOFError:
            logger.info("Input closed, leaving the menu")
        self.session.close()
        self.console.say(FAREWELL)
