"""Application entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO

from .intro_menu import IntroMenu
from .user import ACCOUNTS_FILE
from .users import USERS_FILE, Users


class BankApp:
    """The budget application."""

    def __init__(
        self,
        users: Users | None = None,
        input_func: Callable[[str], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.users = users if users is not None else Users()
        self._input = input_func if input_func is not None else input
        self.out = out if out is not None else sys.stdout

    def run(self) -> None:
        """Show the start-up menu."""
        IntroMenu(self.users, self._input, self.out).display_menu()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="budgetbank", description="Interactive personal budget manager."
    )
    parser.add_argument(
        "--users-file", default=str(USERS_FILE), help="file of registered users"
    )
    parser.add_argument(
        "--accounts-file", default=str(ACCOUNTS_FILE), help="file of bank accounts"
    )
    args = parser.parse_args(argv)
    BankApp(Users(args.users_file, args.accounts_file)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())