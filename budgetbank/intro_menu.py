"""Start-up menu: log in, register or exit."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from .account_menu import AccountMenu
from .user import User
from .users import InvalidCredentialsError, Users

_CREDENTIAL_PROMPTS = ("Enter username: ", "Enter password: ")


def _clear_screen(out: TextIO) -> None:
    isatty = getattr(out, "isatty", None)
    if isatty is not None and isatty():
        out.write("\033[2J\033[H")
        out.flush()


class IntroMenu:
    """The first menu shown by the application."""

    def __init__(
        self,
        users: Users,
        input_func: Callable[[str], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.users = users
        self._input = input_func if input_func is not None else input
        self.out = out if out is not None else sys.stdout

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_credentials(self) -> tuple[str, str]:
        username, secret = (self._ask(prompt) for prompt in _CREDENTIAL_PROMPTS)
        return username, secret

    def display_menu(self) -> None:
        """Show the menu until a valid choice has been handled."""
        while True:
            self._say("Welcome to the Budget App!")
            self._say("1. Login")
            self._say("2. Register")
            self._say("3. Exit")
            try:
                text = self._ask("Please enter an option: ")
                try:
                    choice = int(text)
                except ValueError:
                    choice = 0
                if self.handle_user_selection(choice):
                    return
            except EOFError:
                self._say("Exiting the application. Goodbye!")
                return

    def handle_user_selection(self, choice: int) -> bool:
        """Handle a choice; return False if it was not a valid option."""
        if choice == 1:
            self._say("Login selected.")
            user = self._login()
        elif choice == 2:
            self._say("Register selected.")
            self._register()
            _clear_screen(self.out)
            user = self._login()
        elif choice == 3:
            self._say("Exiting the application. Goodbye!")
            return True
        else:
            self._say("Invalid choice. Please try again.")
            return False
        _clear_screen(self.out)
        AccountMenu(user, self._input, self.out).display_menu()
        return True

    def _register(self) -> User:
        self._say("Please enter your login credentials.")
        username, password = self._ask_credentials()
        user = self.users.register_user(username, password)
        self._say(f"User {user.username} registered with ID {user.id}")
        return user

    def _login(self) -> User:
        while True:
            username, password = self._ask_credentials()
            try:
                user = self.users.login_user(username, password)
            except InvalidCredentialsError:
                self._say("Invalid username or password. Please try again.")
                continue
            self._say(f"User {user.username} logged in.")
            return user