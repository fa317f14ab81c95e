"""Registry of users stored in a ``username,password,id`` file."""

from __future__ import annotations

from pathlib import Path

from .user import ACCOUNTS_FILE, User

USERS_FILE = Path("users.txt")


class InvalidCredentialsError(ValueError):
    """Raised when a username and password do not match a registered user."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password.")


class Users:
    """All registered users, loaded from and appended to a users file."""

    def __init__(
        self,
        path: str | Path = USERS_FILE,
        accounts_path: str | Path = ACCOUNTS_FILE,
    ) -> None:
        self.path = Path(path)
        self.accounts_path = Path(accounts_path)
        self.next_id = 0
        self.registered_users: list[User] = []
        if self.path.is_file():
            self._load()

    def _load(self) -> None:
        with self.path.open(encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\n")
                username, sep, rest = line.partition(",")
                if not sep:
                    continue
                password, sep, id_text = rest.partition(",")
                if not sep:
                    raise ValueError(f"Malformed user line: {line!r}")
                user_id = int(id_text)
                user = User(username, password, self.accounts_path)
                user.id = user_id
                self.registered_users.append(user)
                if user_id >= self.next_id:
                    self.next_id = user_id + 1

    def register_user(self, username: str, password: str) -> User:
        """Create a user with the next free id and append it to the users file."""
        user = User(username, password, self.accounts_path)
        user.id = self.next_id
        self.registered_users.append(user)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{user.username},{user.password},{user.id}\n")
        self.next_id += 1
        return user

    def validate_credentials(self, username: str, password: str) -> bool:
        """Return whether a registered user has this username and password."""
        return any(
            user.username == username and user.password == password
            for user in self.registered_users
        )

    def login_user(self, username: str, password: str) -> User:
        """Log in the matching user and return it."""
        for user in self.registered_users:
            if user.username == username and user.password == password:
                user.login()
                return user
        raise InvalidCredentialsError()