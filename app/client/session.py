"""
Client-side session state and token persistence.
"""
import keyring
from dataclasses import dataclass
from typing import Optional

from keyring.errors import PasswordDeleteError

KEYRING_APP_ID = "jobboard"
TOKEN_KEY = "auth_token"
DEFAULT_PAGE_SIZE = 10


@dataclass
class SessionState:
    token: Optional[str] = None
    current_page: int = 1
    current_search: str = ""
    limit: int = DEFAULT_PAGE_SIZE

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def search(self, text: str) -> None:
        """New search text always starts again from page 1."""
        self.current_search = text.strip()
        self.current_page = 1

    def change_page(self, delta: int) -> None:
        self.current_page = max(1, self.current_page + delta)

    def clear(self) -> None:
        self.token = None
        self.current_page = 1
        self.current_search = ""


class TokenStore:
    """Keeps the bearer token in the system keyring under a fixed key."""

    def __init__(self, service: str = KEYRING_APP_ID):
        self.service = service

    def load(self) -> Optional[str]:
        token = keyring.get_password(self.service, TOKEN_KEY)
        return token if token else None

    def save(self, token: str) -> None:
        keyring.set_password(self.service, TOKEN_KEY, token)

    def clear(self) -> None:
        try:
            keyring.delete_password(self.service, TOKEN_KEY)
        except PasswordDeleteError:
            # Nothing stored
            pass

    def restore(self, limit: int = DEFAULT_PAGE_SIZE) -> SessionState:
        """Fresh session state, already logged in if a token was saved."""
        return SessionState(token=self.load(), limit=limit)
