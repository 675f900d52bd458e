"""
Credential verification for the demo API.

Endpoints talk to a CredentialVerifier only; the static single-user
implementation below is what ships, and an identity-provider backed
verifier can replace it via the get_verifier dependency.
"""
import hmac
import logging
from abc import ABC, abstractmethod
from typing import Optional

from app.core.config import settings

logger = logging.getLogger(__name__)


class CredentialVerifier(ABC):
    @abstractmethod
    def verify(self, identifier: str, secret: str) -> bool:
        """Return True when the identifier/secret pair is accepted."""

    @abstractmethod
    def issue_token(self, identifier: str) -> str:
        """Return the bearer token handed out after a successful login."""

    @abstractmethod
    def is_valid_token(self, token: Optional[str]) -> bool:
        """Return True when the presented Authorization value is accepted."""


def _equals(a: str, b: str) -> bool:
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


class StaticCredentialVerifier(CredentialVerifier):
    """One hardcoded credential pair and one static token, matched exactly."""

    def __init__(self, identifier: str, secret: str, token: str):
        self._identifier = identifier
        self._secret = secret
        self._token = token

    def verify(self, identifier: str, secret: str) -> bool:
        # Evaluate both comparisons so timing doesn't reveal which half failed
        identifier_ok = _equals(identifier, self._identifier)
        secret_ok = _equals(secret, self._secret)
        return identifier_ok and secret_ok

    def issue_token(self, identifier: str) -> str:
        return self._token

    def is_valid_token(self, token: Optional[str]) -> bool:
        if token is None:
            return False
        return _equals(token, self._token)


_default_verifier = StaticCredentialVerifier(
    identifier=settings.demo_email,
    secret=settings.demo_password,
    token=settings.demo_token,
)


def get_verifier() -> CredentialVerifier:
    """FastAPI dependency returning the active verifier."""
    return _default_verifier
