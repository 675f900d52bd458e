"""
Authorization dependencies for protected endpoints.
"""
import logging
from typing import Optional

from fastapi import Depends, Header

from app.core.exceptions import AuthenticationError
from app.services.auth import CredentialVerifier, get_verifier

logger = logging.getLogger(__name__)


def require_token(
    authorization: Optional[str] = Header(default=None),
    verifier: CredentialVerifier = Depends(get_verifier),
) -> str:
    """
    The raw Authorization header must equal the issued token exactly,
    "Bearer " prefix included.
    """
    if authorization is None:
        logger.info("Authorization failed: header missing")
        raise AuthenticationError()

    if not verifier.is_valid_token(authorization):
        logger.warning("Authorization failed: token mismatch")
        raise AuthenticationError()

    return authorization
