"""
FastAPI dependencies for authentication and authorization.

Read endpoints are public; write endpoints depend on get_admin_user.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import JWTError, decode_token

logger = logging.getLogger(__name__)

# auto_error=False so missing credentials surface as our own 401
security = HTTPBearer(auto_error=False)


def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[dict]:
    """
    Decode the Bearer token if one was sent.

    Returns None when there is no token or it fails validation, so public
    endpoints can still see who is calling without requiring it.
    """
    if not credentials:
        return None

    try:
        return decode_token(credentials.credentials)
    except JWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        return None


def get_current_user(payload: Optional[dict] = Depends(get_token_payload)) -> dict:
    """
    Require a valid token and return its claims.

    Raises:
        UnauthorizedError: If no valid token with a subject was supplied
    """
    if not payload or not payload.get("sub"):
        raise UnauthorizedError("Could not validate credentials")
    return payload


def get_admin_user(user: dict = Depends(get_current_user)) -> dict:
    """
    Require the current token to carry ``is_admin: true``.

    Raises:
        ForbiddenError: If the user is not an admin
    """
    if user.get("is_admin") is not True:
        raise ForbiddenError("Admin privileges required")
    return user
