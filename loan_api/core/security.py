"""Bearer token decoding for request identity."""

from typing import Any, Dict

from jose import JWTError, jwt

from loan_api.core.config import Settings, get_settings
from loan_api.domain.exceptions import AuthenticationException


def decode_access_token(token: str, settings: Settings | None = None) -> Dict[str, Any]:
    """
    Decode and validate a signed access token.

    Raises:
        AuthenticationException: If the token is malformed, expired or
            signed with a different key
    """
    settings = settings or get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        raise AuthenticationException("Invalid or expired token") from e


def extract_user_id(claims: Dict[str, Any]) -> int:
    """Read the user identifier from token claims (``user_id`` or ``sub``)."""
    raw = claims.get("user_id", claims.get("sub"))
    if isinstance(raw, dict):
        raw = raw.get("id")

    try:
        user_id = int(raw)
    except (TypeError, ValueError):
        raise AuthenticationException("Token does not identify a user")

    if user_id <= 0:
        raise AuthenticationException("Token does not identify a user")
    return user_id
