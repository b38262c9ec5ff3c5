"""
Authentication Dependency for FastAPI.

- Extracts and validates the service-issued JWT from the Authorization header
- Returns the caller identity for use in route handlers
- Raises HTTPException 401 if unauthorized

Config needed (from chatcore.config.settings):
- SERVICE_AUTH_SECRET
- SERVICE_AUTH_ISSUER
- SERVICE_AUTH_AUDIENCE
"""

import jwt
from dataclasses import dataclass
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from chatcore.config.settings import Config
from chatcore.domain.exceptions import DomainValidationError
from chatcore.domain.value_objects.user_id import UserId


@dataclass
class AuthUser:
    user_id: UserId


security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AuthUser:
    """
    Extract and validate the caller from the JWT token.

    The `sub` claim carries the caller's user id (UUID).

    Raises:
        HTTPException 401 if token is invalid, expired, or missing required claims
    """
    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )

    try:
        user_id = UserId(claims["sub"])
    except DomainValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid subject claim in token",
        ) from e

    return AuthUser(user_id=user_id)
