"""Caller resolution from the bearer credential."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header

from src.cobrew.api.dependencies.services import AuthServiceDep
from src.cobrew.core.exceptions import AuthenticationError
from src.cobrew.core.logging import bind_user_context
from src.cobrew.core.security import ACCESS_TOKEN_TYPE, decode_token
from src.cobrew.models import User
from src.cobrew.services.auth_service import AuthService
from src.cobrew.services.authorization import Caller

BEARER_PREFIX = "Bearer "


async def _validate_access_token(authorization: str | None, service: AuthService) -> User:
    """Validate the Authorization header and return the active account it names.

    Checks header format, signature and expiry, token type, subject and that
    the account still exists and is active.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError("Missing or invalid authorization header")

    payload = decode_token(authorization[len(BEARER_PREFIX) :])
    if payload is None:
        raise AuthenticationError("Invalid or expired token")

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise AuthenticationError("Invalid token type")

    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("Invalid token payload")

    try:
        user_id = UUID(subject)
    except ValueError as e:
        raise AuthenticationError("Invalid user_id in token") from e

    user = await service.get_active_user(user_id)
    if user is None:
        raise AuthenticationError("User not found or inactive")

    bind_user_context(user.id)
    return user


async def get_current_user(
    service: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    return await _validate_access_token(authorization, service)


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_current_caller(user: CurrentUser) -> Caller:
    """Caller context for endpoints that require authentication."""
    return Caller(user_id=user.id)


CurrentCaller = Annotated[Caller, Depends(get_current_caller)]


async def get_optional_caller(
    service: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> Caller | None:
    """Caller context for public endpoints.

    A missing or unusable credential makes the request anonymous rather
    than failing it; it only affects caller-relative flags.
    """
    if not authorization:
        return None
    try:
        user = await _validate_access_token(authorization, service)
    except AuthenticationError:
        return None
    return Caller(user_id=user.id)


OptionalCaller = Annotated[Caller | None, Depends(get_optional_caller)]
