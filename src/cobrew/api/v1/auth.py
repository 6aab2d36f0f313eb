"""Authentication endpoints."""

from fastapi import APIRouter, status
from starlette.requests import Request

from src.cobrew.api.dependencies import AuthServiceDep, CurrentUser
from src.cobrew.core.rate_limit import limiter
from src.cobrew.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.cobrew.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])

_AUTH_EXAMPLE = {
    "user": {
        "id": "0192f5a4-7c1e-7b2a-9d3e-4f5a6b7c8d9e",
        "email": "founder@example.edu",
        "avatarUrl": None,
        "createdAt": "2026-01-15T09:30:00",
    },
    "accessToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    "tokenType": "bearer",
}


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "Account created with an empty profile",
            "content": {"application/json": {"example": _AUTH_EXAMPLE}},
        },
        400: {"description": "Invalid email or weak password"},
        409: {"description": "Email already registered"},
    },
)
@limiter.limit("3/hour")
async def register(
    request: Request, register_data: RegisterRequest, service: AuthServiceDep
) -> AuthResponse:
    """Register a new account and return an access token."""
    return await service.register(register_data.email, register_data.password)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        200: {
            "description": "Successful authentication",
            "content": {"application/json": {"example": _AUTH_EXAMPLE}},
        },
        401: {"description": "Invalid credentials"},
    },
)
@limiter.limit("5/minute")
async def login(
    request: Request, login_data: LoginRequest, service: AuthServiceDep
) -> AuthResponse:
    """Authenticate with email and password."""
    return await service.authenticate(login_data.email, login_data.password)


@router.get("/me", response_model=UserRead)
async def me(current_user: CurrentUser) -> UserRead:
    """Get the authenticated account."""
    return UserRead.model_validate(current_user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout() -> None:
    """Acknowledge logout. Access tokens are stateless; the client discards its copy."""
