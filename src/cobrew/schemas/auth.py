from pydantic import EmailStr, Field, field_validator
from zxcvbn import zxcvbn

from src.cobrew.schemas.base import CamelModel
from src.cobrew.schemas.user import UserRead

# Minimum zxcvbn score (0-4 scale): 3 = "safely unguessable"
MIN_PASSWORD_SCORE = 3


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        """Validate password strength using zxcvbn entropy estimation."""
        result = zxcvbn(v)
        if result["score"] < MIN_PASSWORD_SCORE:
            feedback = result.get("feedback", {})
            warning = feedback.get("warning", "")
            suggestions = feedback.get("suggestions", [])

            if warning:
                raise ValueError(f"Weak password: {warning}")
            elif suggestions:
                raise ValueError(f"Weak password: {suggestions[0]}")
            else:
                raise ValueError(
                    "Password is too weak. Use a longer password with a mix of characters."
                )
        return v


class AuthResponse(CamelModel):
    """Returned by both register and login."""

    user: UserRead
    access_token: str
    token_type: str = "bearer"
