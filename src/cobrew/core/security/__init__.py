"""Security utilities - crypto and HTTP headers.

Re-exports all security-related functions for convenience.
"""

from src.cobrew.core.security.crypto import (
    ACCESS_TOKEN_TYPE,
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.cobrew.core.security.headers import SecurityHeadersMiddleware

__all__ = [
    # Crypto
    "ACCESS_TOKEN_TYPE",
    "DUMMY_PASSWORD_HASH",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
    # Headers
    "SecurityHeadersMiddleware",
]
