"""Registration and login."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.cobrew.core.exceptions import AuthenticationError, ConflictError
from src.cobrew.core.logging import get_logger
from src.cobrew.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    hash_password,
    verify_password,
)
from src.cobrew.models import Profile, User
from src.cobrew.repositories import ProfileRepository, UserRepository
from src.cobrew.schemas.auth import AuthResponse
from src.cobrew.schemas.user import UserRead

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """Creates accounts and issues bearer tokens.

    Tokens are stateless: logout is acknowledged by the API but nothing is
    revoked server-side.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        profile_repo: ProfileRepository,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.profile_repo = profile_repo
        self.session = session

    async def register(self, email: str, password: str) -> AuthResponse:
        """Create an account with an empty profile and sign it in.

        Raises:
            ConflictError: If the email is already registered.
        """
        email = normalize_email(email)
        user = User(email=email, hashed_password=hash_password(password))
        self.user_repo.add(user)
        self.profile_repo.add(Profile(user_id=user.id))

        try:
            # Account and profile land together or not at all
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("User already exists") from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("user registered", user_id=str(user.id))
        return self._issue(user)

    async def authenticate(self, email: str, password: str) -> AuthResponse:
        """Verify credentials and issue an access token.

        Raises:
            AuthenticationError: On unknown email, wrong password or inactive account.
        """
        user = await self.user_repo.get_by_email(normalize_email(email))

        # Verify against a dummy hash for unknown emails so timing does not
        # reveal which addresses are registered
        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid or not user.is_active:
            logger.info("login failed")
            raise AuthenticationError("Invalid credentials")

        logger.info("user logged in", user_id=str(user.id))
        return self._issue(user)

    async def get_active_user(self, user_id: UUID) -> User | None:
        user = await self.user_repo.get_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return user

    def _issue(self, user: User) -> AuthResponse:
        return AuthResponse(
            user=UserRead.model_validate(user),
            access_token=create_access_token(user.id),
        )
