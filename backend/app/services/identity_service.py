"""
Identity Service - registration, login and profile lookup
"""

from typing import Optional

from app.core.config import settings
from app.core.exceptions import ValidationError, InvalidCredentialsError, EmailAlreadyExistsError
from app.core.logging_config import logger
from app.core.security import TokenService, get_password_hash, verify_password
from app.models.user import User
from app.schemas.auth import AuthResult, UserPublic
from app.services.credential_store import CredentialStore


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class IdentityService:
    """Turns credentials into identities and identities into tokens"""

    def __init__(self, store: CredentialStore, token_service: TokenService,
                 bcrypt_rounds: int = settings.BCRYPT_ROUNDS):
        self.store = store
        self.token_service = token_service
        self.bcrypt_rounds = bcrypt_rounds

    async def register(self, username: Optional[str], email: Optional[str],
                       password: Optional[str]) -> AuthResult:
        """Create an identity with no favorites and issue its first token"""
        if _blank(username) or _blank(email) or _blank(password):
            raise ValidationError("Please provide username, email and password")

        try:
            user = await self.store.create(
                username=username.strip(),
                email=email,
                hashed_password=get_password_hash(password, rounds=self.bcrypt_rounds),
            )
        except EmailAlreadyExistsError:
            logger.log_auth_event(
                event="register",
                success=False,
                user_email=email,
                reason="Email already registered"
            )
            raise

        logger.log_auth_event(event="register", success=True, user_email=email)
        return self._auth_result(user)

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResult:
        """Unknown email and wrong password fail the same way"""
        if _blank(email) or _blank(password):
            raise ValidationError("Please provide an email and password")

        user = await self.store.find_by_email(email)
        if not user or not verify_password(password, user.hashed_password):
            logger.log_auth_event(
                event="login",
                success=False,
                user_email=email,
                reason="unknown email" if not user else "wrong password"
            )
            raise InvalidCredentialsError()

        logger.log_auth_event(event="login", success=True, user_email=email)
        return self._auth_result(user)

    def get_profile(self, user: User) -> UserPublic:
        return UserPublic.model_validate(user)

    def _auth_result(self, user: User) -> AuthResult:
        return AuthResult(
            token=self.token_service.issue(user.id),
            user=UserPublic.model_validate(user),
        )
