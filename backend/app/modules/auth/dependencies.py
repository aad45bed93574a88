from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from functools import lru_cache
from typing import Optional

from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import AuthenticationError, NotAuthorizedError
from app.core.logging_config import logger, set_user_id
from app.core.security import TokenService
from app.models.user import User
from app.services.credential_store import CredentialStore
from app.services.identity_service import IdentityService
from app.services.favorites_service import FavoritesService
from app.services.countries_client import CountriesClient

# auto_error=False: a missing header must produce our 401 envelope, not FastAPI's 403
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_token_service() -> TokenService:
    """One TokenService per process, built from settings at first use"""
    return TokenService.from_settings(settings)


def get_credential_store(db: AsyncSession = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_identity_service(
    store: CredentialStore = Depends(get_credential_store),
    token_service: TokenService = Depends(get_token_service)
) -> IdentityService:
    return IdentityService(store, token_service)


def get_favorites_service(
    store: CredentialStore = Depends(get_credential_store)
) -> FavoritesService:
    return FavoritesService(store)


@lru_cache()
def get_countries_client() -> CountriesClient:
    return CountriesClient()


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: CredentialStore = Depends(get_credential_store),
    token_service: TokenService = Depends(get_token_service)
) -> User:
    """
    Resolve the bearer token to a User and attach it to request.state.

    Every failure (no header, bad or expired token, user gone since the
    token was issued) is the same NotAuthorizedError so callers cannot tell
    which check failed.
    """
    if credentials is None or not credentials.credentials:
        raise NotAuthorizedError()

    try:
        user_id = token_service.verify(credentials.credentials)
    except AuthenticationError as e:
        logger.debug(f"[Auth] Token rejected: {e.code}")
        raise NotAuthorizedError()

    user = await store.find_by_id(user_id)
    if not user:
        logger.warning(f"[Auth] Token for unknown user {user_id}")
        raise NotAuthorizedError()

    request.state.user = user
    set_user_id(user.id)
    return user
