"""
Credential Store - persistence for registered identities and their favorites

Uniqueness lives in the database, not in application code:
- ``users.email`` is UNIQUE, so two concurrent registrations with the same
  email cannot both succeed
- ``favorites(user_id, country_code)`` is UNIQUE, and add/remove are single
  conditional statements, so concurrent add/remove calls for one user can
  never produce a duplicate code
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select, delete
from sqlalchemy.dialects import postgresql, sqlite

from app.models.user import User
from app.models.favorite import Favorite
from app.core.exceptions import (
    EmailAlreadyExistsError,
    AlreadyFavoriteError,
    NotFavoriteError,
    UserNotFoundError,
)
from app.core.logging_config import logger


class CredentialStore:
    """Reads and writes User and Favorite rows through one AsyncSession"""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ========== Identity Operations ==========

    async def create(self, username: str, email: str, hashed_password: str) -> User:
        """Insert a new user; the UNIQUE email constraint decides duplicates"""
        user = User(username=username, email=email, hashed_password=hashed_password)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise EmailAlreadyExistsError()
        return user

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    # ========== Favorites Operations ==========

    async def list_favorites(self, user_id: str) -> List[str]:
        """Favorite country codes in insertion order"""
        result = await self.db.execute(
            select(Favorite.country_code)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.id)
        )
        return list(result.scalars().all())

    async def add_favorite(self, user_id: str, country_code: str) -> List[str]:
        """
        Append ``country_code`` unless it is already present.

        A single INSERT ... ON CONFLICT DO NOTHING; zero affected rows means
        the code was already there.
        """
        await self._require_user(user_id)

        stmt = (
            self._insert_for_dialect()(Favorite)
            .values(user_id=user_id, country_code=country_code)
            .on_conflict_do_nothing(index_elements=["user_id", "country_code"])
        )
        result = await self.db.execute(stmt)
        await self.db.commit()

        if result.rowcount == 0:
            raise AlreadyFavoriteError(country_code)

        logger.debug(f"[CredentialStore] Added favorite {country_code} for user {user_id}")
        return await self.list_favorites(user_id)

    async def remove_favorite(self, user_id: str, country_code: str) -> List[str]:
        """Delete every row equal to ``country_code`` (at most one exists)"""
        await self._require_user(user_id)

        result = await self.db.execute(
            delete(Favorite).where(
                Favorite.user_id == user_id,
                Favorite.country_code == country_code,
            )
        )
        await self.db.commit()

        if result.rowcount == 0:
            raise NotFavoriteError(country_code)

        logger.debug(f"[CredentialStore] Removed favorite {country_code} for user {user_id}")
        return await self.list_favorites(user_id)

    # ========== Helpers ==========

    async def _require_user(self, user_id: str) -> User:
        user = await self.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def _insert_for_dialect(self):
        """Dialect-specific insert() so on_conflict_do_nothing is available"""
        dialect_name = self.db.get_bind().dialect.name
        if dialect_name == "postgresql":
            return postgresql.insert
        if dialect_name == "sqlite":
            return sqlite.insert
        raise NotImplementedError(f"Unsupported database dialect: {dialect_name}")
