"""
Favorites Service - the caller's duplicate-free list of country codes

Adding a code twice is an error rather than a no-op; clients rely on the
"Country already in favorites" response.
"""

from typing import List, Optional

from app.core.exceptions import ValidationError
from app.core.logging_config import logger
from app.models.user import User
from app.services.credential_store import CredentialStore


class FavoritesService:
    """Favorites operations for an already-authenticated user"""

    def __init__(self, store: CredentialStore):
        self.store = store

    async def list_favorites(self, user: User) -> List[str]:
        return await self.store.list_favorites(user.id)

    async def add_favorite(self, user: User, country_code: Optional[str]) -> List[str]:
        if country_code is None or not country_code.strip():
            raise ValidationError("Please provide a country code", field="countryCode")

        favorites = await self.store.add_favorite(user.id, country_code)
        logger.info(f"[Favorites] {user.id} added {country_code} ({len(favorites)} total)")
        return favorites

    async def remove_favorite(self, user: User, country_code: str) -> List[str]:
        favorites = await self.store.remove_favorite(user.id, country_code)
        logger.info(f"[Favorites] {user.id} removed {country_code} ({len(favorites)} total)")
        return favorites
