from app.services.credential_store import CredentialStore
from app.services.identity_service import IdentityService
from app.services.favorites_service import FavoritesService
from app.services.countries_client import CountriesClient

__all__ = [
    "CredentialStore",
    "IdentityService",
    "FavoritesService",
    "CountriesClient",
]
