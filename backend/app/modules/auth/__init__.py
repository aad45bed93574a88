# Authentication module

from app.modules.auth.dependencies import (
    get_current_user,
    get_token_service,
    get_credential_store,
    get_identity_service,
    get_favorites_service,
    get_countries_client,
)

__all__ = [
    "get_current_user",
    "get_token_service",
    "get_credential_store",
    "get_identity_service",
    "get_favorites_service",
    "get_countries_client",
]
