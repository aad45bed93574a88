# Re-export all models for convenient imports
from app.models.user import User
from app.models.favorite import Favorite

__all__ = [
    "User",
    "Favorite",
]
