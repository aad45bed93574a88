# API endpoints
from . import auth, favorites, countries, health

__all__ = ["auth", "favorites", "countries", "health"]
