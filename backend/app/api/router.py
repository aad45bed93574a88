from fastapi import APIRouter
from app.api.endpoints import auth, favorites, countries

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["Favorites"])
api_router.include_router(countries.router, prefix="/countries", tags=["Countries"])
