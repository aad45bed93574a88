from fastapi import APIRouter, Depends
from typing import List

from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.favorite import FavoriteCreate
from app.services.favorites_service import FavoritesService
from app.modules.auth.dependencies import get_current_user, get_favorites_service


router = APIRouter()


@router.get("", response_model=ApiResponse[List[str]])
async def get_favorites(
    current_user: User = Depends(get_current_user),
    favorites_service: FavoritesService = Depends(get_favorites_service)
):
    """Get all favorites"""
    favorites = await favorites_service.list_favorites(current_user)
    return ApiResponse[List[str]](data=favorites)


@router.post("", response_model=ApiResponse[List[str]])
async def add_favorite(
    favorite: FavoriteCreate,
    current_user: User = Depends(get_current_user),
    favorites_service: FavoritesService = Depends(get_favorites_service)
):
    """Add country to favorites"""
    favorites = await favorites_service.add_favorite(current_user, favorite.country_code)
    return ApiResponse[List[str]](data=favorites)


@router.delete("/{country_code}", response_model=ApiResponse[List[str]])
async def remove_favorite(
    country_code: str,
    current_user: User = Depends(get_current_user),
    favorites_service: FavoritesService = Depends(get_favorites_service)
):
    """Remove country from favorites"""
    favorites = await favorites_service.remove_favorite(current_user, country_code)
    return ApiResponse[List[str]](data=favorites)
