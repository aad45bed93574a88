from fastapi import APIRouter, Depends, status

from app.models.user import User
from app.schemas.auth import UserRegister, UserLogin, UserPublic, AuthResponse
from app.schemas.common import ApiResponse, MessageResponse
from app.services.identity_service import IdentityService
from app.modules.auth.dependencies import get_current_user, get_identity_service


router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Register new user and return a token for it"""
    result = await identity_service.register(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password
    )
    return AuthResponse(token=result.token, user=result.user)


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Login with email and password"""
    result = await identity_service.login(
        email=credentials.email,
        password=credentials.password
    )
    return AuthResponse(token=result.token, user=result.user)


@router.get("/me", response_model=ApiResponse[UserPublic])
async def get_me(
    current_user: User = Depends(get_current_user),
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Get current user profile"""
    return ApiResponse[UserPublic](data=identity_service.get_profile(current_user))


@router.get("/logout", response_model=MessageResponse)
async def logout():
    """
    Tokens are stateless and cannot be revoked server-side; the client
    logs out by discarding its token.
    """
    return MessageResponse(message="User logged out successfully")
