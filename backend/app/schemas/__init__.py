# Pydantic schemas
from app.schemas.common import ApiResponse, MessageResponse, ErrorResponse
from app.schemas.auth import UserRegister, UserLogin, UserPublic, AuthResult, AuthResponse
from app.schemas.favorite import FavoriteCreate

__all__ = [
    "ApiResponse",
    "MessageResponse",
    "ErrorResponse",
    "UserRegister",
    "UserLogin",
    "UserPublic",
    "AuthResult",
    "AuthResponse",
    "FavoriteCreate",
]
