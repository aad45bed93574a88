from pydantic import BaseModel, ConfigDict
from typing import Optional


class UserRegister(BaseModel):
    # Presence is checked by IdentityService so a missing field is a 400, not a 422
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    """The only user fields that ever leave the API"""
    id: str
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class AuthResult(BaseModel):
    token: str
    user: UserPublic


class AuthResponse(AuthResult):
    success: bool = True
