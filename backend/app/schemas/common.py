from pydantic import BaseModel
from typing import Optional, TypeVar, Generic

T = TypeVar('T')


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: ``{"success": true, "data": ...}``"""
    success: bool = True
    data: Optional[T] = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Failure envelope, produced by the exception handlers"""
    success: bool = False
    message: str
    error: Optional[str] = None
