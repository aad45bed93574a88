"""
Custom Exceptions for Country Explorer
======================================

Services raise these instead of building HTTP responses themselves. The
exception handlers registered in ``app.main`` turn every one of them into
the JSON envelope ``{"success": false, "message": ..., "error": ...}``.

Usage:
    from app.core.exceptions import AlreadyFavoriteError

    if inserted == 0:
        raise AlreadyFavoriteError()
"""

from typing import Optional, Any, Dict


class CountryExplorerError(Exception):
    """Base exception for all Country Explorer errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


class InternalError(CountryExplorerError):
    """Unexpected store or I/O failure"""

    def __init__(self, message: str = "Server error"):
        super().__init__(message, code="INTERNAL_ERROR", status_code=500)


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(CountryExplorerError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


# ============================================
# Conflict Errors (400 by convention)
# ============================================

class ConflictError(CountryExplorerError):
    """Write rejected because it would break a uniqueness rule"""

    status_code = 400

    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(message, code=code)


class EmailAlreadyExistsError(ConflictError):
    """Registration with an email that is already taken"""

    def __init__(self):
        super().__init__("User Mail already exists", code="EMAIL_EXISTS")


class AlreadyFavoriteError(ConflictError):
    """Country code is already in the favorites collection"""

    def __init__(self, country_code: str = ""):
        super().__init__("Country already in favorites", code="ALREADY_FAVORITE")
        if country_code:
            self.details["country_code"] = country_code


# ============================================
# Authentication Errors (401)
# ============================================

class AuthenticationError(CountryExplorerError):
    """User authentication failed"""

    status_code = 401

    def __init__(self, message: str = "Authentication failed", code: str = "AUTH_FAILED"):
        super().__init__(message, code=code)


class NotAuthorizedError(AuthenticationError):
    """Missing, invalid or expired bearer token, or unknown identity"""

    def __init__(self):
        super().__init__("Not authorized to access this route", code="NOT_AUTHORIZED")


class InvalidCredentialsError(AuthenticationError):
    """Unknown email or wrong password (deliberately indistinguishable)"""

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class TokenExpiredError(AuthenticationError):
    """JWT token has expired"""

    def __init__(self):
        super().__init__("Token has expired", code="TOKEN_EXPIRED")


class InvalidTokenError(AuthenticationError):
    """JWT token is invalid"""

    def __init__(self):
        super().__init__("Invalid token", code="INVALID_TOKEN")


# ============================================
# Not Found Errors
# ============================================

class NotFoundError(CountryExplorerError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, message: str, code: str = "NOT_FOUND"):
        super().__init__(message, code=code)


class NotFavoriteError(NotFoundError):
    """Country code is not in the favorites collection"""

    # Existing clients expect 400 here, not 404
    status_code = 400

    def __init__(self, country_code: str = ""):
        super().__init__("Country not in favorites", code="NOT_FAVORITE")
        if country_code:
            self.details["country_code"] = country_code


class UserNotFoundError(NotFoundError):
    """User not found"""

    def __init__(self, user_id: str):
        super().__init__("User not found", code="USER_NOT_FOUND")
        self.details["user_id"] = user_id


class CountryNotFoundError(NotFoundError):
    """Country data service has no match"""

    def __init__(self, query: str = ""):
        super().__init__("Country not found", code="COUNTRY_NOT_FOUND")
        if query:
            self.details["query"] = query


# ============================================
# Upstream Errors
# ============================================

class UpstreamServiceError(CountryExplorerError):
    """Country data service failed or timed out"""

    def __init__(self, message: str = "Country data service unavailable"):
        super().__init__(message, code="UPSTREAM_ERROR", status_code=502)


# ============================================
# Helper function for API responses
# ============================================

def error_response(error: CountryExplorerError) -> Dict[str, Any]:
    """Convert exception to API error response format"""
    return {
        "success": False,
        "message": error.message,
        "error": error.code
    }
