"""
Unit Tests for Request/Response Schemas
Tests for: optional inputs, public user projection, envelopes
"""
from types import SimpleNamespace
from typing import List

from app.schemas.auth import UserRegister, UserLogin, UserPublic, AuthResponse
from app.schemas.favorite import FavoriteCreate
from app.schemas.common import ApiResponse, MessageResponse, ErrorResponse


class TestUserRegister:
    """Test UserRegister schema"""

    def test_valid_registration(self):
        user = UserRegister(username="ana", email="ana@example.com", password="secret123")

        assert user.username == "ana"
        assert user.email == "ana@example.com"

    def test_missing_fields_are_none(self):
        """Presence is checked by the service, so the schema accepts an empty body"""
        user = UserRegister()

        assert user.username is None
        assert user.email is None
        assert user.password is None


class TestUserLogin:
    def test_partial_login(self):
        login = UserLogin(email="ana@example.com")

        assert login.password is None


class TestUserPublic:
    """Test the public user projection"""

    def test_from_orm_object(self):
        orm_user = SimpleNamespace(
            id="abc", username="ana", email="ana@example.com", hashed_password="$2b$..."
        )

        user = UserPublic.model_validate(orm_user)

        assert user.model_dump() == {"id": "abc", "username": "ana", "email": "ana@example.com"}


class TestAuthResponse:
    def test_shape(self):
        response = AuthResponse(
            token="t",
            user=UserPublic(id="abc", username="ana", email="ana@example.com")
        )

        assert response.model_dump() == {
            "token": "t",
            "user": {"id": "abc", "username": "ana", "email": "ana@example.com"},
            "success": True,
        }


class TestFavoriteCreate:
    """Test FavoriteCreate schema"""

    def test_camel_case_alias(self):
        assert FavoriteCreate.model_validate({"countryCode": "USA"}).country_code == "USA"

    def test_field_name_accepted(self):
        assert FavoriteCreate(country_code="USA").country_code == "USA"

    def test_missing_code(self):
        assert FavoriteCreate.model_validate({}).country_code is None


class TestEnvelopes:
    def test_api_response(self):
        assert ApiResponse[List[str]](data=["USA"]).model_dump() == {"success": True, "data": ["USA"]}

    def test_message_response(self):
        assert MessageResponse(message="ok").model_dump() == {"success": True, "message": "ok"}

    def test_error_response(self):
        body = ErrorResponse(message="nope", error="NOPE").model_dump()

        assert body == {"success": False, "message": "nope", "error": "NOPE"}
