"""
Unit Tests for IdentityService
Tests for: register, login, profile
"""
import pytest

from app.core.exceptions import (
    ValidationError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
)
from app.core.security import verify_password
from app.services.identity_service import IdentityService


@pytest.fixture
def identity_service(store, token_service) -> IdentityService:
    return IdentityService(store, token_service, bcrypt_rounds=4)


class TestRegister:
    """Test registration"""

    async def test_register_returns_token_and_public_user(self, identity_service, token_service):
        result = await identity_service.register("ana", "ana@example.com", "secret123")

        assert result.user.username == "ana"
        assert result.user.email == "ana@example.com"
        assert token_service.verify(result.token) == result.user.id

    async def test_register_hashes_password(self, identity_service, store):
        result = await identity_service.register("ana", "ana@example.com", "secret123")

        user = await store.find_by_id(result.user.id)
        assert user.hashed_password != "secret123"
        assert verify_password("secret123", user.hashed_password)

    async def test_register_strips_username(self, identity_service):
        result = await identity_service.register("  ana  ", "ana@example.com", "secret123")

        assert result.user.username == "ana"

    @pytest.mark.parametrize("username,email,password", [
        (None, "ana@example.com", "secret123"),
        ("ana", None, "secret123"),
        ("ana", "ana@example.com", None),
        ("", "ana@example.com", "secret123"),
        ("ana", "   ", "secret123"),
    ])
    async def test_register_missing_field(self, identity_service, username, email, password):
        with pytest.raises(ValidationError) as exc_info:
            await identity_service.register(username, email, password)

        assert exc_info.value.message == "Please provide username, email and password"

    async def test_register_duplicate_email(self, identity_service):
        await identity_service.register("ana", "ana@example.com", "secret123")

        with pytest.raises(EmailAlreadyExistsError):
            await identity_service.register("ben", "ana@example.com", "other456")


class TestLogin:
    """Test login"""

    async def test_login_success(self, identity_service, token_service):
        registered = await identity_service.register("ana", "ana@example.com", "secret123")

        result = await identity_service.login("ana@example.com", "secret123")

        assert result.user == registered.user
        assert token_service.verify(result.token) == registered.user.id

    async def test_login_wrong_password(self, identity_service):
        await identity_service.register("ana", "ana@example.com", "secret123")

        with pytest.raises(InvalidCredentialsError):
            await identity_service.login("ana@example.com", "wrong")

    async def test_login_unknown_email(self, identity_service):
        with pytest.raises(InvalidCredentialsError):
            await identity_service.login("nobody@example.com", "secret123")

    async def test_email_is_case_sensitive(self, identity_service):
        await identity_service.register("ana", "ana@example.com", "secret123")

        with pytest.raises(InvalidCredentialsError):
            await identity_service.login("ANA@example.com", "secret123")

    async def test_login_missing_field(self, identity_service):
        with pytest.raises(ValidationError) as exc_info:
            await identity_service.login("ana@example.com", "")

        assert exc_info.value.message == "Please provide an email and password"


class TestProfile:
    async def test_get_profile(self, identity_service, store):
        registered = await identity_service.register("ana", "ana@example.com", "secret123")
        user = await store.find_by_id(registered.user.id)

        profile = identity_service.get_profile(user)

        assert profile.model_dump() == {
            "id": registered.user.id,
            "username": "ana",
            "email": "ana@example.com",
        }
