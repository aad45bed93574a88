"""
Country Explorer - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from faker import Faker

# Set testing environment before the app reads its settings
TEST_DATABASE_URL = 'sqlite+aiosqlite:///./test.db'
TEST_JWT_SECRET = 'test-jwt-secret-key-for-testing'

os.environ['ENVIRONMENT'] = 'test'
os.environ['DATABASE_URL'] = TEST_DATABASE_URL
os.environ['JWT_SECRET_KEY'] = TEST_JWT_SECRET
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['LOG_LEVEL'] = 'WARNING'

from app.main import app
from app.core.database import Base, get_db, create_engine_for_url
from app.core.security import TokenService
from app.services.credential_store import CredentialStore

fake = Faker()

# Test database setup
test_engine = create_engine_for_url(TEST_DATABASE_URL)
TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)


@pytest.fixture(scope='function')
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def session_factory(db_session: AsyncSession) -> async_sessionmaker:
    """Factory for extra sessions on the per-test database"""
    return TestSessionLocal


@pytest.fixture
def store(db_session: AsyncSession) -> CredentialStore:
    return CredentialStore(db_session)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def test_user_data() -> dict:
    """Registration payload for a fresh user"""
    return {
        'username': fake.user_name(),
        'email': fake.unique.email(),
        'password': 'testpassword123'
    }


@pytest.fixture
async def registered_user(client: AsyncClient, test_user_data: dict) -> dict:
    """Register a user through the API; returns the payload plus token and user"""
    response = await client.post('/api/auth/register', json=test_user_data)
    assert response.status_code == 201
    body = response.json()
    return {**test_user_data, 'token': body['token'], 'user': body['user']}


@pytest.fixture
def auth_headers(registered_user: dict) -> dict:
    """Authentication headers for the registered user"""
    return {'Authorization': f"Bearer {registered_user['token']}"}
