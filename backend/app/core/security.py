from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import ExpiredSignatureError, JWTError, jwt
import bcrypt

from app.core.exceptions import InvalidTokenError, TokenExpiredError

# Bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password; a malformed stored hash never verifies"""
    password_bytes = plain_password.encode('utf-8')[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
    except ValueError:
        return False


def get_password_hash(password: str, rounds: int = 12) -> str:
    """Hash password with bcrypt"""
    password_bytes = password.encode('utf-8')[:BCRYPT_MAX_BYTES]
    hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=rounds))
    return hashed.decode('utf-8')


class TokenService:
    """
    Issues and verifies stateless access tokens.

    Tokens are HS256 JWTs carrying the user id in ``sub`` plus ``iat`` and
    ``exp``. Nothing is stored server-side, so there is no revocation: a
    token stays valid until it expires.
    """

    TOKEN_TYPE = "access"

    def __init__(self, secret_key: str, algorithm: str = "HS256",
                 expires_delta: timedelta = timedelta(days=30)):
        if not secret_key:
            raise ValueError("TokenService requires a non-empty secret key")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings) -> "TokenService":
        return cls(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )

    @property
    def expires_delta(self) -> timedelta:
        return self._expires_delta

    def issue(self, identity_id: str, now: Optional[datetime] = None) -> str:
        """Create a signed token for ``identity_id``"""
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(identity_id),
            "iat": issued_at,
            "exp": issued_at + self._expires_delta,
            "type": self.TOKEN_TYPE,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Return the identity id carried by ``token``.

        Raises:
            TokenExpiredError: the ``exp`` claim is in the past
            InvalidTokenError: bad signature, malformed token, wrong type
                or missing subject
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise TokenExpiredError()
        except JWTError:
            raise InvalidTokenError()

        if payload.get("type") != self.TOKEN_TYPE:
            raise InvalidTokenError()

        identity_id = payload.get("sub")
        if not identity_id or not isinstance(identity_id, str):
            raise InvalidTokenError()

        return identity_id
