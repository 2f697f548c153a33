"""Password hashing and access token signing."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt

TOKEN_ALGORITHM = "HS256"


class PasswordHasher:
    """Salted bcrypt password hashes."""

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


class AccessTokenIssuer:
    """Issues HS256 access tokens carrying the user ID."""

    def __init__(self, secret: str, ttl_seconds: int = 3600):
        self.secret = secret
        self.ttl_seconds = ttl_seconds

    def issue(self, user_id: int) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "userId": user_id,
            "iat": now,
            "exp": now + timedelta(seconds=self.ttl_seconds),
        }
        return jwt.encode(claims, self.secret, algorithm=TOKEN_ALGORITHM)

    def decode(self, token: str) -> Dict[str, Any]:
        """Decode and verify a token.

        Raises:
            jwt.PyJWTError: If the signature is invalid or the token expired
        """
        return jwt.decode(token, self.secret, algorithms=[TOKEN_ALGORITHM])
