"""User signup, listing and login."""

import logging
from typing import List, Optional

from ..core.entities import User
from ..core.errors import InvalidInputError, UnauthorizedError
from ..adapters.database.repository import DuplicateRecordError, UserRepository
from ..adapters.security import AccessTokenIssuer, PasswordHasher


logger = logging.getLogger(__name__)


class AuthService:
    """Authenticates users and issues access tokens."""

    def __init__(
        self,
        repository: UserRepository,
        token_issuer: AccessTokenIssuer,
        password_hasher: Optional[PasswordHasher] = None,
    ):
        self.repository = repository
        self.token_issuer = token_issuer
        self.password_hasher = password_hasher or PasswordHasher()

    async def login(self, email: Optional[str], password: Optional[str]) -> str:
        """Check credentials and return a signed access token.

        An unknown email and a wrong password fail identically so callers
        cannot probe which emails are registered.

        Raises:
            UnauthorizedError: If the credentials are rejected
        """
        if not (isinstance(email, str) and email and isinstance(password, str) and password):
            raise UnauthorizedError("Invalid email or password")

        user = await self.repository.find_by_email(email)
        if user is None or not self.password_hasher.verify(password, user.password_hash):
            logger.info("Rejected login attempt")
            raise UnauthorizedError("Invalid email or password")

        return self.token_issuer.issue(user.id)

    async def signup(self, email: Optional[str], password: Optional[str]) -> User:
        """Register a user, storing only a hash of the password.

        Raises:
            InvalidInputError: Missing fields or email already registered
        """
        if not email or not password:
            raise InvalidInputError("Email and password are required")
        if not isinstance(email, str) or not isinstance(password, str):
            raise InvalidInputError("Email and password must be strings")

        password_hash = self.password_hasher.hash(password)
        try:
            user = await self.repository.create(email, password_hash)
        except DuplicateRecordError as e:
            raise InvalidInputError("User already exists") from e

        logger.info(f"Created user {user.id}")
        return user

    async def list_users(self) -> List[User]:
        return await self.repository.find_all()
