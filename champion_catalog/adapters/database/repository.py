"""Repository classes for champion and user persistence.

Each repository call opens its own session and commits once, so every
operation is a single transaction. Database models are converted to core
entities before they leave this module.
"""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import IntegrityError

from ...core.entities import Champion, User
from ...core.enums import Role
from .manager import DatabaseManager
from .models import Champion as ChampionModel, User as UserModel


class DuplicateRecordError(Exception):
    """A unique constraint rejected the write."""

    pass


class ChampionRepository:
    """Repository for Champion operations."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    @staticmethod
    def _to_entity(record: ChampionModel) -> Champion:
        return Champion(
            id=record.id,
            name=record.name,
            role=[Role(value) for value in record.role],
            image_path=record.image_path,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def find_page(self, offset: int, limit: int) -> List[Champion]:
        """Get one page of champions ordered by ID."""
        async with self.db_manager.get_session() as session:
            result = await session.execute(
                select(ChampionModel)
                .order_by(ChampionModel.id)
                .offset(offset)
                .limit(limit)
            )
            return [self._to_entity(record) for record in result.scalars().all()]

    async def count(self) -> int:
        """Count all champions."""
        async with self.db_manager.get_session() as session:
            result = await session.execute(select(func.count()).select_from(ChampionModel))
            return result.scalar_one()

    async def find_by_name(self, name: str) -> Optional[Champion]:
        """Get a champion by its exact (already normalized) name."""
        async with self.db_manager.get_session() as session:
            result = await session.execute(
                select(ChampionModel).where(ChampionModel.name == name)
            )
            record = result.scalar_one_or_none()
            return self._to_entity(record) if record else None

    async def create(self, name: str, roles: Sequence[Role], image_path: str) -> Champion:
        """Create a new champion."""
        async with self.db_manager.get_session() as session:
            record = ChampionModel(
                name=name,
                role=[role.value for role in roles],
                image_path=image_path,
            )
            session.add(record)
            await session.commit()
            await session.refresh(record)
            return self._to_entity(record)

    async def update(
        self,
        name: str,
        new_name: Optional[str] = None,
        roles: Optional[Sequence[Role]] = None,
        image_path: Optional[str] = None,
    ) -> Optional[Champion]:
        """Update the champion called ``name``; fields left as None are unchanged.

        Returns:
            The updated champion, or None if no champion has that name.
        """
        values: Dict[str, object] = {"updated_at": func.now()}
        if new_name is not None:
            values["name"] = new_name
        if roles is not None:
            values["role"] = [role.value for role in roles]
        if image_path is not None:
            values["image_path"] = image_path

        async with self.db_manager.get_session() as session:
            result = await session.execute(
                update(ChampionModel)
                .where(ChampionModel.name == name)
                .values(**values)
                .returning(ChampionModel)
            )
            record = result.scalar_one_or_none()
            await session.commit()
            return self._to_entity(record) if record else None

    async def delete(self, champion_id: int) -> bool:
        """Delete a champion by ID."""
        async with self.db_manager.get_session() as session:
            result = await session.execute(
                delete(ChampionModel).where(ChampionModel.id == champion_id)
            )
            await session.commit()
            return result.rowcount > 0


class UserRepository:
    """Repository for User operations."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    @staticmethod
    def _to_entity(record: UserModel) -> User:
        return User(
            id=record.id,
            email=record.email,
            password_hash=record.password,
            created_at=record.created_at,
        )

    async def create(self, email: str, password_hash: str) -> User:
        """Create a new user.

        Raises:
            DuplicateRecordError: If the email is already registered.
        """
        async with self.db_manager.get_session() as session:
            record = UserModel(email=email, password=password_hash)
            session.add(record)
            try:
                await session.commit()
            except IntegrityError as e:
                raise DuplicateRecordError(f"User {email} already exists") from e
            await session.refresh(record)
            return self._to_entity(record)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        async with self.db_manager.get_session() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == email)
            )
            record = result.scalar_one_or_none()
            return self._to_entity(record) if record else None

    async def find_all(self) -> List[User]:
        """Get all users ordered by ID."""
        async with self.db_manager.get_session() as session:
            result = await session.execute(select(UserModel).order_by(UserModel.id))
            return [self._to_entity(record) for record in result.scalars().all()]
