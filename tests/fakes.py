"""In-memory stand-ins for the repositories and the blob store."""

from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from champion_catalog.adapters.database.repository import DuplicateRecordError
from champion_catalog.adapters.storage.client import BlobStoreError, S3BlobStore
from champion_catalog.core.entities import Champion, User
from champion_catalog.core.enums import Role


class InMemoryBlobStore(S3BlobStore):
    """S3BlobStore that keeps objects in a dict instead of calling S3.

    URL building and parsing are inherited unchanged.
    """

    def __init__(self, bucket: str, region: str):
        super().__init__(client=None, bucket=bucket, region=region)
        self.objects: Dict[str, bytes] = {}
        self.calls: List[tuple] = []
        self.fail_on_put = False
        self.fail_on_delete = False

    async def put(self, key: str, data: bytes, content_type: str) -> str:
        self.calls.append(("put", key))
        if self.fail_on_put:
            raise BlobStoreError(f"Failed to upload {key}")
        self.objects[key] = data
        return self.public_url(key)

    async def delete(self, key: str) -> None:
        self.calls.append(("delete", key))
        if self.fail_on_delete:
            raise BlobStoreError(f"Failed to delete {key}")
        self.objects.pop(key, None)


class InMemoryChampionRepository:
    """Dict-backed ChampionRepository."""

    def __init__(self):
        self.champions: Dict[int, Champion] = {}
        self._next_id = 1
        self.fail_on_create = False

    async def find_page(self, offset: int, limit: int) -> List[Champion]:
        ordered = [self.champions[i] for i in sorted(self.champions)]
        return ordered[offset:offset + limit]

    async def count(self) -> int:
        return len(self.champions)

    async def find_by_name(self, name: str) -> Optional[Champion]:
        for champion in self.champions.values():
            if champion.name == name:
                return champion
        return None

    async def create(self, name: str, roles: Sequence[Role], image_path: str) -> Champion:
        if self.fail_on_create:
            raise RuntimeError("database unavailable")
        if await self.find_by_name(name):
            raise RuntimeError(f"duplicate champion {name}")
        now = datetime.utcnow()
        champion = Champion(
            id=self._next_id,
            name=name,
            role=list(roles),
            image_path=image_path,
            created_at=now,
            updated_at=now,
        )
        self.champions[champion.id] = champion
        self._next_id += 1
        return champion

    async def update(
        self,
        name: str,
        new_name: Optional[str] = None,
        roles: Optional[Sequence[Role]] = None,
        image_path: Optional[str] = None,
    ) -> Optional[Champion]:
        current = await self.find_by_name(name)
        if current is None:
            return None
        updated = replace(
            current,
            name=new_name if new_name is not None else current.name,
            role=list(roles) if roles is not None else current.role,
            image_path=image_path if image_path is not None else current.image_path,
            updated_at=datetime.utcnow(),
        )
        self.champions[updated.id] = updated
        return updated

    async def delete(self, champion_id: int) -> bool:
        return self.champions.pop(champion_id, None) is not None


class InMemoryUserRepository:
    """Dict-backed UserRepository."""

    def __init__(self):
        self.users: Dict[str, User] = {}

    async def create(self, email: str, password_hash: str) -> User:
        if email in self.users:
            raise DuplicateRecordError(f"User {email} already exists")
        user = User(
            id=len(self.users) + 1,
            email=email,
            password_hash=password_hash,
            created_at=datetime.utcnow(),
        )
        self.users[email] = user
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.users.get(email)

    async def find_all(self) -> List[User]:
        return sorted(self.users.values(), key=lambda user: user.id)
