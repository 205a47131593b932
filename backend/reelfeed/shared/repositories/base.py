"""
Base Repository

Generic base repository with the operations every entity repository shares.

What This Provides:
===================
- get(id)        → Fetch single record by UUID
- exists(id)     → Check if a record exists without loading it
- create()       → Insert a new record and return it with DB defaults
- flip(**key)    → Delete the row matching key, or insert it if none existed

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[User]):
        pass

    repo = UserRepository(db)
    user = await repo.get(id)  # Returns User, not Any!

Flip (toggle) Flow:
===================
┌─────────────────────────────────────────────────────────────────────────────┐
│   DELETE FROM likes WHERE user_id = :u AND video_id = :v                    │
│        │                                                                    │
│        ├── rowcount > 0  → relation existed, now gone      → return False   │
│        │                                                                    │
│        └── rowcount = 0  → INSERT ... ON CONFLICT DO NOTHING → return True  │
│                            (the unique constraint absorbs a concurrent      │
│                             insert of the same pair)                        │
└─────────────────────────────────────────────────────────────────────────────┘

flush() vs commit():
====================
Repository methods only flush; get_db() commits once per request.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from reelfeed.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common operations.

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session

    Example:
        class VideoRepository(BaseRepository[Video]):
            def __init__(self, session: AsyncSession):
                super().__init__(Video, session)
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Video)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID.

        Args:
            record_id: The UUID of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE id = '550e8400-...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def exists(self, record_id: UUID) -> bool:
        """
        Check if a record exists without loading it.

        SQL Generated:
            SELECT COUNT(*) FROM videos WHERE id = '...'
        """
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Adds the instance, flushes to send the INSERT, then refreshes to
        pick up DB-generated values.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance

        Example:
            video = await repo.create(user_id=user_id, title="Hello", video_url=url)
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def flip(self, **key: Any) -> bool:
        """
        Toggle existence of the row identified by ``key``.

        The model must carry a unique constraint (or primary key) over the
        key columns; that is what makes the insert side race-free.

        Args:
            **key: Column values identifying the relation row

        Returns:
            True if the row exists afterwards, False if it was removed

        Example:
            is_liked = await like_repo.flip(user_id=user_id, video_id=video_id)
        """
        conditions = [getattr(self.model, column) == value for column, value in key.items()]
        result = await self.session.execute(
            delete(self.model)
            .where(*conditions)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount:
            return False

        await self._insert_ignoring_conflicts(**key)
        return True

    async def _insert_ignoring_conflicts(self, **values: Any) -> None:
        """INSERT ... ON CONFLICT DO NOTHING for the session's dialect."""
        dialect = self.session.get_bind().dialect.name
        insert = sqlite_insert if dialect == "sqlite" else postgresql_insert
        await self.session.execute(insert(self.model).values(**values).on_conflict_do_nothing())
