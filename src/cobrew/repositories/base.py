"""Base repository with common CRUD operations."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import and_, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.cobrew.schemas.pagination import decode_cursor, encode_cursor

_CURSOR_SEPARATOR = "|"


def _parse_cursor(position: str) -> tuple[datetime, UUID]:
    """Split a decoded cursor into its ordering value and row id.

    Raises:
        ValueError: If either part is malformed
    """
    value, _, row_id = position.rpartition(_CURSOR_SEPARATOR)
    return datetime.fromisoformat(value), UUID(row_id)


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    async def get_many(self, ids: Iterable[UUID]) -> dict[UUID, ModelType]:
        """Get records by primary key, keyed by id. Missing ids are absent."""
        unique_ids = set(ids)
        if not unique_ids:
            return {}
        result = await self.session.execute(
            select(self.model).where(self.model.id.in_(unique_ids))  # type: ignore[attr-defined]
        )
        return {item.id: item for item in result.scalars().all()}  # type: ignore[attr-defined]

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark entity for deletion (no commit)."""
        await self.session.delete(entity)

    async def paginate(
        self,
        query: Any,  # SelectOfScalar or Select - SQLModel/SQLAlchemy query
        cursor: str | None,
        limit: int,
        cursor_field: Any,
    ) -> tuple[list[ModelType], str | None, bool]:
        """Execute keyset pagination on a query, newest first.

        Rows are ordered by ``(cursor_field, id)`` descending and the cursor
        carries both values of the last row, so rows sharing a
        ``cursor_field`` value are never skipped across a page boundary.

        Args:
            query: The base SQLAlchemy query to paginate
            cursor: Optional cursor from previous page (base64-encoded)
            limit: Maximum number of items to return
            cursor_field: Datetime column to order by (e.g., created_at)

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        id_field = self.model.id  # type: ignore[attr-defined]

        if cursor:
            try:
                cursor_value, cursor_id = _parse_cursor(decode_cursor(cursor))
            except ValueError:
                # Invalid cursor - ignore and start from beginning
                pass
            else:
                query = query.where(
                    or_(
                        cursor_field < cursor_value,
                        and_(cursor_field == cursor_value, id_field < cursor_id),
                    )
                )

        query = query.order_by(cursor_field.desc(), id_field.desc())

        # Fetch limit + 1 to determine if there are more results
        query = query.limit(limit + 1)

        result = await self.session.execute(query)
        items = list(result.scalars().all())

        has_more = len(items) > limit
        if has_more:
            items = items[:limit]

        next_cursor = None
        if has_more and items:
            last = items[-1]
            value: datetime = getattr(last, cursor_field.key)
            last_id = last.id  # type: ignore[attr-defined]
            next_cursor = encode_cursor(f"{value.isoformat()}{_CURSOR_SEPARATOR}{last_id}")

        return items, next_cursor, has_more
