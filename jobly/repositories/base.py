"""
Base repository with generic CRUD operations.

All entity-specific repositories inherit from this.
"""
from typing import Any, ClassVar, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.sql import sql_for_partial_update
from jobly.models.base import BaseModel

# Generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard CRUD operations.

    Usage:
        class CompanyRepository(BaseRepository[Company]):
            js_to_sql = {"numEmployees": "num_employees"}

            def __init__(self):
                super().__init__(Company, Company.handle)
    """

    # API field name -> column name, for fields spelled differently in SQL
    js_to_sql: ClassVar[Dict[str, str]] = {}

    def __init__(self, model: Type[ModelType], key: Any):
        self.model = model
        self.key = key

    async def get_by_key(
        self,
        db: AsyncSession,
        key: Any,
    ) -> Optional[ModelType]:
        """Get a single record by primary key."""
        result = await db.execute(
            select(self.model).where(self.key == key)
        )
        return result.scalar_one_or_none()

    async def exists(
        self,
        db: AsyncSession,
        key: Any,
    ) -> bool:
        """Check whether a record with this primary key exists."""
        result = await db.execute(
            select(self.key).where(self.key == key)
        )
        return result.scalar_one_or_none() is not None

    async def get_many(
        self,
        db: AsyncSession,
        *,
        order_by: Any = None,
    ) -> List[ModelType]:
        """Get all records, ordered by primary key unless told otherwise."""
        query = select(self.model).order_by(
            order_by if order_by is not None else self.key
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(
        self,
        db: AsyncSession,
        **kwargs: Any,
    ) -> ModelType:
        """Create a new record."""
        instance = self.model(**kwargs)
        db.add(instance)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def partial_update(
        self,
        db: AsyncSession,
        key: Any,
        data: Mapping[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Update only the fields present in ``data``.

        ``data`` uses API field names; ``js_to_sql`` maps them to columns.
        The statement goes straight to the driver so the $n placeholders
        reach asyncpg untouched.

        Returns:
            The updated row keyed by column name, or None if no row matched.

        Raises:
            QueryBuildError: (BAD_REQUEST) if ``data`` is empty.
        """
        set_cols, values = sql_for_partial_update(data, self.js_to_sql)
        key_placeholder = f"${len(values) + 1}"

        table = self.model.__table__
        returning = ", ".join(f'"{col.name}"' for col in table.columns)
        statement = (
            f'UPDATE "{table.name}" SET {set_cols} '
            f'WHERE "{self.key.name}" = {key_placeholder} '
            f"RETURNING {returning}"
        )

        conn = await db.connection()
        result = await conn.exec_driver_sql(statement, (*values, key))
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def delete(
        self,
        db: AsyncSession,
        key: Any,
    ) -> bool:
        """Hard delete a record by primary key."""
        result = await db.execute(
            delete(self.model).where(self.key == key)
        )
        return result.rowcount > 0
