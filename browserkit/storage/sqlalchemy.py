"""SQLAlchemy storage backend for BrowserKit."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from sqlalchemy import String, Text, delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .base import KeyValueBackend, StorageArea


class Base(DeclarativeBase):
    pass


class StorageItemTable(Base):
    __tablename__ = "browserkit_storage"

    area: Mapped[str] = mapped_column(String(16), primary_key=True)
    item_key: Mapped[str] = mapped_column("key", String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, default="")


class AsyncSQLAlchemyStorage:
    """Shared engine handing out per-area key/value backends."""

    def __init__(self, dsn: str, *, echo: bool = False) -> None:
        self._engine = create_async_engine(dsn, echo=echo, future=True)
        self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            yield session

    async def init_models(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()

    def backend(self, area: StorageArea = "local") -> "SQLAlchemyBackend":
        return SQLAlchemyBackend(self._session_factory, area=area)


class SQLAlchemyBackend(KeyValueBackend):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        area: StorageArea = "local",
    ) -> None:
        self._session_factory = session_factory
        self._area = area

    async def get_item(self, key: str) -> str | None:
        async with self._session_factory() as session:
            row = await session.get(StorageItemTable, (self._area, key))
            return row.value if row else None

    async def set_item(self, key: str, value: str) -> None:
        async with self._session_factory() as session:
            row = await session.get(StorageItemTable, (self._area, key))
            if row is None:
                session.add(StorageItemTable(area=self._area, item_key=key, value=value))
            else:
                row.value = value
            await session.commit()

    async def remove_item(self, key: str) -> None:
        async with self._session_factory() as session:
            stmt = delete(StorageItemTable).where(
                StorageItemTable.area == self._area, StorageItemTable.item_key == key
            )
            await session.execute(stmt)
            await session.commit()

    async def clear(self) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(StorageItemTable).where(StorageItemTable.area == self._area))
            await session.commit()

    async def keys(self) -> Sequence[str]:
        async with self._session_factory() as session:
            stmt = (
                select(StorageItemTable.item_key)
                .where(StorageItemTable.area == self._area)
                .order_by(StorageItemTable.item_key)
            )
            return list((await session.execute(stmt)).scalars().all())
