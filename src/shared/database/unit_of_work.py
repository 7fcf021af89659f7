from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database


class UnitOfWork:
    """
    One session, one transaction.

    Commits when the block exits cleanly and rolls back when it raises.
    A fresh session is opened on every entry, so an instance can be reused
    for consecutive blocks but not nested.
    """

    def __init__(self, db: Database) -> None:
        self.db = db
        self.session: AsyncSession

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.session.close()

    def add(self, entity: Any) -> None:
        self.session.add(entity)

    async def get(self, entity_type: type, entity_id: Any) -> Optional[Any]:
        return await self.session.get(entity_type, entity_id)

    async def delete(self, entity: Any) -> None:
        await self.session.delete(entity)

    async def flush(self) -> None:
        await self.session.flush()

    async def commit(self):
        try:
            await self.session.commit()
        except Exception:
            await self.rollback()
            raise

    async def rollback(self):
        await self.session.rollback()
