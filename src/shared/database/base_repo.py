import abc
from typing import Any, Generic, TypeVar, Optional

from sqlalchemy import Executable

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database
from src.shared.database.unit_of_work import UnitOfWork


TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    def __init__(self, db: Database, mapper: BaseEntityMapper[TModel, TEntity]):
        self.db = db
        self.mapper = mapper

    def unit_of_work(self) -> UnitOfWork:
        return UnitOfWork(self.db)

    async def find_one(self, statement: Executable) -> Optional[TModel]:
        async with self.db.session_maker() as session:
            result = await session.execute(statement)
            entity = result.scalar_one_or_none()
            if entity is None:
                return None
            return self.mapper.to_model(entity)

    async def find_first(self, statement: Executable) -> Optional[TModel]:
        async with self.db.session_maker() as session:
            result = await session.execute(statement)
            entity = result.scalars().first()
            if entity is None:
                return None
            return self.mapper.to_model(entity)

    async def find_all(self, statement: Executable) -> list[TModel]:
        async with self.db.session_maker() as session:
            result = await session.execute(statement)
            entities = list(result.scalars().all())
            return [self.mapper.to_model(entity) for entity in entities]

    async def scalar(self, statement: Executable) -> Any:
        async with self.db.session_maker() as session:
            return await session.scalar(statement)

    async def _insert(self, model: TModel) -> TModel:
        """
        Persist a new row and return it as a model.

        The row is flushed inside the transaction so that database-generated
        values (e.g. autoincrement keys) are present on the returned model.
        """
        entity = self.mapper.to_entity(model)
        async with self.unit_of_work() as uow:
            uow.add(entity)
            await uow.flush()
        return self.mapper.to_model(entity)

    async def _replace(self, entity_type: type[TEntity], entity_id: Any, model: TModel) -> Optional[TModel]:
        """
        Overwrite the row identified by ``entity_id`` with the model's values.

        Returns:
            The stored model, or None if no such row exists.
        """
        async with self.unit_of_work() as uow:
            entity = await uow.get(entity_type, entity_id)
            if entity is None:
                return None
            self.mapper.apply_to_entity(model, entity)
            await uow.flush()
        return self.mapper.to_model(entity)

    async def _remove(self, entity_type: type[TEntity], entity_id: Any) -> bool:
        """Delete the row identified by ``entity_id``. Returns False if it did not exist."""
        async with self.unit_of_work() as uow:
            entity = await uow.get(entity_type, entity_id)
            if entity is None:
                return False
            await uow.delete(entity)
        return True
