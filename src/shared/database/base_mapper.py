import abc
from typing import Generic, TypeVar


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class BaseEntityMapper(abc.ABC, Generic[TModel, TEntity]):

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TEntity:
        pass

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TEntity) -> TModel:
        pass

    @staticmethod
    @abc.abstractmethod
    def apply_to_entity(model_instance: TModel, entity: TEntity) -> None:
        """Overwrite the mutable columns of an attached entity with the model's values."""
        pass
