"""
Repository - keyed in-memory storage for one entity kind
Each repository owns its records and its own autoincrement counter
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from core.exceptions import EntityValidationError, RecordNotFoundError
from models.base import Base

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class Repository(ABC, Generic[T]):
    """
    Data access contract for a single entity kind.
    Lookups return None for a missing id; only update() raises.
    """

    @abstractmethod
    def create(self, **fields: Any) -> T:
        """Insert a record, assigning its id (and created_at when the model has one)"""
        pass

    @abstractmethod
    def get(self, record_id: int) -> Optional[T]:
        pass

    @abstractmethod
    def all(self) -> List[T]:
        """All records in insertion order"""
        pass

    @abstractmethod
    def update(self, record_id: int, **fields: Any) -> T:
        """
        Replace fields of an existing record

        Raises:
            RecordNotFoundError: If no record has this id
        """
        pass

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [record for record in self.all() if predicate(record)]

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """First record matching predicate, in insertion order"""
        return next((record for record in self.all() if predicate(record)), None)


class InMemoryRepository(Repository[T]):
    """
    Dict-backed repository.
    Python dicts keep insertion order, so all() is deterministic.
    """

    def __init__(self, model: Type[T]):
        self.model = model
        self.kind = model.__name__
        self._records: Dict[int, T] = {}
        self._next_id = 1

    def __len__(self):
        return len(self._records)

    def create(self, **fields: Any) -> T:
        missing = {
            name for name in self.model.required_fields()
            if fields.get(name) is None
        }
        if missing:
            raise EntityValidationError(self.kind, missing)

        record_id = self._next_id
        values = dict(fields, id=record_id)
        if self.model.is_timestamped():
            values["created_at"] = datetime.now(timezone.utc)

        record = self.model(**values)
        self._next_id += 1
        self._records[record_id] = record

        logger.debug(f"Created {self.kind} id={record_id}")
        return record

    def get(self, record_id: int) -> Optional[T]:
        return self._records.get(record_id)

    def all(self) -> List[T]:
        return list(self._records.values())

    def update(self, record_id: int, **fields: Any) -> T:
        existing = self._records.get(record_id)
        if existing is None:
            raise RecordNotFoundError(self.kind, record_id)

        # id and created_at are immutable
        changes = {
            name: value for name, value in fields.items()
            if name in self.model.model_fields and name not in ("id", "created_at")
        }
        updated = existing.model_copy(update=changes)
        self._records[record_id] = updated

        logger.debug(f"Updated {self.kind} id={record_id} fields={sorted(changes)}")
        return updated
