"""
Base model for in-memory records
"""
from datetime import datetime
from typing import Optional, Set

from pydantic import BaseModel

# Fields filled in by the store, never by the caller
STORE_MANAGED_FIELDS = {"id", "created_at"}


class Base(BaseModel):
    """
    Common parent of every stored entity.
    The id is assigned by the owning repository on insert.
    """

    id: int

    @classmethod
    def required_fields(cls) -> Set[str]:
        """Fields a caller must supply when creating a record"""
        return {
            name
            for name, field in cls.model_fields.items()
            if field.is_required() and name not in STORE_MANAGED_FIELDS
        }

    @classmethod
    def is_timestamped(cls) -> bool:
        return "created_at" in cls.model_fields


def isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
