"""
Store exceptions

Lookups never raise for a missing record, they return None.
These exceptions signal caller misuse of the store.
"""


class MarketplaceError(Exception):
    """Base exception for store errors"""
    pass


class RecordNotFoundError(MarketplaceError):
    """Raised when updating a record id that does not exist"""

    def __init__(self, kind: str, record_id: int):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} with id {record_id} not found")


class EntityValidationError(MarketplaceError):
    """Raised when a record is created without its required fields"""

    def __init__(self, kind: str, missing):
        self.kind = kind
        self.missing = sorted(missing)
        super().__init__(f"Cannot create {kind}: missing required fields {', '.join(self.missing)}")
