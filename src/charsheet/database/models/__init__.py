"""SQLAlchemy models for charsheet."""

from charsheet.database.models.base import Base, TimestampMixin
from charsheet.database.models.character import CharacterRecord

__all__ = [
    "Base",
    "TimestampMixin",
    "CharacterRecord",
]
