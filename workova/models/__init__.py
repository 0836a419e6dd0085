"""
SQLAlchemy models.
"""
from workova.models.base import BaseModel
from workova.models.collection import StoredCollection

__all__ = [
    "BaseModel",
    "StoredCollection",
]
