"""
Domain Layer - Core DDD building blocks

This module provides base classes shared by the domain packages:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from app.core.domain.entities import Entity
from app.core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    IntegrationException,
    ValidationException,
)
from app.core.domain.value_objects import ValueObject

__all__ = [
    "Entity",
    "ValueObject",
    "DomainException",
    "EntityNotFoundException",
    "IntegrationException",
    "ValidationException",
]
