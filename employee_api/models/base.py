"""
Base models and mixins for SQLAlchemy ORM.

Provides the declarative base and common utilities for all database models.
"""

from typing import Any

from sqlalchemy.orm import declarative_base


# SQLAlchemy declarative base for all ORM models
Base = declarative_base()


class ModelMixin:
    """
    Mixin providing common model utilities.

    Adds helper methods for serialization and representation.
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary.

        Returns:
            Dictionary keyed by attribute name with all column values

        Note:
            Only includes columns, not relationships.
        """
        return {
            attr.key: getattr(self, attr.key)
            for attr in self.__mapper__.column_attrs
        }

    def __repr__(self) -> str:
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
        )
        return f"{self.__class__.__name__}({attrs})"
