"""
Base models and mixins for SQLAlchemy ORM.

Provides the declarative base shared by all catalog models, plus
common utilities for serialization and declarative string validation.
"""

from typing import Any, Optional

from sqlalchemy import inspect
from sqlalchemy.orm import declarative_base

from northwind.core.exceptions import LengthConstraintError, RequiredValueError


# SQLAlchemy declarative base for all ORM models
Base = declarative_base()


def check_string(
    attribute: str,
    value: Optional[str],
    max_length: int,
) -> str:
    """
    Enforce a declared maximum length on a required string attribute.

    Args:
        attribute: Public attribute name, used in the error message
        value: Value being assigned
        max_length: Declared maximum number of characters

    Returns:
        The value unchanged

    Raises:
        RequiredValueError: If value is None
        LengthConstraintError: If value is longer than max_length
    """
    if value is None:
        raise RequiredValueError(attribute)
    if len(value) > max_length:
        raise LengthConstraintError(attribute, max_length, len(value))
    return value


class ModelMixin:
    """
    Mixin providing common model utilities.

    Adds helper methods for serialization and representation.
    """

    # Attribute names included in __repr__, in order.
    __repr_attrs__ = ()

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary keyed by attribute name.

        Note:
            Only includes columns, not relationships.
        """
        return {
            attr.key: getattr(self, attr.key)
            for attr in inspect(self).mapper.column_attrs
        }

    def __repr__(self) -> str:
        attrs = ", ".join(
            f"{key}={getattr(self, key)!r}" for key in self.__repr_attrs__
        )
        return f"{self.__class__.__name__}({attrs})"
