"""
Shared write path for repositories.

Each write runs inside a SAVEPOINT, so a rejected row is undone on its
own and the rest of the caller's unit of work stays intact.
"""

from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from northwind.core.exceptions import (
    ConstraintViolationError,
    ReferentialIntegrityError,
)
from northwind.core.logging_config import get_logger, log_with_context
from northwind.models.base import Base

logger = get_logger(__name__)


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """
    Tell whether an IntegrityError came from a foreign key constraint.

    SQLite reports "FOREIGN KEY constraint failed", PostgreSQL
    "violates foreign key constraint", SQL Server "FOREIGN KEY constraint".
    """
    return "foreign key" in str(exc.orig).lower()


async def add_or_raise(
    session: AsyncSession,
    instance: Base,
    entity: str,
    entity_id: Any,
    constraint: str,
    foreign_key: Optional[str] = None,
    foreign_key_value: Any = None,
) -> None:
    """
    Add ``instance`` and flush it inside a SAVEPOINT, translating IntegrityError.

    Args:
        session: Session owning the unit of work
        instance: Model instance to insert
        entity: Entity kind for log context, e.g. "Product"
        entity_id: Primary key of the entity being written (may be None)
        constraint: Constraint reported for non-FK failures
        foreign_key: Qualified FK column written, if any
        foreign_key_value: Value assigned to that FK

    Raises:
        ReferentialIntegrityError: If a foreign key does not resolve
        ConstraintViolationError: For any other integrity failure

    Note:
        On failure only the savepoint is rolled back; rows written earlier
        in the session survive and the session remains usable.
    """
    try:
        async with session.begin_nested():
            session.add(instance)
    except IntegrityError as e:
        if is_foreign_key_violation(e):
            fk = foreign_key or constraint
            log_with_context(
                logger, "warning", "Foreign key violation",
                entity=entity, entity_id=entity_id, constraint=fk,
            )
            raise ReferentialIntegrityError(fk, foreign_key_value) from e
        log_with_context(
            logger, "warning", "Constraint violation",
            entity=entity, entity_id=entity_id, constraint=constraint,
            detail=str(e.orig),
        )
        raise ConstraintViolationError(constraint, str(e.orig)) from e
