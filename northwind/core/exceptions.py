"""
Exception hierarchy for the catalog data model.

Validation errors are raised on attribute assignment; constraint errors are
raised when the database rejects a flush.
"""

from typing import Optional


class NorthwindError(Exception):
    """Base exception for the catalog package"""
    pass


class ValidationError(NorthwindError):
    """Raised when an attribute value fails declarative validation"""

    def __init__(self, attribute: str, message: str):
        self.attribute = attribute
        super().__init__(message)


class LengthConstraintError(ValidationError):
    """Raised when a string exceeds its declared maximum length"""

    def __init__(self, attribute: str, max_length: int, length: int):
        self.max_length = max_length
        self.length = length
        super().__init__(
            attribute,
            f"{attribute} must be at most {max_length} characters (got {length})"
        )


class RequiredValueError(ValidationError):
    """Raised when None is assigned to a required attribute"""

    def __init__(self, attribute: str):
        super().__init__(attribute, f"{attribute} is required and cannot be None")


class ConstraintViolationError(NorthwindError):
    """Raised when the database rejects a write due to a constraint"""

    def __init__(self, constraint: str, message: Optional[str] = None):
        self.constraint = constraint
        super().__init__(message or f"Constraint violated: {constraint}")


class ReferentialIntegrityError(ConstraintViolationError):
    """Raised when a foreign key does not resolve to an existing row"""

    def __init__(self, foreign_key: str, value: object = None):
        self.foreign_key = foreign_key
        self.value = value
        super().__init__(
            foreign_key,
            f"Foreign key {foreign_key}={value!r} does not reference an existing row"
        )
