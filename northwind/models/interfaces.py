"""
Capability interfaces over catalog entities.

Implementations opt in by subclassing; having a matching attribute is
not enough.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IProduct(ABC):
    """
    Product-like capability exposing a readable and writable description.

    No catalog model implements this interface.
    """

    @property
    @abstractmethod
    def description(self) -> Optional[str]:
        """Free-text description, or None when absent."""

    @description.setter
    @abstractmethod
    def description(self, value: Optional[str]) -> None:
        """Replace the description; None clears it."""
