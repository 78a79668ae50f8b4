"""Slot storage abstraction - named string slots holding serialized state."""

from abc import ABC, abstractmethod
from typing import Optional


class SlotStorage(ABC):
    """
    Abstract key-value store of named slots.

    Each slot holds one serialized value that is always replaced as a whole.
    Implementations (SqliteSlotStorage, InMemorySlotStorage) handle storage details.
    """

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """
        Read a slot.

        Args:
            name: Slot name (e.g. "library").

        Returns:
            The stored value, or None if the slot has never been written.
        """
        pass

    @abstractmethod
    def put(self, name: str, value: str) -> None:
        """
        Replace the whole value of a slot.

        Raises:
            RuntimeError: If the value cannot be persisted.
        """
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove a slot. Deleting a missing slot is a no-op."""
        pass
