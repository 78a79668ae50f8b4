"""In-memory slot storage for testing and session-only use."""

from typing import Optional

from .slot_storage import SlotStorage


class InMemorySlotStorage(SlotStorage):
    """
    Simple in-memory slot store.

    Used for testing and session-level state. No persistence.
    """

    def __init__(self):
        self._slots: dict[str, str] = {}

    def get(self, name: str) -> Optional[str]:
        return self._slots.get(name)

    def put(self, name: str, value: str) -> None:
        self._slots[name] = value

    def delete(self, name: str) -> None:
        self._slots.pop(name, None)
