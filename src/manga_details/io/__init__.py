"""I/O layer - Local persistence for the saved library."""

from .database_manager import DatabaseManager
from .in_memory_slot_storage import InMemorySlotStorage
from .library_store import LIBRARY_SLOT, LibraryStore
from .slot_storage import SlotStorage
from .sqlite_slot_storage import SqliteSlotStorage

__all__ = [
    "DatabaseManager",
    "InMemorySlotStorage",
    "LIBRARY_SLOT",
    "LibraryStore",
    "SlotStorage",
    "SqliteSlotStorage",
]
