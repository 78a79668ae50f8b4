"""Library store - the deduplicated set of saved manga."""

import json
import logging
import threading
from typing import List

from manga_details.core import LibraryEntry

from .slot_storage import SlotStorage

logger = logging.getLogger(__name__)

LIBRARY_SLOT = "library"


class LibraryStore:
    """Keeps the saved library in a single storage slot.

    Every operation reads the whole slot, works on the list in memory and
    writes the whole list back. The library holds at most one entry per id:
    add() upserts and every write drops later duplicates.

    Unreadable stored data is treated as an empty library. Write failures
    propagate as RuntimeError.
    """

    def __init__(self, storage: SlotStorage, slot_name: str = LIBRARY_SLOT) -> None:
        if storage is None:
            raise ValueError("SlotStorage must not be None")
        self.storage = storage
        self.slot_name = slot_name
        self._lock = threading.RLock()

    def entries(self) -> List[LibraryEntry]:
        """Return all saved entries in insertion order."""
        with self._lock:
            return self._read()

    def contains(self, item_id: str) -> bool:
        with self._lock:
            return any(entry.id == item_id for entry in self._read())

    def add(self, entry: LibraryEntry) -> None:
        """Save an entry, replacing any existing entry with the same id."""
        with self._lock:
            entries = self._read()
            for idx, existing in enumerate(entries):
                if existing.id == entry.id:
                    entries[idx] = entry
                    logger.debug("Replaced library entry %s", entry.id)
                    break
            else:
                entries.append(entry)
                logger.debug("Added library entry %s", entry.id)
            self._write(entries)

    def remove(self, item_id: str) -> None:
        """Remove the entry with the given id. Missing ids are ignored."""
        with self._lock:
            entries = self._read()
            remaining = [entry for entry in entries if entry.id != item_id]
            self._write(remaining)

    def _read(self) -> List[LibraryEntry]:
        raw = self.storage.get(self.slot_name)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning("Ignoring unreadable library slot '%s': %s", self.slot_name, e)
            return []

        if not isinstance(data, list):
            logger.warning(
                "Ignoring library slot '%s': expected a list, got %s",
                self.slot_name,
                type(data).__name__,
            )
            return []

        entries = []
        for item in data:
            try:
                entries.append(LibraryEntry.from_dict(item))
            except ValueError as e:
                logger.warning("Skipping malformed library entry: %s", e)
        return entries

    def _write(self, entries: List[LibraryEntry]) -> None:
        seen = set()
        unique = []
        for entry in entries:
            if entry.id in seen:
                continue
            seen.add(entry.id)
            unique.append(entry)
        if not unique:
            # An absent slot reads back as an empty library
            self.storage.delete(self.slot_name)
            return
        payload = json.dumps([entry.to_dict() for entry in unique], ensure_ascii=False)
        self.storage.put(self.slot_name, payload)
