"""SQLite-backed slot storage."""

import sqlite3
import time
from typing import Optional

from .slot_storage import SlotStorage


class SqliteSlotStorage(SlotStorage):
    """Persists slots in the storage_slots table.

    Writes are a single upsert statement, so a slot is never left
    partially written.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        """Initialize storage with a database connection.

        Args:
            connection: SQLite connection with the storage schema created.

        Raises:
            RuntimeError: If connection is None.
        """
        if connection is None:
            raise RuntimeError("Database connection required")
        self.connection = connection
        self.connection.row_factory = sqlite3.Row

    def get(self, name: str) -> Optional[str]:
        try:
            cur = self.connection.cursor()
            cur.execute(
                "SELECT value FROM storage_slots WHERE name = ?",
                (name,),
            )
            row = cur.fetchone()
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to read slot '{name}': {e}") from e
        return row["value"] if row else None

    def put(self, name: str, value: str) -> None:
        try:
            cur = self.connection.cursor()
            cur.execute(
                """
                INSERT INTO storage_slots (name, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(name) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (name, value, int(time.time())),
            )
            self.connection.commit()
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to write slot '{name}': {e}") from e

    def delete(self, name: str) -> None:
        try:
            cur = self.connection.cursor()
            cur.execute("DELETE FROM storage_slots WHERE name = ?", (name,))
            self.connection.commit()
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to delete slot '{name}': {e}") from e
