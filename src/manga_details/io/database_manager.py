"""SQLite connection and schema for local persisted state."""

import sqlite3
from pathlib import Path


class DatabaseManager:
    """Owns the SQLite connection and the storage schema."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        if str(db_path) != ":memory:":
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        # The load worker reads library membership off the Qt thread.
        self.connection = sqlite3.connect(str(db_path), check_same_thread=False)
        self.connection.row_factory = sqlite3.Row

    def ensure_schema(self) -> None:
        """Create tables if they do not exist."""
        cur = self.connection.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS storage_slots (
                name TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at INTEGER NOT NULL
            );
            """
        )
        self.connection.commit()

    def close(self) -> None:
        self.connection.close()
