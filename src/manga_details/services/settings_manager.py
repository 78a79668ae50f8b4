"""Settings Manager - Handles API endpoints, storage location and logging configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.mangadex.org"
DEFAULT_UPLOADS_URL = "https://uploads.mangadex.org"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages application settings.

    Reads values from a .env file in the project root, falling back to the
    process environment and then to built-in defaults.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_api_url(self) -> str:
        """Base URL of the MangaDex API."""
        return self._get("MANGADEX_API_URL") or DEFAULT_API_URL

    def get_uploads_url(self) -> str:
        """Base URL that cover files are served from."""
        return self._get("MANGADEX_UPLOADS_URL") or DEFAULT_UPLOADS_URL

    def get_db_path(self) -> Path:
        """Location of the SQLite file holding the saved library."""
        value = self._get("MANGA_DETAILS_DB_PATH")
        if value:
            return Path(value).expanduser()
        return Path.home() / ".manga_details" / "library.db"

    def get_request_timeout(self) -> float:
        """HTTP timeout in seconds; invalid or non-positive values use the default."""
        value = self._get("MANGADEX_TIMEOUT")
        if not value:
            return DEFAULT_TIMEOUT
        try:
            timeout = float(value)
        except ValueError:
            return DEFAULT_TIMEOUT
        return timeout if timeout > 0 else DEFAULT_TIMEOUT

    def get_log_level(self) -> str:
        return (self._get("MANGA_DETAILS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
