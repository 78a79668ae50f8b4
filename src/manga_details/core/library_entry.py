"""Domain entity for a manga saved in the local library."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LibraryEntry:
    """Represents a manga in the user's saved library.

    Attributes:
        id: Remote item identifier; the library holds at most one entry per id.
        title: Display title at the time it was saved.
        cover_image_url: Cover display URL, if one was resolved.
        chapter_count: Number of chapters in the feed when saved.
    """

    id: str
    title: str
    cover_image_url: Optional[str]
    chapter_count: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted JSON layout."""
        return {
            "id": self.id,
            "title": self.title,
            "coverImageUrl": self.cover_image_url,
            "chapterCount": self.chapter_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LibraryEntry":
        """Build an entry from its persisted JSON layout.

        Raises:
            ValueError: If the id is missing or a field has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Library entry must be an object, got {type(data).__name__}")
        entry_id = data.get("id")
        if not isinstance(entry_id, str) or not entry_id:
            raise ValueError("Library entry is missing its id")
        title = data.get("title")
        cover = data.get("coverImageUrl")
        try:
            chapter_count = int(data.get("chapterCount") or 0)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid chapterCount for {entry_id}: {e}") from e
        return cls(
            id=entry_id,
            title=title if isinstance(title, str) else "",
            cover_image_url=cover if isinstance(cover, str) else None,
            chapter_count=chapter_count,
        )
