"""FeedEntry entity - one chapter in an item's feed."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FeedEntry:
    """A chapter of a manga.

    Attributes:
        id: Remote chapter identifier.
        chapter: Chapter number as sent by the service ("10", "10.5", or None).
        title: Chapter title, if any.
    """

    id: str
    chapter: Optional[str] = None
    title: Optional[str] = None

    @property
    def display_label(self) -> str:
        """Label shown in the chapter list, e.g. "Chapter 10 The Hawk"."""
        parts = ["Chapter"]
        if self.chapter:
            parts.append(self.chapter)
        if self.title:
            parts.append(self.title)
        return " ".join(parts)

    @property
    def link_path(self) -> str:
        """Reader route for this chapter."""
        return f"/chapter/{self.id}"
