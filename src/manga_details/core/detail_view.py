"""DetailView - the composed snapshot shown on the manga detail screen."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .display_fields import NO_ALT_TITLE
from .feed_entry import FeedEntry
from .library_entry import LibraryEntry


@dataclass(frozen=True)
class DetailView:
    """A complete, internally consistent view of one manga.

    Built fresh for every load and never updated in place. The cover URL,
    when present, always belongs to item_id.
    """

    item_id: str
    title: str
    alt_title: str
    description: str
    genres: str
    year: str
    status: str
    cover_url: Optional[str]
    author_name: str
    chapters: Tuple[FeedEntry, ...]
    is_saved: bool

    @property
    def has_alt_title(self) -> bool:
        return self.alt_title != NO_ALT_TITLE

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    def to_library_entry(self) -> LibraryEntry:
        """Summarize this view as a library entry."""
        return LibraryEntry(
            id=self.item_id,
            title=self.title,
            cover_image_url=self.cover_url,
            chapter_count=self.chapter_count,
        )
