"""Domain layer - Pure entities describing a manga and the saved library."""

from .detail_view import DetailView
from .feed_entry import FeedEntry
from .library_entry import LibraryEntry
from .manga_item import AUTHOR, COVER_ART, CoverAsset, ItemRecord, Relationship, Tag

__all__ = [
    "AUTHOR",
    "COVER_ART",
    "CoverAsset",
    "DetailView",
    "FeedEntry",
    "ItemRecord",
    "LibraryEntry",
    "Relationship",
    "Tag",
]
