"""
Manga Details - the detail screen engine of a manga browser.

This package provides:
- Remote lookups against the MangaDex API (manga, cover, author, chapters)
- Aggregation of those lookups into a single detail view
- A locally persisted library of saved manga
"""

__version__ = "0.1.0"

# Make key components available at package level
from manga_details.core import DetailView, FeedEntry, ItemRecord, LibraryEntry
from manga_details.io import LibraryStore
from manga_details.services import DetailAggregator, ItemNotFoundError, MangaDexGateway

__all__ = [
    "DetailAggregator",
    "DetailView",
    "FeedEntry",
    "ItemNotFoundError",
    "ItemRecord",
    "LibraryEntry",
    "LibraryStore",
    "MangaDexGateway",
]
