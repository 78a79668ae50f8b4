"""Detail Aggregator - composes one DetailView from the dependent remote lookups."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from manga_details.core import AUTHOR, COVER_ART, DetailView, FeedEntry, ItemRecord
from manga_details.core import display_fields
from manga_details.io import LibraryStore
from manga_details.services.feed_sorter import sort_feed
from manga_details.services.item_gateway import ItemGateway

logger = logging.getLogger(__name__)


class ItemNotFoundError(RuntimeError):
    """Raised when the base item record cannot be fetched."""

    def __init__(self, item_id: str, reason: Optional[str] = None):
        message = f"Manga not found: {item_id}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.item_id = item_id
        self.reason = reason


class DetailAggregator:
    """Loads everything the detail screen shows for one manga.

    The item record is fetched first. Cover, author and chapter lookups
    depend only on it and run concurrently; each of them degrades to its
    fallback on failure. Only a missing item record fails the load.
    """

    def __init__(
        self,
        gateway: ItemGateway,
        library_store: LibraryStore,
        uploads_base_url: str,
        max_workers: int = 3,
    ):
        if gateway is None:
            raise ValueError("ItemGateway must not be None")
        if library_store is None:
            raise ValueError("LibraryStore must not be None")
        self.gateway = gateway
        self.library_store = library_store
        self.uploads_base_url = uploads_base_url.rstrip("/")
        self.max_workers = max_workers

    def load_detail(self, item_id: str) -> DetailView:
        """
        Build the detail view of a manga.

        Args:
            item_id: Remote manga identifier.

        Returns:
            DetailView: A complete snapshot with sorted chapters.

        Raises:
            ItemNotFoundError: If the item record could not be fetched.
        """
        lookup = self.gateway.fetch_item(item_id)
        if lookup.is_error:
            raise ItemNotFoundError(item_id, lookup.error)
        item = lookup.item

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            cover_future = executor.submit(self._resolve_cover_url, item)
            author_future = executor.submit(self._resolve_author_name, item)
            feed_future = executor.submit(self.gateway.fetch_feed, item.id)
            cover_url = cover_future.result()
            author_name = author_future.result()
            chapters = sort_feed(feed_future.result())

        is_saved = self._is_saved(item.id)

        logger.info(
            "Loaded manga %s: %d chapters, cover=%s, saved=%s",
            item.id,
            len(chapters),
            "yes" if cover_url else "no",
            is_saved,
        )
        return self._compose(item, cover_url, author_name, chapters, is_saved)

    def _resolve_cover_url(self, item: ItemRecord) -> Optional[str]:
        relationship = item.first_relationship(COVER_ART)
        if relationship is None:
            logger.info("Cover art relationship not found for %s", item.id)
            return None
        lookup = self.gateway.fetch_cover(relationship.id)
        if lookup.is_error:
            return None
        return lookup.cover.url_for(self.uploads_base_url, item.id)

    def _resolve_author_name(self, item: ItemRecord) -> str:
        relationship = item.first_relationship(AUTHOR)
        if relationship is None:
            return display_fields.UNKNOWN_AUTHOR
        return display_fields.resolve_author(self.gateway.fetch_creator_name(relationship.id))

    def _is_saved(self, item_id: str) -> bool:
        try:
            return self.library_store.contains(item_id)
        except RuntimeError as e:
            logger.warning("Could not read library for %s: %s", item_id, e)
            return False

    @staticmethod
    def _compose(
        item: ItemRecord,
        cover_url: Optional[str],
        author_name: str,
        chapters: List[FeedEntry],
        is_saved: bool,
    ) -> DetailView:
        return DetailView(
            item_id=item.id,
            title=display_fields.resolve_title(item.title),
            alt_title=display_fields.resolve_alt_title(item.alt_titles),
            description=display_fields.resolve_description(item.description),
            genres=display_fields.resolve_genres(item.tags),
            year=display_fields.resolve_year(item.year),
            status=display_fields.resolve_status(item.status),
            cover_url=cover_url,
            author_name=author_name,
            chapters=tuple(chapters),
            is_saved=is_saved,
        )
