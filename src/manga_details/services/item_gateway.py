"""Item Gateway - boundary over the remote manga metadata service."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from manga_details.core import CoverAsset, FeedEntry, ItemRecord


@dataclass
class ItemLookup:
    """Result of an item metadata request."""

    item: Optional[ItemRecord] = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if the item could not be fetched."""
        return self.error is not None or self.item is None


@dataclass
class CoverLookup:
    """Result of a cover art request."""

    cover: Optional[CoverAsset] = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if no cover file could be resolved."""
        return self.error is not None or self.cover is None


class ItemGateway(ABC):
    """
    Abstract gateway to the remote manga service.

    Implementations (e.g., MangaDexGateway) handle the HTTP calls. No
    operation raises past this boundary: failures come back as lookup
    errors or as fallback values.
    """

    @abstractmethod
    def fetch_item(self, item_id: str) -> ItemLookup:
        """
        Fetch item metadata.

        Args:
            item_id: Remote manga identifier.

        Returns:
            ItemLookup with the record or an error message.
        """
        pass

    @abstractmethod
    def fetch_cover(self, cover_id: str) -> CoverLookup:
        """Fetch a cover art record by its identifier."""
        pass

    @abstractmethod
    def fetch_creator_name(self, creator_id: str) -> str:
        """
        Fetch an author's display name.

        Returns:
            The name, or "Unknown author" on any failure.
        """
        pass

    @abstractmethod
    def fetch_feed(self, item_id: str) -> List[FeedEntry]:
        """
        Fetch the chapter feed of an item.

        Returns:
            The chapters in remote order, or an empty list on failure.
        """
        pass
