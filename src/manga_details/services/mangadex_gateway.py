"""MangaDex Gateway - Implements the item gateway over the MangaDex REST API."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from manga_details.core import CoverAsset, FeedEntry, ItemRecord, Relationship, Tag
from manga_details.core.display_fields import UNKNOWN_AUTHOR
from manga_details.services.item_gateway import CoverLookup, ItemGateway, ItemLookup

logger = logging.getLogger(__name__)

FEED_PARAMS = {
    "limit": 500,
    "translatedLanguage[]": "en",
    "order[chapter]": "desc",
    "includeEmptyPages": 0,
}


class MangaDexGateway(ItemGateway):
    """
    Item gateway backed by httpx against api.mangadex.org.

    Every response body is expected as {"data": ...}. Transport errors,
    non-2xx statuses and unexpected payload shapes are all treated as
    failures of the individual lookup. No retries.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize the gateway.

        Args:
            base_url: API root, e.g. "https://api.mangadex.org".
            timeout: Request timeout in seconds for an owned client.
            client: Pre-configured client (tests inject one with a MockTransport).
                    The gateway does not close injected clients.
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def close(self) -> None:
        """Close the HTTP client if this gateway created it."""
        if self._owns_client:
            self._client.close()

    def fetch_item(self, item_id: str) -> ItemLookup:
        try:
            data = self._get_data(f"/manga/{item_id}")
            return ItemLookup(item=_parse_item(data))
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning("Failed to fetch manga %s: %s", item_id, e)
            return ItemLookup(error=str(e) or type(e).__name__)

    def fetch_cover(self, cover_id: str) -> CoverLookup:
        try:
            data = self._get_data(f"/cover/{cover_id}")
            file_name = data["attributes"]["fileName"]
            if not isinstance(file_name, str) or not file_name:
                return CoverLookup(error="No cover image available")
            return CoverLookup(cover=CoverAsset(file_name=file_name))
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning("Failed to fetch cover %s: %s", cover_id, e)
            return CoverLookup(error=str(e) or type(e).__name__)

    def fetch_creator_name(self, creator_id: str) -> str:
        try:
            data = self._get_data(f"/author/{creator_id}")
            name = data["attributes"]["name"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning("Failed to fetch author %s: %s", creator_id, e)
            return UNKNOWN_AUTHOR
        if not isinstance(name, str) or not name.strip():
            return UNKNOWN_AUTHOR
        return name.strip()

    def fetch_feed(self, item_id: str) -> List[FeedEntry]:
        try:
            data = self._get_data(f"/manga/{item_id}/feed", params=FEED_PARAMS)
            if not isinstance(data, list):
                raise TypeError(f"expected a list of chapters, got {type(data).__name__}")
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning("Failed to fetch chapters for %s: %s", item_id, e)
            return []

        entries = []
        for raw in data:
            entry = _parse_feed_entry(raw)
            if entry is None:
                logger.debug("Skipping chapter without id in feed of %s", item_id)
                continue
            entries.append(entry)
        return entries

    def _get_data(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a path and return the "data" member of the JSON body."""
        try:
            response = self._client.get(path, params=params)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid request path {path!r}: {e}") from e
        response.raise_for_status()
        body = response.json()
        if not isinstance(body, dict) or body.get("data") is None:
            raise KeyError("data")
        return body["data"]


def _as_dict(value: Any) -> Dict[str, str]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_localized(value: Any) -> Dict[str, str]:
    """Keep only the string variants of a {lang: text} map."""
    return {lang: text for lang, text in _as_dict(value).items() if isinstance(text, str)}


def _parse_item(data: Dict[str, Any]) -> ItemRecord:
    """Convert a MangaDex manga object to an ItemRecord."""
    item_id = data["id"]
    if not isinstance(item_id, str) or not item_id:
        raise ValueError("Manga payload has no id")
    attributes = _as_dict(data.get("attributes"))

    tags = []
    for raw_tag in _as_list(attributes.get("tags")):
        if not isinstance(raw_tag, dict):
            continue
        tag_attributes = _as_dict(raw_tag.get("attributes"))
        tags.append(Tag(id=str(raw_tag.get("id", "")), name=_as_localized(tag_attributes.get("name"))))

    relationships = tuple(
        Relationship(type=str(rel["type"]), id=str(rel["id"]))
        for rel in _as_list(data.get("relationships"))
        if isinstance(rel, dict) and rel.get("type") and rel.get("id")
    )

    year = attributes.get("year")
    status = attributes.get("status")
    return ItemRecord(
        id=item_id,
        title=_as_localized(attributes.get("title")),
        alt_titles=tuple(_as_localized(alt) for alt in _as_list(attributes.get("altTitles"))),
        description=_as_localized(attributes.get("description")),
        tags=tuple(tags),
        year=year if isinstance(year, int) else None,
        status=status if isinstance(status, str) else None,
        relationships=relationships,
    )


def _parse_feed_entry(raw: Any) -> Optional[FeedEntry]:
    if not isinstance(raw, dict) or not raw.get("id"):
        return None
    attributes = _as_dict(raw.get("attributes"))
    chapter = attributes.get("chapter")
    title = attributes.get("title")
    return FeedEntry(
        id=str(raw["id"]),
        chapter=str(chapter) if chapter is not None else None,
        title=title if isinstance(title, str) else None,
    )
