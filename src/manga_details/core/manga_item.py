"""MangaItem entities - the item record and its linked remote resources."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

COVER_ART = "cover_art"
AUTHOR = "author"


@dataclass(frozen=True)
class Relationship:
    """A typed link from an item to another remote resource."""

    type: str
    id: str


@dataclass(frozen=True)
class Tag:
    """A genre tag with its localized names keyed by language code."""

    id: str
    name: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ItemRecord:
    """Metadata for a single manga as returned by the remote service.

    Localized fields map language codes to text (e.g. {"en": "Berserk"}).
    Immutable once fetched.
    """

    id: str
    title: Dict[str, str] = field(default_factory=dict)
    alt_titles: Tuple[Dict[str, str], ...] = ()
    description: Dict[str, str] = field(default_factory=dict)
    tags: Tuple[Tag, ...] = ()
    year: Optional[int] = None
    status: Optional[str] = None
    relationships: Tuple[Relationship, ...] = ()

    def first_relationship(self, rel_type: str) -> Optional[Relationship]:
        """Return the first relationship of the given type, or None."""
        for relationship in self.relationships:
            if relationship.type == rel_type:
                return relationship
        return None


@dataclass(frozen=True)
class CoverAsset:
    """Cover art file belonging to an item."""

    file_name: str

    def url_for(self, uploads_base_url: str, item_id: str) -> str:
        """Compose the display URL of this cover for the owning item."""
        return f"{uploads_base_url.rstrip('/')}/covers/{item_id}/{self.file_name}"
