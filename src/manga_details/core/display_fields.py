"""Display-field resolution with fixed fallback values.

Each resolver takes the raw ItemRecord data and returns the text shown on
the detail screen, substituting a fallback literal when the English
variant is unavailable.
"""

from typing import Dict, Iterable, Optional

from .manga_item import Tag

DISPLAY_LANG = "en"

NO_TITLE = "No title available"
NO_ALT_TITLE = "No alt title available"
NO_DESCRIPTION = "No description available"
NO_GENRES = "No genres available"
UNKNOWN_YEAR = "Unknown year"
UNKNOWN_STATUS = "Unknown status"
UNKNOWN_AUTHOR = "Unknown author"


def _localized(values: Optional[Dict[str, str]]) -> Optional[str]:
    if not isinstance(values, dict):
        return None
    text = values.get(DISPLAY_LANG)
    return text if isinstance(text, str) and text else None


def resolve_title(title: Optional[Dict[str, str]]) -> str:
    return _localized(title) or NO_TITLE


def resolve_alt_title(alt_titles: Iterable[Dict[str, str]]) -> str:
    """Return the first alternate title that has an English variant."""
    for alt in alt_titles or ():
        text = _localized(alt)
        if text:
            return text
    return NO_ALT_TITLE


def resolve_description(description: Optional[Dict[str, str]]) -> str:
    return _localized(description) or NO_DESCRIPTION


def resolve_genres(tags: Iterable[Tag]) -> str:
    """Join English tag names with ", ", dropping tags without one."""
    names = [name for name in (_localized(tag.name) for tag in tags or ()) if name]
    return ", ".join(names) or NO_GENRES


def resolve_year(year: Optional[int]) -> str:
    return str(year) if year else UNKNOWN_YEAR


def resolve_status(status: Optional[str]) -> str:
    return status or UNKNOWN_STATUS


def resolve_author(name: Optional[str]) -> str:
    return name.strip() if name and name.strip() else UNKNOWN_AUTHOR
