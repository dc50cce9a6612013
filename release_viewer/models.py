"""
Release record model.

Records arrive as decoded JSON of unknown quality. They are converted once
into immutable ``Release`` objects where every optional scalar is either a
value or ``None``, so the sorting and filtering code only has a single
"absent" case to deal with.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)

BuildValue = Union[int, float, str]
DateValue = Union[int, float, str]


@dataclass(frozen=True)
class ReleaseLink:
    """A labelled link attached to a release (download, notes, ...)"""

    label: str
    url: str


@dataclass(frozen=True)
class Release:
    """
    A single release record.

    Attributes:
        version: Version text, loosely semver shaped ("v1.4.0-beta")
        build: Build identifier as supplied (number or text), None if absent
        date: Date text, or epoch milliseconds as a number, None if absent
        channel: Short channel label ("stable", "beta"), None if absent
        changes: Change log entries, in display order
        links: Links shown next to the release
        tags: Extra search terms, never displayed
    """

    version: str = ""
    build: Optional[BuildValue] = None
    date: Optional[DateValue] = None
    channel: Optional[str] = None
    changes: Tuple[str, ...] = field(default_factory=tuple)
    links: Tuple[ReleaseLink, ...] = field(default_factory=tuple)
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Release":
        """
        Build a Release from a decoded JSON object.

        Never raises on malformed fields: wrong types are coerced or dropped.

        Args:
            data: Mapping with any of the keys version, build, date,
                channel, changes, links, tags

        Returns:
            Release instance
        """
        version = data.get("version")
        return cls(
            version="" if version is None else str(version),
            build=_optional_scalar(data.get("build")),
            date=_optional_scalar(data.get("date")),
            channel=_optional_text(data.get("channel")),
            changes=_text_tuple(data.get("changes")),
            links=_link_tuple(data.get("links")),
            tags=_text_tuple(data.get("tags")),
        )


def _optional_text(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _optional_scalar(value) -> Optional[Union[int, float, str]]:
    """Keep numbers and text as supplied, stringify anything else"""
    if value is None:
        return None
    if isinstance(value, (int, float, str)):
        return value
    return str(value)


def _text_tuple(value) -> Tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(item) for item in value if item is not None)


def _link_tuple(value) -> Tuple[ReleaseLink, ...]:
    if not isinstance(value, list):
        return ()

    links = []
    for item in value:
        if not isinstance(item, Mapping) or not item.get("url"):
            continue
        url = str(item["url"])
        label = item.get("label")
        links.append(ReleaseLink(label=str(label) if label else url, url=url))
    return tuple(links)


def releases_from_payload(payload: Any) -> List[Release]:
    """
    Extract release records from a decoded JSON document.

    Accepts either a top-level list of records or an object with a
    ``releases`` list. Any other shape yields an empty list.

    Args:
        payload: Decoded JSON value

    Returns:
        List of Release objects in document order
    """
    if isinstance(payload, list):
        items: Iterable = payload
    elif isinstance(payload, Mapping) and isinstance(payload.get("releases"), list):
        items = payload["releases"]
    else:
        logger.warning(f"Unexpected release document shape ({type(payload).__name__}), using empty dataset")
        return []

    releases = []
    skipped = 0
    for item in items:
        if isinstance(item, Mapping):
            releases.append(Release.from_dict(item))
        else:
            skipped += 1

    if skipped:
        logger.info(f"Skipped {skipped} non-object entries in release document")

    return releases


def scalar_text(value) -> str:
    """Display text for a build or date value; integral floats lose the '.0'"""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
