"""
Filter and sort pipeline for the release view.

``apply()`` is the stateless entry point. ``ReleaseSession`` owns the
dataset, the query and the sort key for a running viewer and swaps in a
new ``ViewState`` on every change, so the visible list always matches the
state it was derived from.
"""

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple
from urllib.parse import parse_qs
import logging
import threading

from release_viewer.models import Release, scalar_text
from release_viewer.sorting import SortKey, resolve_initial_sort, sort_releases

logger = logging.getLogger(__name__)


def normalize_query(text: Optional[str]) -> str:
    """Lower-case and trim a search query"""
    return (text or "").strip().lower()


def searchable_text(release: Release) -> str:
    """
    Build the lower-cased text a query is matched against.

    Joins version, date, channel, build, change entries and tags with
    spaces. Empty values (including a build or date of 0) are left out.
    """
    fields = [
        release.version,
        scalar_text(release.date) if release.date else "",
        release.channel,
        scalar_text(release.build) if release.build else "",
    ]
    fields.extend(release.changes)
    fields.extend(release.tags)
    return " ".join(field for field in fields if field).lower()


def matches_query(release: Release, query: str) -> bool:
    """Check whether a release matches an already normalized query"""
    if not query:
        return True
    return query in searchable_text(release)


def filter_releases(releases: Iterable[Release], query: Optional[str]) -> List[Release]:
    """Keep the releases matching a free-text query, preserving their order"""
    normalized = normalize_query(query)
    return [release for release in releases if matches_query(release, normalized)]


def apply(releases: Iterable[Release], query: Optional[str], sort_key: SortKey) -> List[Release]:
    """
    Filter releases by query, then order them by sort key.

    Args:
        releases: Full dataset
        query: Free-text query (case-insensitive, surrounding whitespace ignored)
        sort_key: Sort order to apply to the matching releases

    Returns:
        New list of matching releases in sorted order
    """
    return sort_releases(filter_releases(releases, query), sort_key)


def sort_from_query_string(query_string: Optional[str]) -> Optional[SortKey]:
    """
    Read a sort key from a URL query string such as "?sort=date-asc".

    Returns:
        SortKey, or None if the parameter is missing or not a known key
    """
    if not query_string:
        return None

    values = parse_qs(query_string.lstrip("?")).get("sort")
    if not values:
        return None
    return SortKey.parse(values[0])


@dataclass(frozen=True)
class ViewState:
    """Snapshot of a session: dataset, query, sort key and derived view"""

    releases: Tuple[Release, ...] = ()
    query: str = ""
    sort_key: SortKey = SortKey.BUILD_DESC
    matches: Tuple[Release, ...] = ()
    view: Tuple[Release, ...] = ()


class ReleaseSession:
    """
    Holds the working dataset and the current filtered, sorted view.

    Every operation computes a complete new ViewState and replaces the old
    one under a lock; readers always get a consistent snapshot. The state
    also keeps the matching releases in dataset order, so a sort change
    can skip filtering and still produce the same list as a full pass.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state = ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def sort_key(self) -> SortKey:
        return self._state.sort_key

    @property
    def query(self) -> str:
        return self._state.query

    def get_view(self) -> List[Release]:
        """Current filtered and sorted releases for rendering"""
        return list(self._state.view)

    def load_dataset(self, releases: Sequence[Release], requested_sort=None) -> ViewState:
        """
        Replace the dataset.

        The sort key is the requested one if valid, otherwise the default
        chosen for this dataset. The current query is kept.
        """
        data = tuple(releases)
        with self._lock:
            sort_key = resolve_initial_sort(data, requested_sort)
            query = self._state.query
            matches = tuple(filter_releases(data, query))
            self._state = ViewState(
                releases=data,
                query=query,
                sort_key=sort_key,
                matches=matches,
                view=tuple(sort_releases(matches, sort_key)),
            )
            logger.info(f"Loaded {len(data)} releases, sorted by {sort_key.value}")
            return self._state

    def select_sort(self, name) -> ViewState:
        """
        Change the sort order of the current view.

        Unknown names are ignored and the current state is returned
        unchanged.
        """
        sort_key = SortKey.parse(name)
        if sort_key is None:
            return self._state

        with self._lock:
            state = self._state
            self._state = replace(
                state,
                sort_key=sort_key,
                view=tuple(sort_releases(state.matches, sort_key)),
            )
            return self._state

    def set_query(self, text: Optional[str]) -> ViewState:
        """Change the search query and recompute the view from the full dataset"""
        query = normalize_query(text)
        with self._lock:
            state = self._state
            matches = tuple(filter_releases(state.releases, query))
            self._state = replace(
                state,
                query=query,
                matches=matches,
                view=tuple(sort_releases(matches, state.sort_key)),
            )
            return self._state
