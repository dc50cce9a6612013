"""
Sort orders for release lists.

Each sort key maps to a comparator that combines a primary key with fixed
tie-breakers, so every pair of releases gets a defined order. Sorting is
stable: releases that tie on every key keep their original order.
"""

from enum import Enum
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Optional, Sequence
import logging

from release_viewer.models import Release
from release_viewer.utils.normalizers import compare_numbers, has_numeric_build, normalize_build, normalize_date
from release_viewer.utils.version_sorting import compare_versions, looks_like_semver

logger = logging.getLogger(__name__)

Comparator = Callable[[Release, Release], int]


class SortKey(str, Enum):
    """Named sort orders offered to the user"""

    BUILD_DESC = "build-desc"
    BUILD_ASC = "build-asc"
    SEMVER_DESC = "semver-desc"
    SEMVER_ASC = "semver-asc"
    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"

    @classmethod
    def parse(cls, name) -> Optional["SortKey"]:
        """Return the SortKey for a name, or None if the name is not a known key"""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None
        try:
            return cls(name)
        except ValueError:
            logger.debug(f"Ignoring unknown sort key '{name}'")
            return None


SORT_LABELS = {
    SortKey.BUILD_DESC: "Build (newest first)",
    SortKey.BUILD_ASC: "Build (oldest first)",
    SortKey.SEMVER_DESC: "Version (highest first)",
    SortKey.SEMVER_ASC: "Version (lowest first)",
    SortKey.DATE_DESC: "Date (newest first)",
    SortKey.DATE_ASC: "Date (oldest first)",
}


def _by_build(a: Release, b: Release) -> int:
    return compare_numbers(normalize_build(a.build), normalize_build(b.build))


def _by_date(a: Release, b: Release) -> int:
    return compare_numbers(normalize_date(a.date), normalize_date(b.date))


def _by_version(a: Release, b: Release) -> int:
    return compare_versions(a.version, b.version)


def _chain(*steps: Comparator) -> Comparator:
    """Combine comparators; later ones only break ties left by earlier ones"""
    def compare(a: Release, b: Release) -> int:
        for step in steps:
            result = step(a, b)
            if result:
                return result
        return 0
    return compare


def _descending(step: Comparator) -> Comparator:
    return lambda a, b: step(b, a)


COMPARATORS: Dict[SortKey, Comparator] = {
    SortKey.BUILD_DESC: _chain(_descending(_by_build), _descending(_by_date), _descending(_by_version)),
    SortKey.BUILD_ASC: _chain(_by_build, _by_date, _by_version),
    SortKey.SEMVER_DESC: _chain(_descending(_by_version), _descending(_by_date)),
    SortKey.SEMVER_ASC: _chain(_by_version, _by_date),
    SortKey.DATE_DESC: _chain(_descending(_by_date), _descending(_by_build)),
    SortKey.DATE_ASC: _chain(_by_date, _by_build),
}


def get_comparator(sort_key: SortKey) -> Comparator:
    """Look up the comparator for a sort key"""
    return COMPARATORS[SortKey(sort_key)]


def sort_releases(releases: Iterable[Release], sort_key: SortKey) -> List[Release]:
    """
    Return a new list of releases ordered by the given sort key.

    Args:
        releases: Releases to sort; the input is not modified
        sort_key: One of the SortKey members

    Returns:
        New sorted list (stable for releases that compare equal)
    """
    return sorted(releases, key=cmp_to_key(get_comparator(sort_key)))


def pick_default_sort(releases: Sequence[Release]) -> SortKey:
    """
    Choose a sensible sort order for a freshly loaded dataset.

    - Any numeric build present: newest build first
    - Otherwise, every version semver shaped: highest version first
    - Otherwise: newest date first

    An empty dataset counts as all-semver.
    """
    if any(has_numeric_build(release.build) for release in releases):
        return SortKey.BUILD_DESC
    if all(looks_like_semver(release.version) for release in releases):
        return SortKey.SEMVER_DESC
    return SortKey.DATE_DESC


def resolve_initial_sort(releases: Sequence[Release], requested=None) -> SortKey:
    """
    Pick the sort key for a dataset load.

    A valid requested key (from a --sort option or a ?sort= parameter) wins;
    otherwise the dataset decides via pick_default_sort().
    """
    sort_key = SortKey.parse(requested) if requested else None
    if sort_key is not None:
        return sort_key

    sort_key = pick_default_sort(releases)
    logger.info(f"Default sort for {len(releases)} releases: {sort_key.value}")
    return sort_key
