"""
Command line options for Release Viewer
"""

import argparse

from release_viewer.config import DEFAULT_CONFIG_FILE
from release_viewer.pipeline import sort_from_query_string
from release_viewer.sorting import SortKey


def build_parser():
    """Create the argument parser for the release-viewer command"""
    parser = argparse.ArgumentParser(
        prog="release-viewer",
        description="Browse, filter and sort software release records."
    )
    parser.add_argument(
        "--source",
        help="Path or http(s) URL of the releases JSON (overrides the configured source)"
    )
    parser.add_argument(
        "--sort",
        help="Initial sort order: one of " + ", ".join(key.value for key in SortKey)
        + ". A query string such as '?sort=date-asc' is accepted too."
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def requested_sort(value):
    """
    Turn a --sort value into a SortKey.

    Accepts a bare key ("date-asc") or a query string ("?sort=date-asc").
    Anything unrecognised gives None so the dataset default applies.
    """
    if not value:
        return None
    if "sort=" in value:
        return sort_from_query_string(value)
    return SortKey.parse(value)


def parse_args(argv=None):
    """Parse command line arguments"""
    return build_parser().parse_args(argv)
