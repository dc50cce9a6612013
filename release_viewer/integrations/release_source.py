"""
Release dataset loading.

Fetches a release document from an HTTP(S) URL or a local JSON file and
converts it to Release objects. Every failure is reported as a single
ReleaseLoadError so callers can show a "failed to load" state without
ever applying a partial dataset.
"""

from typing import Any, List
import json
import logging
import os

import requests

from release_viewer.exceptions import ReleaseLoadError
from release_viewer.models import Release, releases_from_payload

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10

NO_STORE_HEADERS = {
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
    "Accept": "application/json"
}


def is_remote_source(source: str) -> bool:
    """Check whether a source should be fetched over HTTP"""
    return str(source).lower().startswith(("http://", "https://"))


def _fetch_remote(url: str, timeout) -> Any:
    logger.info(f"Fetching releases from {url}")
    try:
        response = requests.get(url, headers=NO_STORE_HEADERS, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise ReleaseLoadError(url, f"request failed: {e}") from e

    if not response.ok:
        raise ReleaseLoadError(url, f"HTTP {response.status_code}")

    try:
        return response.json()
    except ValueError as e:
        raise ReleaseLoadError(url, f"invalid JSON: {e}") from e


def _read_local(path: str) -> Any:
    logger.info(f"Reading releases from {path}")
    if not os.path.exists(path):
        raise ReleaseLoadError(path, "file not found")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise ReleaseLoadError(path, f"could not read file: {e}") from e
    except ValueError as e:
        raise ReleaseLoadError(path, f"invalid JSON: {e}") from e


def fetch_release_payload(source: str, timeout=DEFAULT_TIMEOUT) -> Any:
    """
    Fetch and decode a release document.

    Args:
        source: http(s) URL or path to a local JSON file
        timeout: Request timeout in seconds for remote sources

    Returns:
        Decoded JSON value

    Raises:
        ReleaseLoadError: If the source can't be reached, read or decoded
    """
    if is_remote_source(source):
        return _fetch_remote(source, timeout)
    return _read_local(source)


def load_releases(source: str, timeout=DEFAULT_TIMEOUT) -> List[Release]:
    """
    Load the release dataset from a source.

    A document of unexpected shape yields an empty list rather than an
    error; only transport and decoding problems raise.

    Raises:
        ReleaseLoadError: If the source can't be reached, read or decoded
    """
    try:
        payload = fetch_release_payload(source, timeout=timeout)
    except ReleaseLoadError as e:
        logger.error(str(e))
        raise

    releases = releases_from_payload(payload)
    logger.info(f"Loaded {len(releases)} releases from {source}")
    return releases
