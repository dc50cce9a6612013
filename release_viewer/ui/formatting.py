"""
Text formatting for the release list.

Pure functions shared by the window and the tests; nothing here touches
widgets.
"""

from typing import List

from release_viewer.models import Release, scalar_text

LOADING_MESSAGE = "Loading…"
EMPTY_VIEW_MESSAGE = "No matching releases."
LOAD_FAILED_MESSAGE = "Failed to load releases. Ensure versions.json is present and valid JSON."
LOAD_FAILED_ROW_MESSAGE = "Couldn't load data."


def status_text(count: int) -> str:
    """Status line for a filtered view, e.g. '1 release' or '12 releases'"""
    return f"{count} release{'' if count == 1 else 's'}"


def loaded_status_text(count: int) -> str:
    """Status line shown right after a dataset load"""
    return f"{count} releases loaded"


def build_label(release: Release) -> str:
    """Badge text for the build number, empty when the release has none"""
    if release.build is None:
        return ""
    return f"Build {scalar_text(release.build)}"


def date_text(release: Release) -> str:
    """Date column text, empty when the release has no date"""
    return scalar_text(release.date)


def release_labels(release: Release) -> List[str]:
    """Labels shown next to the version: channel first, then build"""
    labels = []
    if release.channel:
        labels.append(release.channel)
    badge = build_label(release)
    if badge:
        labels.append(badge)
    return labels

