"""
Data sources for Release Viewer
"""

from .release_source import fetch_release_payload, load_releases

__all__ = [
    'fetch_release_payload',
    'load_releases'
]
