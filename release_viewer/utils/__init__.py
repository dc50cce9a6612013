"""
Utility modules for Release Viewer
"""

from .normalizers import normalize_build, normalize_date, has_numeric_build
from .version_sorting import parse_version, compare_versions, looks_like_semver

__all__ = [
    'normalize_build',
    'normalize_date',
    'has_numeric_build',
    'parse_version',
    'compare_versions',
    'looks_like_semver'
]
