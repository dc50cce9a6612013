"""
Helpers for loading release test data
"""
import json
from pathlib import Path

DATA_DIR = Path(__file__).parent / "data"


def data_path(name):
    """Absolute path of a file in tests/fixtures/data"""
    return DATA_DIR / name


def load_payload(name):
    """Decoded JSON of a data file"""
    with open(data_path(name), "r", encoding="utf-8") as f:
        return json.load(f)


def versions_of(releases):
    """Version strings of a release list, in order"""
    return [release.version for release in releases]


def builds_of(releases):
    """Build values of a release list, in order"""
    return [release.build for release in releases]
