"""
Pytest configuration and fixtures for Release Viewer tests
"""
import pytest
import sys
from unittest.mock import Mock, patch
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from release_viewer.models import Release, ReleaseLink


@pytest.fixture
def make_release():
    """Factory for Release records with sensible defaults"""
    def _make(version="1.0.0", **kwargs):
        return Release(version=version, **kwargs)
    return _make


@pytest.fixture
def sample_releases():
    """Provide a small mixed dataset, in document order"""
    return [
        Release(
            version="v2.1.0",
            build=210,
            date="2024-05-02",
            channel="stable",
            changes=("Faster startup", "Fixed crash on resume"),
            links=(ReleaseLink("Download", "https://example.com/2.1.0"),),
        ),
        Release(
            version="v2.2.0-beta",
            build=220,
            date="2024-06-10",
            channel="beta",
            changes=("Beta fix for sync",),
            tags=("preview",),
        ),
        Release(
            version="v2.0.0",
            build=200,
            date="2024-03-15",
            channel="stable",
            changes=("New dashboard",),
        ),
        Release(
            version="v1.9.3",
            date="2024-01-20",
            changes=("Security patch",),
            tags=("cve-2024-0001",),
        ),
    ]


@pytest.fixture
def sample_payload():
    """Provide a decoded release document as served by a web server"""
    return {
        "releases": [
            {"version": "v1.1.0", "build": "11", "date": "2024-02-01", "changes": ["Bug fixes"]},
            {"version": "v1.2.0", "build": "12", "date": "2024-03-01", "channel": "stable",
             "links": [{"label": "Notes", "url": "https://example.com/notes/1.2.0"}]},
            {"version": "v1.0.0", "build": None, "date": None},
        ]
    }


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary config file path for testing"""
    return tmp_path / "release_viewer_config.json"


@pytest.fixture
def mock_requests():
    """Mock requests.get for release source testing"""
    with patch('requests.get') as mock_get:
        # Default successful response
        mock_response = Mock()
        mock_response.ok = True
        mock_response.status_code = 200
        mock_response.json.return_value = {"releases": []}

        mock_get.return_value = mock_response

        yield {"get": mock_get, "response": mock_response}
