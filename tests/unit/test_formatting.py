"""
Unit tests for release list formatting and UI helpers
"""
from release_viewer.models import Release
from release_viewer.ui.formatting import (
    build_label,
    date_text,
    loaded_status_text,
    release_labels,
    status_text
)
from release_viewer.ui.helpers import scroll_units


class TestStatusText:
    """Test status line wording"""

    def test_singular_and_plural(self):
        """Test '1 release' vs 'N releases'"""
        assert status_text(0) == "0 releases"
        assert status_text(1) == "1 release"
        assert status_text(12) == "12 releases"

    def test_loaded(self):
        """Test the message shown after loading"""
        assert loaded_status_text(4) == "4 releases loaded"


class TestReleaseLabels:
    """Test channel and build labels"""

    def test_channel_then_build(self):
        """Test both labels in display order"""
        assert release_labels(Release(channel="beta", build=42)) == ["beta", "Build 42"]

    def test_build_zero_shown(self):
        """Test a build of 0 still gets a badge"""
        assert build_label(Release(build=0)) == "Build 0"

    def test_integral_float_build(self):
        """Test 7.0 is shown as 7"""
        assert build_label(Release(build=7.0)) == "Build 7"

    def test_date_text(self):
        """Test date column text for text, numeric and missing dates"""
        assert date_text(Release(date="2024-01-01")) == "2024-01-01"
        assert date_text(Release(date=1700000000000)) == "1700000000000"
        assert date_text(Release()) == ""

    def test_no_labels(self):
        """Test releases without channel or build have no labels"""
        assert release_labels(Release(version="1.0.0")) == []


class TestScrollUnits:
    """Test mousewheel delta conversion"""

    def test_windows(self):
        """Test Windows uses a smaller divisor"""
        assert scroll_units(120, platform="win32") == -24

    def test_macos(self):
        """Test other platforms scroll one unit per notch"""
        assert scroll_units(-120, platform="darwin") == 1
