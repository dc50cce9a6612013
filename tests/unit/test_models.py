"""
Unit tests for the release record model
"""
import dataclasses

import pytest
from release_viewer.models import Release, ReleaseLink, releases_from_payload


class TestReleaseFromDict:
    """Test conversion of decoded JSON objects into Release records"""

    def test_full_record(self):
        """Test every field is carried over"""
        release = Release.from_dict({
            "version": "v1.2.0",
            "build": 12,
            "date": "2024-03-01",
            "channel": "stable",
            "changes": ["One", "Two"],
            "links": [{"label": "Notes", "url": "https://example.com/notes"}],
            "tags": ["lts"],
        })

        assert release.version == "v1.2.0"
        assert release.build == 12
        assert release.date == "2024-03-01"
        assert release.channel == "stable"
        assert release.changes == ("One", "Two")
        assert release.links == (ReleaseLink("Notes", "https://example.com/notes"),)
        assert release.tags == ("lts",)

    def test_missing_and_null_are_both_absent(self):
        """Test null values and missing keys map to None"""
        from_null = Release.from_dict({"version": "1.0.0", "build": None, "date": None, "channel": None})
        from_missing = Release.from_dict({"version": "1.0.0"})

        assert from_null == from_missing
        assert from_missing.build is None
        assert from_missing.date is None
        assert from_missing.changes == ()

    def test_malformed_fields_degrade(self):
        """Test wrong types are coerced or dropped instead of raising"""
        release = Release.from_dict({
            "version": 2,
            "build": {"nested": True},
            "changes": "not a list",
            "links": ["bad", {"label": "No url"}, {"url": "https://example.com/x"}],
            "tags": [None, "ok"],
        })

        assert release.version == "2"
        assert isinstance(release.build, str)
        assert release.changes == ()
        assert release.links == (ReleaseLink("https://example.com/x", "https://example.com/x"),)
        assert release.tags == ("ok",)

    def test_numeric_date_kept_as_number(self):
        """Test epoch millisecond dates are not turned into text"""
        release = Release.from_dict({"version": "1.0.0", "date": 1700000000000})
        assert release.date == 1700000000000

    def test_huge_build_kept(self):
        """Test oversized integers load without error"""
        release = Release.from_dict({"version": "1.0.0", "build": int("9" * 400)})
        assert release.build == int("9" * 400)

    def test_records_are_immutable(self):
        """Test Release instances can't be modified"""
        release = Release(version="1.0.0")
        with pytest.raises(dataclasses.FrozenInstanceError):
            release.version = "2.0.0"


class TestReleasesFromPayload:
    """Test extraction of the release list from a document"""

    def test_top_level_list(self):
        """Test a bare array of records"""
        releases = releases_from_payload([{"version": "1.0.0"}, {"version": "1.1.0"}])
        assert [r.version for r in releases] == ["1.0.0", "1.1.0"]

    def test_releases_field(self, sample_payload):
        """Test an object with a releases array"""
        releases = releases_from_payload(sample_payload)
        assert [r.version for r in releases] == ["v1.1.0", "v1.2.0", "v1.0.0"]

    @pytest.mark.parametrize("payload", [None, "text", 42, {}, {"releases": "nope"}, {"items": []}])
    def test_other_shapes_are_empty(self, payload):
        """Test unexpected shapes yield an empty dataset"""
        assert releases_from_payload(payload) == []

    def test_non_object_entries_skipped(self):
        """Test scalars inside the list are ignored"""
        releases = releases_from_payload([{"version": "1.0.0"}, "junk", 5, None])
        assert len(releases) == 1
