"""Tests for document value types and native ingestion."""

from datetime import datetime, timedelta, timezone

import pytest

from docmirror.values import DocumentReference, GeoPoint, Timestamp, from_native


class TestTimestamp:
    """Tests for Timestamp construction."""

    def test_from_aware_datetime(self):
        """Test conversion of an aware datetime."""
        ts = Timestamp.from_datetime(datetime(2023, 11, 14, 22, 13, 20, 250000, tzinfo=timezone.utc))
        assert ts == Timestamp(seconds=1700000000, nanoseconds=250000000)

    def test_from_naive_datetime_assumes_utc(self):
        """Test that naive datetimes are treated as UTC."""
        assert Timestamp.from_datetime(datetime(1970, 1, 1, 0, 1)).seconds == 60

    def test_from_offset_datetime(self):
        """Test that non-UTC offsets are normalized."""
        tz = timezone(timedelta(hours=2))
        assert Timestamp.from_datetime(datetime(1970, 1, 1, 2, 0, tzinfo=tz)).seconds == 0

    def test_before_epoch(self):
        """Test that pre-epoch instants keep a positive fraction."""
        ts = Timestamp.from_datetime(datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=timezone.utc))
        assert ts == Timestamp(seconds=-1, nanoseconds=500000000)

    def test_nanosecond_attribute_preserved(self):
        """Test that datetimes carrying nanoseconds keep full precision."""

        class DatetimeWithNanoseconds(datetime):
            nanosecond = 123456789

        value = DatetimeWithNanoseconds(2020, 1, 1, tzinfo=timezone.utc)
        assert Timestamp.from_datetime(value).nanoseconds == 123456789

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2023-11-14T22:13:20Z", Timestamp(1700000000, 0)),
            ("2023-11-14T22:13:20.5Z", Timestamp(1700000000, 500000000)),
            ("2023-11-14T22:13:20.123456789Z", Timestamp(1700000000, 123456789)),
            ("2023-11-15T00:13:20+02:00", Timestamp(1700000000, 0)),
        ],
    )
    def test_from_rfc3339(self, text, expected):
        """Test RFC 3339 parsing with fractions and offsets."""
        assert Timestamp.from_rfc3339(text) == expected

    def test_from_rfc3339_invalid(self):
        """Test that malformed text raises ValueError."""
        with pytest.raises(ValueError):
            Timestamp.from_rfc3339("yesterday")

    def test_nanoseconds_range(self):
        """Test that out-of-range nanoseconds are rejected."""
        with pytest.raises(ValueError):
            Timestamp(seconds=0, nanoseconds=1_000_000_000)

    def test_to_datetime(self):
        """Test conversion back to datetime."""
        assert Timestamp(1700000000, 0).to_datetime() == datetime(
            2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc
        )


class TestGeoPoint:
    """Tests for GeoPoint."""

    def test_out_of_range_latitude(self):
        """Test that latitude beyond 90 degrees is rejected."""
        with pytest.raises(ValueError):
            GeoPoint(latitude=91.0, longitude=0.0)

    def test_out_of_range_longitude(self):
        """Test that longitude beyond 180 degrees is rejected."""
        with pytest.raises(ValueError):
            GeoPoint(latitude=0.0, longitude=-181.0)


class TestDocumentReference:
    """Tests for DocumentReference."""

    def test_from_resource_name(self):
        """Test that the database prefix is stripped."""
        ref = DocumentReference.from_resource_name(
            "projects/demo/databases/(default)/documents/users/alice"
        )
        assert ref.path == "users/alice"
        assert ref.id == "alice"

    def test_from_relative_path(self):
        """Test that relative paths are kept."""
        assert DocumentReference.from_resource_name("/users/bob/").path == "users/bob"


class TestFromNative:
    """Tests for from_native() ingestion."""

    def test_primitives_unchanged(self):
        """Test that primitives pass through."""
        assert from_native({"a": 1, "b": "x", "c": None, "d": 1.5, "e": False}) == {
            "a": 1, "b": "x", "c": None, "d": 1.5, "e": False,
        }

    def test_datetime_becomes_timestamp(self):
        """Test that datetimes are wrapped, including inside lists."""
        when = datetime(1970, 1, 1, 0, 0, 10, tzinfo=timezone.utc)
        assert from_native({"at": [when]}) == {"at": [Timestamp(seconds=10)]}

    def test_sdk_geopoint(self):
        """Test that objects with latitude/longitude become GeoPoints."""

        class SdkGeoPoint:
            latitude = 10
            longitude = 20

        assert from_native(SdkGeoPoint()) == GeoPoint(latitude=10.0, longitude=20.0)

    def test_sdk_reference(self):
        """Test that objects with path and id become DocumentReferences."""

        class SdkReference:
            id = "alice"
            path = "users/alice"

        assert from_native({"ref": SdkReference()}) == {"ref": DocumentReference("users/alice")}

    @pytest.mark.parametrize("latitude", [91, float("nan"), "north", None])
    def test_bad_point_left_raw(self, latitude):
        """Test that point-like objects with bad coordinates pass through unchanged."""

        class SdkGeoPoint:
            longitude = 0

        point = SdkGeoPoint()
        point.latitude = latitude

        assert from_native({"where": point})["where"] is point

    def test_wrappers_unchanged(self):
        """Test that docmirror wrappers pass through untouched."""
        point = GeoPoint(1.0, 2.0)
        assert from_native(point) is point

    def test_tuple_becomes_list(self):
        """Test that tuples are normalized to lists."""
        assert from_native((1, 2)) == [1, 2]
