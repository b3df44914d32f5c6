"""Tests for identifier and date helpers."""

from datetime import date

import pytest

from exercise_tracker.utils.dates import (
    FixedClock,
    SystemClock,
    format_display_date,
    parse_date,
)
from exercise_tracker.utils.object_id import generate_object_id, is_object_id


class TestGenerateObjectId:
    """Tests for generate_object_id."""

    def test_shape(self):
        """Test ids are 24 lowercase hex characters."""
        object_id = generate_object_id()
        assert len(object_id) == 24
        assert is_object_id(object_id)

    def test_timestamp_prefix(self):
        """Test the first 8 characters encode the timestamp."""
        object_id = generate_object_id(now=1704067200.7)
        assert object_id[:8] == format(1704067200, "08x")

    def test_small_timestamp_is_padded(self):
        """Test timestamps below 8 hex digits still give 24 characters."""
        object_id = generate_object_id(now=5)
        assert object_id.startswith("00000005")
        assert len(object_id) == 24

    def test_distinct(self):
        """Test repeated calls do not collide in practice."""
        ids = {generate_object_id() for _ in range(500)}
        assert len(ids) == 500


class TestIsObjectId:
    """Tests for is_object_id."""

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "65A1B2C3D4E5F60718293A4B", "65a1b2c3d4e5f60718293a4", "g" * 24],
    )
    def test_rejects_malformed(self, value):
        assert not is_object_id(value)

    def test_accepts_valid(self):
        assert is_object_id("65a1b2c3d4e5f60718293a4b")


class TestFormatDisplayDate:
    """Tests for format_display_date."""

    def test_new_year(self):
        """Test the documented example."""
        assert format_display_date(date(2024, 1, 1)) == "Mon Jan 01 2024"

    def test_leap_day(self):
        assert format_display_date(date(2024, 2, 29)) == "Thu Feb 29 2024"

    def test_december(self):
        assert format_display_date(date(2023, 12, 31)) == "Sun Dec 31 2023"


class TestParseDate:
    """Tests for parse_date."""

    def test_iso_date(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)

    def test_surrounding_whitespace(self):
        assert parse_date(" 2024-01-15 ") == date(2024, 1, 15)

    def test_iso_datetime(self):
        """Test datetimes reduce to their calendar date."""
        assert parse_date("2024-01-15T10:30:00") == date(2024, 1, 15)
        assert parse_date("2024-01-15T10:30:00Z") == date(2024, 1, 15)

    @pytest.mark.parametrize("value", ["not a date", "2024-13-01", "2024-02-30", ""])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_date(value)


class TestClocks:
    """Tests for clock implementations."""

    def test_fixed_clock(self):
        assert FixedClock(date(2024, 3, 5)).today() == date(2024, 3, 5)

    def test_system_clock(self):
        assert SystemClock().today() == date.today()
