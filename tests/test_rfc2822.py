"""RFC 2822 parser tests."""

from datetime import timedelta, timezone

import pytest

from datetasks import parse_rfc2822, parse_rfc2822_strict
from datetasks._errors import (
    InvalidDateFieldError,
    InvalidDateStringError,
    UnknownTimeZoneError,
)


class TestDocumentedExamples:
    def test_gmt(self):
        assert parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT") == 1453816082000

    def test_loose_month_first(self, ms):
        assert parse_rfc2822("December 17, 1995 03:24:00") == ms(1995, 12, 17, 3, 24, 0)

    def test_named_zone_with_offset(self, ms):
        result = parse_rfc2822("Sun, 17 May 1998 03:00:00 GMT+01")
        assert result == ms(1998, 5, 17, 3, 0, 0, offset_hours=1)


class TestZones:
    def test_numeric_offset(self):
        assert parse_rfc2822("Thu, 01 Jan 1970 00:00:00 -0500") == 5 * 3600 * 1000

    def test_numeric_offset_with_minutes(self, ms):
        result = parse_rfc2822("Mon, 18 Jan 2016 10:00:00 +0530")
        assert result == ms(2016, 1, 18, 10, 0, 0, offset_hours=5.5)

    def test_comment_is_ignored(self):
        assert parse_rfc2822("Thu, 01 Jan 1970 00:00:00 -0500 (EST)") == 5 * 3600 * 1000

    def test_us_zone_names(self):
        assert parse_rfc2822("Tue, 26 Jan 2016 08:48:02 EST") == 1453816082000
        assert parse_rfc2822("Tue, 26 Jan 2016 05:48:02 PST") == 1453816082000

    @pytest.mark.parametrize("zone", ["UT", "UTC", "GMT", "Z", "+0000"])
    def test_utc_spellings(self, zone):
        assert parse_rfc2822(f"Tue, 26 Jan 2016 13:48:02 {zone}") == 1453816082000

    def test_missing_zone_defaults_to_utc(self):
        assert parse_rfc2822("Tue, 26 Jan 2016 13:48:02") == 1453816082000

    def test_missing_zone_uses_default_tz(self, ms):
        tz = timezone(timedelta(hours=2))
        result = parse_rfc2822("December 17, 1995 03:24:00", default_tz=tz)
        assert result == ms(1995, 12, 17, 3, 24, 0, offset_hours=2)

    def test_explicit_zone_overrides_default_tz(self):
        tz = timezone(timedelta(hours=2))
        assert parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT", default_tz=tz) == 1453816082000


class TestLenientSyntax:
    def test_case_insensitive(self):
        assert parse_rfc2822("tue, 26 JAN 2016 13:48:02 gmt") == 1453816082000

    def test_day_name_without_comma(self):
        assert parse_rfc2822("Tue 26 Jan 2016 13:48:02 GMT") == 1453816082000

    def test_full_names(self):
        assert parse_rfc2822("Tuesday, 26 January 2016 13:48:02 GMT") == 1453816082000

    def test_day_name_not_checked_against_date(self):
        assert parse_rfc2822("Fri, 26 Jan 2016 13:48:02 GMT") == 1453816082000

    def test_no_seconds(self, ms):
        assert parse_rfc2822("26 Jan 2016 13:48 GMT") == ms(2016, 1, 26, 13, 48)

    def test_date_only(self, ms):
        assert parse_rfc2822("26 Jan 2016") == ms(2016, 1, 26)

    def test_loose_without_comma(self, ms):
        assert parse_rfc2822("December 17 1995 03:24:00") == ms(1995, 12, 17, 3, 24, 0)

    def test_surrounding_whitespace(self):
        assert parse_rfc2822("  Tue, 26 Jan 2016 13:48:02 GMT\n") == 1453816082000


class TestObsoleteYears:
    @pytest.mark.parametrize(
        "text, year",
        [
            ("01 Jan 49 00:00 GMT", 2049),
            ("01 Jan 50 00:00 GMT", 1950),
            ("01 Jan 99 00:00 GMT", 1999),
            ("01 Jan 116 00:00 GMT", 2016),
        ],
    )
    def test_short_years(self, ms, text, year):
        assert parse_rfc2822(text) == ms(year, 1, 1)


class TestInvalidInput:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not a date",
            "Tue, 30 Feb 2016 00:00:00 GMT",
            "Tue, 26 Jan 2016 25:00:00 GMT",
            "Tue, 26 Jan 2016 13:60:00 GMT",
            "Tue, 26 Jan 2016 13:48:60 GMT",
            "Tue, 26 Foo 2016 13:48:02 GMT",
            "Tue, 26 Ja 2016 13:48:02 GMT",
            "Tue, 26 Jan 2016 13:48:02 XYZ",
            "Tue, 26 Jan 2016 13:48:02 +01000",
            "Tue, 26 Jan 2016 13:48:02 +0160",
            "Blah, 26 Jan 2016 13:48:02 GMT",
            "2016-01-19T16:07:37Z",
        ],
    )
    def test_returns_none(self, text):
        assert parse_rfc2822(text) is None

    def test_non_string_returns_none(self):
        assert parse_rfc2822(None) is None


class TestStrict:
    def test_valid(self):
        assert parse_rfc2822_strict("Tue, 26 Jan 2016 13:48:02 GMT") == 1453816082000

    def test_syntax_error(self):
        with pytest.raises(InvalidDateStringError) as exc_info:
            parse_rfc2822_strict("not a date")
        assert str(exc_info.value) == "invalid date string"
        assert "not a date" in exc_info.value.internal()

    def test_out_of_range_field(self):
        with pytest.raises(InvalidDateFieldError):
            parse_rfc2822_strict("Tue, 30 Feb 2016 00:00:00 GMT")

    def test_unknown_zone(self):
        with pytest.raises(UnknownTimeZoneError):
            parse_rfc2822_strict("Tue, 26 Jan 2016 13:48:02 XYZ")

    def test_parser_object(self, rfc2822_parser, ms):
        dt = rfc2822_parser.to_datetime("Sun, 17 May 1998 03:00:00 GMT+01")
        assert dt.utcoffset() == timedelta(hours=1)
        assert rfc2822_parser.parse_strict("Sun, 17 May 1998 03:00:00 GMT+01") == ms(
            1998, 5, 17, 2, 0, 0
        )
