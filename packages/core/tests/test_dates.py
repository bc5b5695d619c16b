"""Tests for timestamp display formatting."""

from dataclasses import replace
from datetime import timedelta, timezone

from changelens_core.commit import parse_commit
from changelens_core.dates import format_last_updated, format_timestamp, parse_timestamp
from changelens_core.strings import LocaleStrings

PLUS_TWO = timezone(timedelta(hours=2))


def test_format_in_same_zone(context):
    assert format_timestamp("2013-06-09 19:47:40.000000000", context) == "June 09, 2013 at 07:47:40 PM"


def test_converts_to_local_zone(context):
    local = replace(context, local_timezone=PLUS_TWO)
    assert format_timestamp("2013-06-09 19:47:40.000000000", local) == "June 09, 2013 at 09:47:40 PM"


def test_conversion_can_cross_midnight(context):
    local = replace(context, local_timezone=PLUS_TWO)
    assert format_timestamp("2013-06-09 23:30:00.000000000", local) == "June 10, 2013 at 01:30:00 AM"


def test_server_zone_applied(context):
    server = replace(context, server_timezone=PLUS_TWO)
    assert format_timestamp("2013-06-09 19:47:40.000000000", server) == "June 09, 2013 at 05:47:40 PM"


def test_fractional_digits_ignored(context):
    assert format_timestamp("2013-06-09 19:47:40.987654321", context) == format_timestamp(
        "2013-06-09 19:47:40.000000000", context
    )


def test_timestamp_without_fraction(context):
    assert format_timestamp("2013-06-09 19:47:40", context) == "June 09, 2013 at 07:47:40 PM"


def test_unparseable_returned_unchanged(context):
    assert format_timestamp("yesterday", context) == "yesterday"
    assert format_timestamp("2013-13-45 19:47:40.000000000", context) == "2013-13-45 19:47:40.000000000"


def test_none_stays_none(context):
    assert format_timestamp(None, context) is None


def test_localized_joining_word(context):
    german = replace(context, strings=LocaleStrings(at="um"))
    assert format_timestamp("2013-06-09 19:47:40.000000000", german) == "June 09, 2013 um 07:47:40 PM"


def test_parse_timestamp_is_aware():
    moment = parse_timestamp("2013-06-09 19:47:40.000000000", PLUS_TWO)
    assert moment.utcoffset() == timedelta(hours=2)
    assert (moment.hour, moment.minute, moment.second) == (19, 47, 40)


def test_format_last_updated(document, context):
    record = parse_commit(document, context)
    assert format_last_updated(record, context) == "June 10, 2013 at 08:15:02 AM"
