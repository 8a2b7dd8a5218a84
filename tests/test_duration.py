from datetime import timedelta

import pytest

from providerhub.core.exceptions import MalformedDocumentError
from providerhub.models.duration import format_duration, parse_duration


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(0), "PT0S"),
        (timedelta(seconds=45), "PT45S"),
        (timedelta(hours=1, minutes=30), "PT1H30M"),
        (timedelta(days=1, hours=2), "P1DT2H"),
        (timedelta(days=3), "P3D"),
        (timedelta(seconds=0.5), "PT0.5S"),
        (timedelta(seconds=10), "PT10S"),
        (timedelta(seconds=-90), "-PT1M30S"),
    ],
)
def test_format_duration(value, expected):
    assert format_duration(value) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("PT1H", timedelta(hours=1)),
        ("P1DT2H30M", timedelta(days=1, hours=2, minutes=30)),
        ("PT0.5S", timedelta(seconds=0.5)),
    ],
)
def test_parse_iso_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("00:00:30", timedelta(seconds=30)),
        ("1.02:30:00", timedelta(days=1, hours=2, minutes=30)),
        ("00:00:30.5", timedelta(seconds=30.5)),
        ("00:00:00.1234567", timedelta(microseconds=123456)),
        ("-00:01:00", timedelta(minutes=-1)),
    ],
)
def test_parse_timespan_text(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "value",
    ["not-a-duration", "", "1 fortnight", "99:99:99", "00:60:00", "00:00:60", "24:00:00", "1.24:00:00"],
)
def test_parse_rejects_unparseable_strings(value):
    with pytest.raises(MalformedDocumentError, match="not a valid duration"):
        parse_duration(value)


@pytest.mark.parametrize("value", [30, 1.5, ["PT1H"], {"hours": 1}])
def test_parse_rejects_non_strings(value):
    with pytest.raises(MalformedDocumentError, match="expected a duration string"):
        parse_duration(value)


def test_parse_error_carries_key():
    with pytest.raises(MalformedDocumentError) as exc:
        parse_duration("nope", key="retryAfter")

    assert exc.value.key == "retryAfter"
