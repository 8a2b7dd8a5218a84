"""Conversion between ``timedelta`` and its wire string.

The service speaks ISO-8601 durations (``PT1H30M``). Older clients of the
same API emit the .NET ``TimeSpan`` text form (``1.02:30:00``), so both are
accepted on input; output is always ISO-8601.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal
from typing import Any

from pydantic import TypeAdapter, ValidationError

from providerhub.core.exceptions import MalformedDocumentError

_TIMEDELTA = TypeAdapter(timedelta)

# [-][d.]hh:mm:ss[.fffffff]
_DOTNET_TIMESPAN = re.compile(
    r"^(?P<sign>-)?(?:(?P<days>\d+)\.)?(?P<hours>\d{1,2}):(?P<minutes>\d{2}):(?P<seconds>\d{2})(?:\.(?P<fraction>\d{1,7}))?$"
)


def format_duration(value: timedelta) -> str:
    """Render ``value`` as an ISO-8601 duration, e.g. ``P1DT2H`` or ``PT0.5S``."""
    sign = "-" if value < timedelta(0) else ""
    value = abs(value)

    days = value.days
    minutes, seconds = divmod(value.seconds, 60)
    hours, minutes = divmod(minutes, 60)

    out = f"{sign}P"
    if days:
        out += f"{days}D"

    time_part = ""
    if hours:
        time_part += f"{hours}H"
    if minutes:
        time_part += f"{minutes}M"
    if seconds or value.microseconds:
        secs = Decimal(seconds) + Decimal(value.microseconds) / Decimal(1_000_000)
        time_part += f"{secs.normalize():f}S"

    if time_part:
        out += "T" + time_part
    elif not days:
        out += "T0S"
    return out


def _parse_dotnet(match: "re.Match[str]", *, key: str) -> timedelta:
    hours, minutes, seconds = (int(match.group(g)) for g in ("hours", "minutes", "seconds"))
    if hours > 23 or minutes > 59 or seconds > 59:
        raise MalformedDocumentError("not a valid duration", key=key, value=match.string)

    fraction = match.group("fraction") or "0"
    # TimeSpan ticks are 100ns; timedelta keeps microseconds
    microseconds = int(fraction.ljust(7, "0")[:6])
    parsed = timedelta(
        days=int(match.group("days") or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=microseconds,
    )
    return -parsed if match.group("sign") else parsed


def parse_duration(value: Any, *, key: str = "timeout") -> timedelta:
    """Parse a wire duration string.

    Raises:
        MalformedDocumentError: if ``value`` is not a string or is not a
            recognised duration.
    """
    if not isinstance(value, str):
        raise MalformedDocumentError("expected a duration string", key=key, value=value)

    match = _DOTNET_TIMESPAN.match(value)
    if match:
        return _parse_dotnet(match, key=key)

    try:
        return _TIMEDELTA.validate_python(value)
    except ValidationError as exc:
        raise MalformedDocumentError("not a valid duration", key=key, value=value) from exc
