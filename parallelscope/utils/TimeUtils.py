"""
Module: TimeUtils
Timestamp parsing and conversion helpers shared by the trace readers and
the timeline builder.
"""

import re
from datetime import datetime, timedelta
from typing import Optional, Union
from parallelscope.Constants import TIME_FORMAT

# .NET DateTime.MinValue, written by the logger for timestamps it never recorded
UNSET_TIMESTAMP = datetime.min

_ISO_PATTERN = re.compile(
    r'^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2})'
    r'(?:\.(?P<frac>\d+))?'
    r'(?P<tz>Z|[+-]\d{2}:?\d{2})?$'
)

_ONE_MICROSECOND = timedelta(microseconds=1)


def is_set(ts: Optional[datetime]) -> bool:
    """True unless the timestamp is missing or the unset sentinel."""
    return ts is not None and ts != UNSET_TIMESTAMP


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp as written by MSBuild loggers.

    Up to 7 fractional digits are accepted (truncated to microseconds). A UTC
    offset is dropped so the recorded wall time is kept. Empty input and the
    unset sentinel yield None.

    :param value: Timestamp text.
    :return: Naive datetime or None.
    :raises ValueError: If the text is not a timestamp.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    match = _ISO_PATTERN.match(text)
    if not match:
        raise ValueError(f"Invalid timestamp '{value}'")
    ts = datetime.strptime(match.group('base').replace(' ', 'T'), '%Y-%m-%dT%H:%M:%S')
    frac = match.group('frac')
    if frac:
        ts = ts.replace(microsecond=int(frac[:6].ljust(6, '0')))
    if ts == UNSET_TIMESTAMP:
        return None
    return ts


def to_microseconds(delta: timedelta) -> int:
    """Exact integer microseconds of a timedelta."""
    return delta // _ONE_MICROSECOND


def to_seconds(duration: Union[timedelta, float, int]) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


def format_time_of_day(ts: datetime) -> str:
    return ts.strftime(TIME_FORMAT)
