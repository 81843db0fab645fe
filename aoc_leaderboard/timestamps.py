"""Timestamps as Advent of Code encodes them.

The leaderboard JSON carries points in time as epoch seconds, either quoted
(``"1609459200"``), bare (``1609459200``) or ``null`` when the event has not
happened yet (a member without any star has no ``last_star_ts``).
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import ClassVar

from .errors import ConversionError, DecodeError

__all__ = ('TIME_LAYOUT', 'JSONTime', 'to_normal_time')

TIME_LAYOUT = '%Y-%m-%dT%H:%M:%S%z'
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_DECIMAL = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True, order=True)
class JSONTime:
    """A point in time decoded from the leaderboard, or the unset zero value."""

    time: datetime = field(default=_ZERO_TIME)

    ZERO: ClassVar[JSONTime]

    @classmethod
    def parse(cls, raw: str | int | None) -> JSONTime:
        if raw is None:
            return cls.ZERO
        if isinstance(raw, bool):
            raise DecodeError(f'expected epoch seconds, got {raw!r}')
        if isinstance(raw, int):
            return cls.from_epoch(raw)
        if not isinstance(raw, str):
            raise DecodeError(f'expected epoch seconds, got {type(raw).__name__}')

        s = raw.strip().strip('"')
        if s == 'null':
            return cls.ZERO
        if not _DECIMAL.fullmatch(s):
            raise DecodeError(f'invalid timestamp {raw!r}')
        return cls.from_epoch(int(s))

    @classmethod
    def from_epoch(cls, seconds: int) -> JSONTime:
        try:
            return cls(EPOCH + timedelta(seconds=seconds))
        except OverflowError as e:
            raise DecodeError(f'timestamp {seconds} is out of range') from e

    @property
    def is_zero(self) -> bool:
        return self.time == _ZERO_TIME

    def __bool__(self) -> bool:
        return not self.is_zero

    @property
    def epoch(self) -> int:
        return int((self.time - EPOCH).total_seconds())

    def format(self) -> str:
        """Renders the value as ``YYYY-MM-DDTHH:MM:SS±HHMM``."""
        t = self.time
        offset = t.utcoffset() or timedelta()
        sign = '-' if offset < timedelta() else '+'
        minutes = abs(int(offset.total_seconds())) // 60
        return '%04d-%02d-%02dT%02d:%02d:%02d%s%02d%02d' % (
            t.year, t.month, t.day, t.hour, t.minute, t.second, sign, minutes // 60, minutes % 60
        )


JSONTime.ZERO = JSONTime()


def to_normal_time(jt: JSONTime) -> datetime:
    """Round-trips ``jt`` through its textual layout into a plain UTC datetime."""
    try:
        return datetime.strptime(jt.format(), TIME_LAYOUT).astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise ConversionError('could not convert JSON time') from e
