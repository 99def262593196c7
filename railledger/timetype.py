"""Minute-resolution timestamps counted from 06-01 00:00."""

from dataclasses import dataclass

MINUTES_PER_DAY = 1440
_MONTH_DAYS = (30, 31, 31)  # June, July, August
_FIRST_MONTH = 6


def _trunc_div(a, b):
    q = abs(a) // b
    return -q if a < 0 else q


def _trunc_mod(a, b):
    return a - _trunc_div(a, b) * b


def parse_int(text):
    """Read a run of decimal digits as an integer, digit by digit."""
    value = 0
    for ch in text:
        value = value * 10 + ord(ch) - ord("0")
    return value


@dataclass(frozen=True, order=True)
class TimeType:
    """A moment expressed as minutes since 06-01 00:00."""

    minute: int = 0

    @classmethod
    def from_string(cls, text):
        """Parse a ``MM-DD HH:MM`` string."""
        if len(text) < 9:
            raise ValueError(f"malformed time: {text!r}")
        month = parse_int(text[0:2])
        day = parse_int(text[3:5])
        hour = parse_int(text[6:8])
        minute = parse_int(text[9:11])
        total = sum(_MONTH_DAYS[: max(month - _FIRST_MONTH, 0)]) * MINUTES_PER_DAY
        total += (day - 1) * MINUTES_PER_DAY
        total += hour * 60 + minute
        return cls(total)

    def format(self):
        """Render as ``MM-DD HH:MM``."""
        in_day = _trunc_mod(self.minute, MINUTES_PER_DAY)
        minute = str(_trunc_mod(in_day, 60))
        hour = str(_trunc_div(in_day, 60))
        day = _trunc_div(self.minute, MINUTES_PER_DAY) + 1
        month = _FIRST_MONTH
        for length in _MONTH_DAYS:
            if day - length <= 0:
                break
            day -= length
            month += 1
        parts = [str(month), str(day), hour, minute]
        month_s, day_s, hour_s, minute_s = (p if len(p) != 1 else "0" + p for p in parts)
        return f"{month_s}-{day_s} {hour_s}:{minute_s}"

    def __str__(self):
        return self.format()

    def __add__(self, other):
        if isinstance(other, TimeType):
            return TimeType(self.minute + other.minute)
        if isinstance(other, int):
            return TimeType(self.minute + other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, int):
            return TimeType(self.minute + other)
        return NotImplemented

    def __sub__(self, other):
        """TimeType minus TimeType gives minutes; minus an int gives a TimeType."""
        if isinstance(other, TimeType):
            return self.minute - other.minute
        if isinstance(other, int):
            return TimeType(self.minute - other)
        return NotImplemented

    def __int__(self):
        return self.minute

    def date(self):
        """The start of this moment's day."""
        return TimeType(self.minute - _trunc_mod(self.minute, MINUTES_PER_DAY))

    def time_of_day(self):
        """The minutes elapsed since the start of this moment's day."""
        return TimeType(_trunc_mod(self.minute, MINUTES_PER_DAY))