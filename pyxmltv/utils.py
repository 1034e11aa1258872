"""
pyxmltv.utils - Time utilities and small helpers

Provides XMLTV timestamp conversion and the number formatting shared by the
mappers.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Dict, Union

Number = Union[int, float]


class TimeUtils:
    """XMLTV timestamp <-> UTC datetime conversion"""

    TIMEZONE_PATTERN = re.compile(r"([+-])(\d{2}):?(\d{2})$")
    NON_DIGITS = re.compile(r"\D+")
    WHITESPACE = re.compile(r"\s+")

    @staticmethod
    def xmltv_to_datetime(timestamp: str) -> datetime:
        """
        Convert an XMLTV timestamp to a timezone-aware UTC datetime

        Accepts "YYYYMMDDhhmmss +hhmm", a trailing "Z", ISO-like spellings
        ("2022-01-01T00:00:00.000-0400") and the truncated date forms
        YYYYMMDD, YYYYMM and YYYY. Missing parts default to the start of the
        period. A timestamp without an offset is taken as UTC.

        Raises:
            ValueError: the text holds no usable date
        """
        cleaned = TimeUtils.WHITESPACE.sub("", str(timestamp))
        digits = TimeUtils.NON_DIGITS.sub("", cleaned)

        if len(digits) in (4, 6, 8):
            year = int(digits[0:4])
            month = int(digits[4:6] or 1) or 1
            day = int(digits[6:8] or 1) or 1
            return datetime(year, month, day, tzinfo=timezone.utc)

        offset = timedelta(0)
        main_part = cleaned
        if cleaned[-1:] in ("Z", "z"):
            main_part = cleaned[:-1]
        else:
            match = TimeUtils.TIMEZONE_PATTERN.search(cleaned)
            # A bare 14 digit timestamp ends in digits, never in a sign
            if match and len(TimeUtils.NON_DIGITS.sub("", cleaned[: match.start()])) >= 8:
                sign, hours, minutes = match.groups()
                offset = timedelta(hours=int(hours), minutes=int(minutes))
                if sign == "-":
                    offset = -offset
                main_part = cleaned[: match.start()]

        digits = TimeUtils.NON_DIGITS.sub("", main_part)
        if len(digits) < 4:
            raise ValueError(f"Invalid XMLTV timestamp: {timestamp!r}")

        year = int(digits[0:4])
        month = int(digits[4:6] or 1) or 1
        day = int(digits[6:8] or 1) or 1
        hours = int(digits[8:10] or 0)
        minutes = int(digits[10:12] or 0)
        seconds = int(digits[12:14] or 0)

        local = datetime(year, month, day, hours, minutes, seconds, tzinfo=timezone.utc)
        try:
            return local - offset
        except OverflowError:
            raise ValueError(f"XMLTV timestamp out of range: {timestamp!r}") from None

    @staticmethod
    def datetime_to_xmltv(value: datetime) -> str:
        """Convert a datetime to "YYYYMMDDhhmmss +0000" (naive values are taken as UTC)"""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        return "%04d%02d%02d%02d%02d%02d +0000" % (
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
        )


def to_number(value) -> Union[Number, str]:
    """Convert an attribute string to int/float, keeping the raw value when it isn't numeric"""
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return value


def format_number(value: Number) -> str:
    """Render a number as XMLTV text, dropping the fraction of integral floats"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def reverse_map(mapping: Dict[str, str]) -> Dict[str, str]:
    """Swap keys and values (later keys win on duplicate values)"""
    return {value: key for key, value in mapping.items()}
