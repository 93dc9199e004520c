"""Gregorian ↔ Jalali conversion helpers built on Julian Day Numbers.

The Jalali leap years are derived from a table of break points between
33-year (or irregular) leap cycles, following the algorithm popularised by
``jalaali-js``. All divisions are floor divisions; intermediate values go
negative for early years and truncation would shift the results by a day.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Tuple, Union

__all__ = [
    "GregorianDate",
    "InvalidJalaliYear",
    "JALALI_MONTH_NAMES",
    "JalaliDate",
    "JalaliDateInfo",
    "LEAP_CYCLE_BREAKS",
    "LeapParameters",
    "coerce_gregorian",
    "coerce_jalali",
    "compute_leap_parameters",
    "describe_jalali",
    "gregorian_month_length",
    "gregorian_to_jalali",
    "gregorian_to_jdn",
    "is_gregorian_leap",
    "is_jalali_leap",
    "jalali_month_length",
    "jalali_to_gregorian",
    "jdn_to_gregorian",
    "weekday_index",
]

logger = logging.getLogger(__name__)

_GREGORIAN_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Jalali years starting a leap cycle.
LEAP_CYCLE_BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

JALALI_MONTH_NAMES: Tuple[str, ...] = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)


class InvalidJalaliYear(ValueError):
    """Raised when a Jalali year falls outside the leap-cycle break table."""

    def __init__(self, year: int) -> None:
        super().__init__(
            f"Invalid Jalali year: {year} "
            f"(supported range is {LEAP_CYCLE_BREAKS[0]}..{LEAP_CYCLE_BREAKS[-1] - 1})"
        )
        self.year = year


@dataclass(frozen=True)
class GregorianDate:
    """Proleptic Gregorian date; unlike :class:`datetime.date` it allows years below 1."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: Union[date, datetime]) -> "GregorianDate":
        return cls(value.year, value.month, value.day)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_jalali(self) -> "JalaliDate":
        return gregorian_to_jalali(self)


@dataclass(frozen=True)
class JalaliDate:
    """Immutable representation of a Jalali (Persian) calendar date."""

    year: int
    month: int
    day: int

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def to_gregorian(self) -> GregorianDate:
        return jalali_to_gregorian(self)


@dataclass(frozen=True)
class LeapParameters:
    """Leap flag of a Jalali year and the Gregorian date of its 1 Farvardin."""

    is_leap: bool
    gregorian_year: int
    march_day: int


@dataclass(frozen=True)
class JalaliDateInfo:
    year: int
    month: int
    day: int
    month_name: str
    formatted_date: str
    is_leap_year: bool


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_month_length(year: int, month_index: int) -> int:
    """Return the length of a Gregorian month given a 0-based month index.

    Indexes outside ``0..11`` roll over into the neighbouring years, so
    ``(2023, 12)`` is January 2024.
    """

    year += month_index // 12
    month_index %= 12
    if month_index == 1 and is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_LENGTHS[month_index]


def gregorian_to_jdn(gy: int, gm: int, gd: int) -> int:
    """Return the Julian Day Number of a proleptic Gregorian date.

    The triple is not validated; an impossible date such as February 30th
    yields the JDN of the day it would overflow to.
    """

    # Count from March so that the leap day is the last day of the year.
    a = (14 - gm) // 12
    y = gy + 4800 - a
    m = gm + 12 * a - 3
    return gd + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_gregorian(jdn: int) -> GregorianDate:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    gd = e - (153 * m + 2) // 5 + 1
    gm = m + 3 - 12 * (m // 10)
    gy = 100 * b + d - 4800 + m // 10
    return GregorianDate(gy, gm, gd)


def weekday_index(jdn: int) -> int:
    """Return the weekday of a JDN, ``0`` for Sunday through ``6`` for Saturday."""

    return (jdn + 1) % 7


def compute_leap_parameters(jy: int) -> LeapParameters:
    """Locate ``jy`` in the leap-cycle table and derive its calendar parameters.

    Returns whether ``jy`` is a leap year together with the Gregorian year and
    day of March on which its first day (1 Farvardin) falls.

    Raises :class:`InvalidJalaliYear` when ``jy`` is outside
    ``LEAP_CYCLE_BREAKS[0] <= jy < LEAP_CYCLE_BREAKS[-1]``.
    """

    if jy < LEAP_CYCLE_BREAKS[0] or jy >= LEAP_CYCLE_BREAKS[-1]:
        raise InvalidJalaliYear(jy)

    gy = jy + 621
    leap_j = -14
    jp = LEAP_CYCLE_BREAKS[0]
    jump = 0
    for jm in LEAP_CYCLE_BREAKS[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j += jump // 33 * 8 + (jump % 33) // 4
        jp = jm
    n = jy - jp

    # Leap years elapsed since AD 621 in the Jalali calendar ...
    leap_j += n // 33 * 8 + (n % 33 + 3) // 4
    if jump % 33 == 4 and jump - n == 4:
        leap_j += 1
    # ... and in the Gregorian calendar up to ``gy``.
    leap_g = gy // 4 - (gy // 100 + 1) * 3 // 4 - 150
    march = 20 + leap_j - leap_g

    # Years since the last leap year; the tail of a cycle counts from the next one.
    if jump - n < 6:
        n = n - jump + (jump + 4) // 33 * 33
    since_leap = ((n + 1) % 33 - 1) % 4
    return LeapParameters(is_leap=since_leap == 0, gregorian_year=gy, march_day=march)


def is_jalali_leap(year: int) -> bool:
    return compute_leap_parameters(year).is_leap


def jalali_month_length(year: int, month: int) -> int:
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_jalali_leap(year) else 29


def _split_date_string(value: str, calendar: str) -> Tuple[int, int, int]:
    text = value.strip().replace("/", "-")
    sign = 1
    if text.startswith("-"):
        sign, text = -1, text[1:]
    tokens = text.split("-")
    if len(tokens) != 3:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}")
    try:
        year, month, day = (int(part) for part in tokens)
    except ValueError as exc:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}") from exc
    return sign * year, month, day


def coerce_gregorian(
    value: Union[str, date, datetime, GregorianDate, Iterable[int]]
) -> Tuple[int, int, int]:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, (date, GregorianDate)):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_date_string(value, "Gregorian")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a date, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_jalali(value: Union[str, JalaliDate, Iterable[int]]) -> Tuple[int, int, int]:
    if isinstance(value, JalaliDate):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_date_string(value, "Jalali")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a JalaliDate, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def jalali_to_gregorian(value: Union[str, JalaliDate, Iterable[int]]) -> GregorianDate:
    jy, jm, jd = coerce_jalali(value)
    params = compute_leap_parameters(jy)
    jdn = (
        gregorian_to_jdn(params.gregorian_year, 3, params.march_day)
        + (jm - 1) * 31
        - jm // 7 * (jm - 7)
        + jd
        - 1
    )
    return jdn_to_gregorian(jdn)


def gregorian_to_jalali(
    value: Union[str, date, datetime, GregorianDate, Iterable[int]]
) -> JalaliDate:
    gy, gm, gd = coerce_gregorian(value)
    jdn = gregorian_to_jdn(gy, gm, gd)

    # Normalise first so that overflowing triples land in the right year.
    jy = jdn_to_gregorian(jdn).year - 621
    params = compute_leap_parameters(jy)
    days = jdn - gregorian_to_jdn(params.gregorian_year, 3, params.march_day)
    if days < 0:
        jy -= 1
        days += 366 if is_jalali_leap(jy) else 365

    if days <= 185:
        jm = 1 + days // 31
        jd = 1 + days % 31
    else:
        days -= 186
        jm = 7 + days // 30
        jd = 1 + days % 30

    logger.debug("Converted Gregorian %s-%s-%s to Jalali %s-%s-%s", gy, gm, gd, jy, jm, jd)
    return JalaliDate(jy, jm, jd)


def describe_jalali(
    value: Union[str, date, datetime, GregorianDate, Iterable[int]]
) -> JalaliDateInfo:
    """Convert a Gregorian date and attach the Persian month name and leap flag."""

    jalali = gregorian_to_jalali(value)
    return JalaliDateInfo(
        year=jalali.year,
        month=jalali.month,
        day=jalali.day,
        month_name=JALALI_MONTH_NAMES[jalali.month - 1],
        formatted_date=f"{jalali.year}/{jalali.month}/{jalali.day}",
        is_leap_year=is_jalali_leap(jalali.year),
    )
