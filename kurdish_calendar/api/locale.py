"""Localized weekday, month and country names used next to Kurdish dates."""
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Iterable, Optional, Tuple, Union

from .converter import GregorianDate, coerce_gregorian, gregorian_to_jdn, weekday_index

__all__ = [
    "ENGLISH_DAYS",
    "ENGLISH_MONTHS",
    "SUPPORTED_LOCALES",
    "get_kurdish_country_name",
    "get_localized_day_name",
    "get_localized_month_name",
    "localized_weekday",
]

SUPPORTED_LOCALES = ("en", "ku", "ar", "fa")

# Sunday first, matching ``weekday_index``.
ENGLISH_DAYS: Tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

ENGLISH_MONTHS: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DAY_NAMES: Dict[str, Tuple[str, ...]] = {
    "ku": ("یەکشەممە", "دووشەممە", "سێشەممە", "چوارشەممە", "پێنجشەممە", "هەینی", "شەممە"),
    "ar": ("الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"),
    "fa": ("یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنج‌شنبه", "جمعه", "شنبه"),
}

_MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "ku": (
        "کانوونی دووەم", "شوبات", "ئازار", "نیسان", "مایس", "حوزەیران",
        "تەمووز", "ئاب", "ئەیلوول", "تشرینی یەکەم", "تشرینی دووەم", "کانوونی یەکەم",
    ),
    "ar": (
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ),
    "fa": (
        "ژانویه", "فوریه", "مارس", "آوریل", "مه", "ژوئن",
        "ژوئیه", "اوت", "سپتامبر", "اکتبر", "نوامبر", "دسامبر",
    ),
}

_KURDISH_COUNTRY_NAMES = {
    "Kurdistan": "کوردستان",
    "Iraq": "عێراق",
    "Iran": "ئێران",
    "Turkey": "تورکیا",
    "Syria": "سووریا",
}


def get_localized_day_name(english_day: str, locale: str) -> str:
    """Translate an English weekday name; unknown names and locales pass through."""

    names = _DAY_NAMES.get(locale)
    if names is None or english_day not in ENGLISH_DAYS:
        return english_day
    return names[ENGLISH_DAYS.index(english_day)]


def get_localized_month_name(month_index: int, locale: str, prefix: Optional[str] = None) -> str:
    """Return the Gregorian month name for a 0-based ``month_index``.

    Out-of-range indexes yield an empty string.
    """

    if not 0 <= month_index < 12:
        return ""
    names = _MONTH_NAMES.get(locale, ENGLISH_MONTHS)
    name = names[month_index]
    return f"{prefix} {name}" if prefix else name


def get_kurdish_country_name(english_country: str) -> str:
    return _KURDISH_COUNTRY_NAMES.get(english_country, english_country)


def localized_weekday(
    value: Union[str, date, datetime, GregorianDate, Iterable[int]], locale: str = "ku"
) -> str:
    index = weekday_index(gregorian_to_jdn(*coerce_gregorian(value)))
    return get_localized_day_name(ENGLISH_DAYS[index], locale)
