"""Kurdish calendar dates in the Rojhalat and Bashur variants.

Rojhalat (Eastern Kurdistan) follows the Jalali calendar with a fixed year
offset and Kurdish month names. Bashur (Southern Kurdistan) is the Gregorian
calendar with Kurdish month names and never touches the Jalali arithmetic.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Union

from .converter import (
    GregorianDate,
    coerce_gregorian,
    gregorian_month_length,
    gregorian_to_jalali,
    is_jalali_leap,
    jalali_month_length,
)
from .frappe_compat import maybe_whitelist

__all__ = [
    "BASHUR_MONTHS",
    "CalendarVariant",
    "KURDISH_EPOCH_OFFSET",
    "KurdishDate",
    "MonthName",
    "ROJHALAT_MONTHS",
    "convert",
    "get_kurdish_date",
    "is_kurdish_leap_year",
    "kurdish_month_length",
    "normalize_variant",
    "to_kurdish_bashur",
    "to_kurdish_rojhalat",
    "today",
]

logger = logging.getLogger(__name__)

GregorianInput = Union[str, date, datetime, GregorianDate, Iterable[int]]

# Kurdish year = Jalali year + 1321, so Newroz 2024 opens year 2724.
KURDISH_EPOCH_OFFSET = 1321


class CalendarVariant(str, Enum):
    ROJHALAT = "rojhalat"
    BASHUR = "bashur"


@dataclass(frozen=True)
class MonthName:
    """A month name in Sorani (Arabic script) and Kurmanji-style Latin script."""

    sorani: str
    latin: str


ROJHALAT_MONTHS: Tuple[MonthName, ...] = (
    MonthName("خاکەلێوە", "Xakelêwe"),
    MonthName("گوڵان", "Gulan"),
    MonthName("جۆزەردان", "Cozerdan"),
    MonthName("پووشپەڕ", "Pûşper"),
    MonthName("گەلاوێژ", "Gelawêj"),
    MonthName("خەرمانان", "Xermanan"),
    MonthName("ڕەزبەر", "Rezber"),
    MonthName("گەڵاڕێزان", "Gelarêzan"),
    MonthName("سەرماوەز", "Sermawez"),
    MonthName("بەفرانبار", "Befranbar"),
    MonthName("ڕێبەندان", "Rêbendan"),
    MonthName("ڕەشەمە", "Reşeme"),
)

# Indexed from January.
BASHUR_MONTHS: Tuple[MonthName, ...] = (
    MonthName("کانوونی دووەم", "Kanûnî Duwem"),
    MonthName("شوبات", "Şubat"),
    MonthName("ئازار", "Azar"),
    MonthName("نیسان", "Nîsan"),
    MonthName("مایس", "Mayis"),
    MonthName("حوزەیران", "Huzeyran"),
    MonthName("تەمووز", "Temûz"),
    MonthName("ئاب", "Ab"),
    MonthName("ئەیلوول", "Eylûl"),
    MonthName("تشرینی یەکەم", "Teşrînî Yekem"),
    MonthName("تشرینی دووەم", "Teşrînî Duwem"),
    MonthName("کانوونی یەکەم", "Kanûnî Yekem"),
)


@dataclass(frozen=True)
class KurdishDate:
    """A Gregorian date rendered in one of the Kurdish calendar variants.

    ``kurdish_month_index`` uses the indexing of :func:`kurdish_month_length`
    for the same variant: 1-12 for Rojhalat, 0-11 for Bashur.
    """

    gregorian_date: str
    kurdish_year: int
    kurdish_month_index: int
    kurdish_day: int
    month_name: MonthName
    kurdish_date: str
    kurdish_date_latin: str
    variant: CalendarVariant

    @property
    def kurdish_month(self) -> str:
        return self.month_name.sorani

    @property
    def kurdish_month_latin(self) -> str:
        return self.month_name.latin

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload.pop("month_name")
        payload["variant"] = self.variant.value
        payload["kurdish_month"] = self.kurdish_month
        payload["kurdish_month_latin"] = self.kurdish_month_latin
        return payload


def normalize_variant(value: Union[str, CalendarVariant]) -> CalendarVariant:
    if isinstance(value, CalendarVariant):
        return value
    if isinstance(value, str):
        try:
            return CalendarVariant(value.strip().lower())
        except ValueError:
            pass
    raise ValueError(f"Unsupported Kurdish calendar variant: {value!r}")


def _gregorian_string(gy: int, gm: int, gd: int) -> str:
    return GregorianDate(gy, gm, gd).isoformat()


def to_kurdish_rojhalat(value: GregorianInput) -> KurdishDate:
    gy, gm, gd = coerce_gregorian(value)
    jalali = gregorian_to_jalali((gy, gm, gd))
    year = jalali.year + KURDISH_EPOCH_OFFSET
    name = ROJHALAT_MONTHS[jalali.month - 1]
    return KurdishDate(
        gregorian_date=_gregorian_string(gy, gm, gd),
        kurdish_year=year,
        kurdish_month_index=jalali.month,
        kurdish_day=jalali.day,
        month_name=name,
        kurdish_date=f"{year} {name.sorani} {jalali.day}",
        kurdish_date_latin=f"{year} {name.latin} {jalali.day}",
        variant=CalendarVariant.ROJHALAT,
    )


def to_kurdish_bashur(value: GregorianInput) -> KurdishDate:
    gy, gm, gd = coerce_gregorian(value)
    month_index = (gm - 1) % 12
    name = BASHUR_MONTHS[month_index]
    return KurdishDate(
        gregorian_date=_gregorian_string(gy, gm, gd),
        kurdish_year=gy,
        kurdish_month_index=month_index,
        kurdish_day=gd,
        month_name=name,
        kurdish_date=f"{gd} {name.sorani} {gy}",
        kurdish_date_latin=f"{gd} {name.latin} {gy}",
        variant=CalendarVariant.BASHUR,
    )


def convert(
    value: GregorianInput,
    variant: Union[str, CalendarVariant] = CalendarVariant.ROJHALAT,
) -> KurdishDate:
    variant = normalize_variant(variant)
    logger.debug("Converting %r to the %s variant", value, variant.value)
    if variant is CalendarVariant.BASHUR:
        return to_kurdish_bashur(value)
    return to_kurdish_rojhalat(value)


def today(variant: Union[str, CalendarVariant] = CalendarVariant.ROJHALAT) -> KurdishDate:
    """Return today's local date in the requested variant."""

    return convert(date.today(), variant)


def is_kurdish_leap_year(year: int) -> bool:
    """Return ``True`` if the Rojhalat Kurdish ``year`` has a 30-day Reşeme."""

    return is_jalali_leap(year - KURDISH_EPOCH_OFFSET)


def kurdish_month_length(
    year: int,
    month: int,
    variant: Union[str, CalendarVariant] = CalendarVariant.ROJHALAT,
) -> int:
    """Return the number of days in a Kurdish month.

    ``month`` is 1-based for Rojhalat (Xakelêwe is 1) and 0-based for Bashur
    (Kanûnî Duwem is 0), where ``year`` is the Gregorian year.
    """

    if normalize_variant(variant) is CalendarVariant.BASHUR:
        return gregorian_month_length(year, month)
    return jalali_month_length(year - KURDISH_EPOCH_OFFSET, month)


def get_kurdish_date(
    value: Optional[str] = None,
    variant: Optional[str] = None,
    user: Optional[str] = None,
) -> Dict[str, object]:
    """Convert ``value`` (default: today) using the user's preferred variant.

    An explicit ``variant`` wins over the stored preference.
    """

    from . import preferences

    selected = normalize_variant(variant) if variant else preferences.resolve_variant(user).value
    return convert(value if value is not None else date.today(), selected).to_dict()


get_kurdish_date = maybe_whitelist(get_kurdish_date)
