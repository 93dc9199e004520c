import importlib
from datetime import date

import pytest

from kurdish_calendar.api.converter import InvalidJalaliYear
from kurdish_calendar.api.kurdish import (
    BASHUR_MONTHS,
    KURDISH_EPOCH_OFFSET,
    ROJHALAT_MONTHS,
    CalendarVariant,
    convert,
    get_kurdish_date,
    is_kurdish_leap_year,
    kurdish_month_length,
    normalize_variant,
    to_kurdish_bashur,
    to_kurdish_rojhalat,
    today,
)


@pytest.fixture
def preferences():
    module = importlib.import_module("kurdish_calendar.api.preferences")
    return importlib.reload(module)


def test_newroz_opens_kurdish_year():
    result = to_kurdish_rojhalat(date(2024, 3, 20))
    assert result.kurdish_year == 2724
    assert result.kurdish_month_index == 1
    assert result.kurdish_day == 1
    assert result.kurdish_month_latin == "Xakelêwe"
    assert result.kurdish_month == "خاکەلێوە"
    assert result.kurdish_date == "2724 خاکەلێوە 1"
    assert result.kurdish_date_latin == "2724 Xakelêwe 1"
    assert result.gregorian_date == "2024-03-20"
    assert result.variant is CalendarVariant.ROJHALAT


def test_day_after_newroz_stays_in_first_month():
    result = to_kurdish_rojhalat("2024-03-21")
    assert result.kurdish_year == 2724
    assert result.kurdish_month_latin == "Xakelêwe"
    assert result.kurdish_day == 2


def test_day_before_newroz_belongs_to_previous_year():
    result = to_kurdish_rojhalat((2024, 3, 19))
    assert result.kurdish_year == 2723
    assert result.kurdish_month_index == 12
    assert result.kurdish_month_latin == "Reşeme"
    assert result.kurdish_day == 29
    assert not is_kurdish_leap_year(2723)


def test_leap_reseme_has_thirtieth_day():
    result = to_kurdish_rojhalat("2025-03-20")
    assert (result.kurdish_year, result.kurdish_month_index, result.kurdish_day) == (2724, 12, 30)
    assert is_kurdish_leap_year(2724)


def test_bashur_tracks_gregorian_calendar():
    result = to_kurdish_bashur(date(2024, 3, 21))
    assert result.kurdish_year == 2024
    assert result.kurdish_day == 21
    assert result.kurdish_month_index == 2
    assert result.kurdish_month_latin == "Azar"
    assert result.kurdish_date == "21 ئازار 2024"
    assert result.kurdish_date_latin == "21 Azar 2024"
    assert result.variant is CalendarVariant.BASHUR


def test_bashur_does_not_need_jalali_year_range():
    result = to_kurdish_bashur((4000, 12, 25))
    assert result.kurdish_year == 4000
    assert result.kurdish_month_latin == "Kanûnî Yekem"


def test_convert_defaults_to_rojhalat():
    assert convert("2024-03-20").kurdish_year == 2724
    assert convert("2024-03-20", CalendarVariant.BASHUR).kurdish_year == 2024
    assert convert("2024-03-20", " Bashur ").kurdish_year == 2024


def test_unknown_variant_is_rejected():
    with pytest.raises(ValueError):
        convert("2024-03-20", "lunar")
    with pytest.raises(ValueError):
        normalize_variant(None)


def test_month_name_tables_have_twelve_entries():
    assert len(ROJHALAT_MONTHS) == 12
    assert len(BASHUR_MONTHS) == 12
    assert ROJHALAT_MONTHS[-1].latin == "Reşeme"
    assert BASHUR_MONTHS[0].latin == "Kanûnî Duwem"


def test_every_rojhalat_month_is_reached():
    seen = {to_kurdish_rojhalat((2024, month, 15)).kurdish_month_latin for month in range(1, 13)}
    assert seen == {name.latin for name in ROJHALAT_MONTHS}


@pytest.mark.parametrize(
    "year,month,variant,expected",
    [
        (2724, 1, CalendarVariant.ROJHALAT, 31),
        (2724, 6, CalendarVariant.ROJHALAT, 31),
        (2724, 7, CalendarVariant.ROJHALAT, 30),
        (2724, 12, CalendarVariant.ROJHALAT, 30),
        (2723, 12, CalendarVariant.ROJHALAT, 29),
        (2024, 1, CalendarVariant.BASHUR, 29),
        (2024, 0, CalendarVariant.BASHUR, 31),
        (2023, 1, "bashur", 28),
        (2024, 3, "bashur", 30),
    ],
)
def test_kurdish_month_length(year, month, variant, expected):
    assert kurdish_month_length(year, month, variant) == expected


def test_kurdish_leap_years_follow_jalali_years():
    for year in range(2600, 2800):
        expected = kurdish_month_length(year, 12) == 30
        assert is_kurdish_leap_year(year) is expected


def test_kurdish_years_outside_table_raise_invalid_year():
    with pytest.raises(InvalidJalaliYear):
        is_kurdish_leap_year(KURDISH_EPOCH_OFFSET + 3178)
    with pytest.raises(InvalidJalaliYear):
        kurdish_month_length(KURDISH_EPOCH_OFFSET - 62, 12)
    with pytest.raises(InvalidJalaliYear):
        to_kurdish_rojhalat((4000, 1, 1))


def test_to_dict_is_serialisable():
    payload = to_kurdish_rojhalat("2024-03-20").to_dict()
    assert payload == {
        "gregorian_date": "2024-03-20",
        "kurdish_year": 2724,
        "kurdish_month_index": 1,
        "kurdish_day": 1,
        "kurdish_date": "2724 خاکەلێوە 1",
        "kurdish_date_latin": "2724 Xakelêwe 1",
        "variant": "rojhalat",
        "kurdish_month": "خاکەلێوە",
        "kurdish_month_latin": "Xakelêwe",
    }


def test_today_uses_requested_variant():
    assert today().kurdish_year > 2700
    assert today(CalendarVariant.BASHUR).kurdish_year == date.today().year


def test_get_kurdish_date_follows_stored_preference(preferences):
    assert get_kurdish_date("2024-03-21")["variant"] == "rojhalat"
    preferences.set_system_variant("bashur")
    payload = get_kurdish_date("2024-03-21")
    assert payload["variant"] == "bashur"
    assert payload["kurdish_date_latin"] == "21 Azar 2024"


def test_get_kurdish_date_explicit_variant_wins(preferences):
    preferences.set_user_variant("bashur", user="demo@example.com")
    payload = get_kurdish_date("2024-03-20", variant="rojhalat", user="demo@example.com")
    assert payload["kurdish_year"] == 2724
