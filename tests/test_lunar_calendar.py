# tests/test_lunar_calendar.py

import pytest

from amlich import InvalidInputError, LunarCalendar, LunarDate


def test_from_solar():
    cal = LunarCalendar.from_solar(10, 2, 2024)
    assert str(cal) == "Solar: 10/2/2024, Lunar: 1/1/2024"
    assert cal.lunar_date.jd == cal.solar_date.jd == 2460351
    assert cal.year_can_chi == "Giáp Thìn"
    assert cal.month_can_chi == "Bính Dần"
    assert cal.day_can_chi == "Giáp Thìn"
    assert cal.day_of_week == "Thứ bảy"


def test_from_lunar_leap_month():
    cal = LunarCalendar.from_lunar(1, 6, 2025, leap=True)
    assert cal.format_solar() == "25/7/2025"
    assert cal.format_lunar() == "1/6/2025 (nhuận)"
    assert cal.lunar_date.leap
    assert cal.lunar_date.jd == cal.solar_date.jd
    assert cal.day_can_chi == "Ất Mùi"


def test_from_lunar_without_leap_month_reports_regular_month():
    cal = LunarCalendar.from_lunar(1, 2, 2024, leap=True)
    assert not cal.lunar_date.leap
    assert cal.format_solar() == "10/3/2024"


def test_today_is_valid():
    cal = LunarCalendar.today()
    assert cal.lunar_date.is_valid()
    assert cal.lunar_date.jd == cal.solar_date.jd


@pytest.mark.parametrize(
    "args, message",
    [
        ((1.5, 1, 2024), "Day, month, and year must be integers"),
        (("1", 1, 2024), "Day, month, and year must be integers"),
        ((0, 1, 2024), "Day must be between 1 and 31"),
        ((32, 1, 2024), "Day must be between 1 and 31"),
        ((1, 13, 2024), "Month must be between 1 and 12"),
        ((1, 1, 1199), "Year must be between 1200 and 2199"),
        ((1, 1, 2200), "Year must be between 1200 and 2199"),
        ((30, 2, 2024), "Invalid date: 30/2/2024. Month 2 has only 29 days."),
        ((29, 2, 2023), "Invalid date: 29/2/2023. Month 2 has only 28 days."),
        ((31, 4, 2024), "Invalid date: 31/4/2024. Month 4 has only 30 days."),
    ],
)
def test_from_solar_validation(args, message):
    with pytest.raises(InvalidInputError) as exc:
        LunarCalendar.from_solar(*args)
    assert str(exc.value) == message


def test_from_lunar_skips_solar_day_check():
    # lunar month 2 of 2024 has 30 days
    cal = LunarCalendar.from_lunar(30, 2, 2024)
    assert cal.lunar_date.day == 30
    assert cal.lunar_date.month == 2


def test_from_lunar_late_in_last_supported_year():
    # lunar 12/2199 begins in solar January 2200
    cal = LunarCalendar.from_lunar(1, 12, 2199)
    assert (cal.solar_date.day, cal.solar_date.month, cal.solar_date.year) == (16, 1, 2200)
    assert cal.lunar_date == LunarDate(1, 12, 2199, False, 2524609)
    assert cal.lunar_date.jd == cal.solar_date.jd
    assert cal.month_can_chi == "Đinh Sửu"
    assert cal.year_can_chi == "Kỷ Hợi"

    cal = LunarCalendar.from_lunar(30, 12, 2199)
    assert cal.format_solar() == "14/2/2200"
    assert cal.lunar_date == LunarDate(30, 12, 2199, False, 2524638)


@pytest.mark.parametrize(
    "lunar, expected_lunar, expected_solar",
    [
        # month 12 of 2024 and month 2 of 2025 have 29 days
        ((30, 12, 2024), "1/1/2025", "29/1/2025"),
        ((30, 2, 2025), "1/3/2025", "29/3/2025"),
    ],
)
def test_from_lunar_day_30_of_short_month_rolls_over(lunar, expected_lunar, expected_solar):
    cal = LunarCalendar.from_lunar(*lunar)
    assert cal.format_lunar() == expected_lunar
    assert cal.format_solar() == expected_solar
    assert cal.lunar_date.jd == cal.solar_date.jd
