# tests/test_yearcode.py

import pytest

from amlich.core.errors import InvalidYearCodeError
from amlich.engines.yearcode import LONG_MONTH, SHORT_MONTH, YearCode


def test_unpack_year_without_leap_month():
    yc = YearCode.unpack(0x504b60, 2024)
    assert yc.leap_month == 0
    assert not yc.has_leap_month
    assert yc.tet_offset == 40
    assert yc.month_is_long == (
        False, True, False, False, True, False, True, True, False, True, True, False,
    )
    assert yc.year_length == 354


def test_unpack_year_with_leap_month():
    yc = YearCode.unpack(0x38a6e6, 2025)
    assert yc.leap_month == 6
    assert not yc.leap_month_is_long
    assert yc.leap_month_length == SHORT_MONTH
    assert yc.tet_offset == 28
    # month 1 sits at the highest flag bit, month 12 at the lowest
    assert yc.month_length(1) == LONG_MONTH
    assert yc.month_length(12) == SHORT_MONTH
    assert yc.year_length == 384


def test_pack_inverts_unpack():
    for code in (0x504b60, 0x38a6e6, 0x2a5b52, 0x46c960):
        assert YearCode.unpack(code).pack() == code


def test_zero_code_rejected():
    with pytest.raises(InvalidYearCodeError, match="Invalid year code: 0 for year 2024"):
        YearCode.unpack(0, 2024)
    # also a ValueError for callers that don't know the package errors
    with pytest.raises(ValueError):
        YearCode.unpack(0)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(leap_month=13, leap_month_is_long=False, tet_offset=30, month_is_long=(False,) * 12),
        dict(leap_month=0, leap_month_is_long=False, tet_offset=-1, month_is_long=(False,) * 12),
        dict(leap_month=0, leap_month_is_long=False, tet_offset=30, month_is_long=(False,) * 11),
    ],
)
def test_post_init_validation(kwargs):
    with pytest.raises(ValueError):
        YearCode(**kwargs)
