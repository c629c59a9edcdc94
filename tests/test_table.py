# tests/test_table.py

import pytest

from amlich.core.errors import UnsupportedYearError
from amlich.diagnostics.table_check import check_table
from amlich.engines.yeartable import MAX_YEAR, MIN_YEAR, TABLE, YearCodeTable, code_for, is_supported_year


def test_table_covers_supported_years():
    assert len(TABLE) == MAX_YEAR - MIN_YEAR + 1 == 1000
    assert TABLE.first_year == 1200
    assert TABLE.last_year == 2199
    assert 1200 in TABLE and 2199 in TABLE
    assert 1199 not in TABLE and 2200 not in TABLE
    assert all(TABLE.code_for(y) != 0 for y in range(MIN_YEAR, MAX_YEAR + 1))


@pytest.mark.parametrize(
    "year, code",
    [
        (2000, 0x46c960),
        (2023, 0x2a5b52),
        (2024, 0x504b60),
        (2025, 0x38a6e6),
    ],
)
def test_known_codes(year, code):
    assert code_for(year) == code


@pytest.mark.parametrize(
    "year, leap_month",
    [(2017, 6), (2020, 4), (2023, 2), (2025, 6), (2028, 5), (2031, 3), (2033, 11), (2024, 0)],
)
def test_known_leap_months(year, leap_month):
    assert TABLE.entry_for(year).leap_month == leap_month


@pytest.mark.parametrize("year", [1199, 2200])
def test_lookup_outside_range(year):
    assert not is_supported_year(year)
    with pytest.raises(UnsupportedYearError, match=f"Year {year} is not supported"):
        code_for(year)
    with pytest.raises(UnsupportedYearError):
        TABLE.entry_for(year)


def test_years_chain_without_gaps():
    assert check_table() == []


def test_table_rejects_malformed_blocks():
    with pytest.raises(ValueError, match="expected 100"):
        YearCodeTable({2000: (0x46c960,) * 99}, lead_in=0x504b60)
    with pytest.raises(ValueError, match="contiguous"):
        YearCodeTable({1800: (0x46c960,) * 100, 2000: (0x46c960,) * 100}, lead_in=0x504b60)
