# tests/test_year_codes.py

import pytest

from amlich.design.year_codes import format_block, generate_code, main, tz_for_year
from amlich.engines.yeartable import TABLE, code_for


@pytest.mark.parametrize("year", [1200, 1288, 1407, 1582, 1650, 1789, 1799])
def test_generated_years_match_bundled_table(year):
    assert generate_code(year) == code_for(year)


def test_lead_in_code_is_reproducible():
    assert generate_code(1199) == TABLE.lead_in.pack() == 0x36ad50


@pytest.mark.parametrize("year", [1900, 2024, 2025, 2100])
def test_published_years_reproduced(year):
    assert generate_code(year) == code_for(year)


def test_timezone_switch():
    assert tz_for_year(1967) == 8.0
    assert tz_for_year(1968) == 7.0


def test_format_block():
    text = format_block("TK13", [0x225b54, 0x464bb0], per_line=10)
    assert text.splitlines() == ["TK13: Tuple[int, ...] = (", "    0x225b54, 0x464bb0,", ")"]


def test_main_prints_blocks(capsys):
    assert main(["--from-year", "1199", "--to-year", "1201"]) == 0
    out = capsys.readouterr().out
    assert "LEAD_IN_1199 = 0x36ad50" in out
    assert "TK13: Tuple[int, ...] = (" in out
    assert "0x225b54," in out
