# tests/test_cli.py

from amlich.cli import main


def test_day(capsys):
    assert main(["day", "2024-02-10"]) == 0
    out = capsys.readouterr().out
    assert "Solar: 10/2/2024" in out
    assert "Lunar: 1/1/2024" in out


def test_bare_date_with_attributes(capsys):
    assert main(["2025-07-25", "--attr", "weekday", "--attr", "can_chi"]) == 0
    out = capsys.readouterr().out
    assert "Lunar: 1/6/2025 (nhuận)" in out
    assert "can_chi_day: Ất Mùi" in out
    assert "weekday_name:" in out


def test_day_out_of_range(capsys):
    assert main(["day", "1000-01-01"]) == 2
    err = capsys.readouterr().err
    assert "Year 1000 is not supported" in err


def test_lunar(capsys):
    assert main(["lunar", "1", "6", "2025", "--leap"]) == 0
    assert "25/7/2025" in capsys.readouterr().out

    assert main(["lunar", "1", "1", "1000"]) == 1


def test_year(capsys):
    assert main(["year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "Ất Tỵ" in out
    assert "6L" in out
    assert "25/7/2025" in out


def test_can_chi(capsys):
    assert main(["can-chi", "2025"]) == 0
    out = capsys.readouterr().out
    assert "Year 2025: Ất Tỵ" in out
    assert "month  9: Bính Tuất" in out


def test_can_chi_rejects_unsupported_year(capsys):
    assert main(["can-chi", "2200"]) == 2
    assert "Invalid lunar month" in capsys.readouterr().err


def test_new_years(capsys):
    assert main(["new-years", "--from-year", "2024", "--to-year", "2026"]) == 0
    out = capsys.readouterr().out
    assert "02-10" in out
    assert "01-29" in out
    assert "2026-02-17" in out


def test_pretty_month(capsys):
    assert main(["pretty-month", "--lunar", "2025", "6", "--leap", "--solar", "2025", "7"]) == 0
    out = capsys.readouterr().out
    assert "Lunar month  Y=2025  M=6L" in out
    assert "Solar month  2025-07" in out
    assert "06L-01" in out


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "300"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_diag_table_check(capsys):
    assert main(["diag", "table-check", "--from-year", "2000", "--to-year", "2100"]) == 0
    assert "Checked 101 years: OK" in capsys.readouterr().out


def test_pretty_month_october_1582_skips_reform_gap(capsys):
    assert main(["pretty-month", "--solar", "1582", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    rows = lines[3:]
    top = [tok for row in rows[0::2] for tok in row.split()]
    assert top == [str(d) for d in [1, 2, 3, 4] + list(range(15, 32))]
