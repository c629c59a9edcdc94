# tests/test_sexagenary.py

import random

import pytest

from amlich.core.errors import InvalidInputError
from amlich.core.time import to_jdn
from amlich.engines import sexagenary as sx


@pytest.mark.parametrize(
    "year, label",
    [
        (2000, "Canh Thìn"),
        (2001, "Tân Tỵ"),
        (2002, "Nhâm Ngọ"),
        (2003, "Quý Mùi"),
        (2004, "Giáp Thân"),
        (2021, "Tân Sửu"),
        (2022, "Nhâm Dần"),
        (2023, "Quý Mão"),
        (2024, "Giáp Thìn"),
        (2025, "Ất Tỵ"),
    ],
)
def test_year_stem_branch(year, label):
    assert sx.year_stem_branch(year) == label


def test_year_pair_indices():
    assert sx.year_pair(2024) == sx.StemBranch(0, 4)
    assert sx.year_pair(2024).label == "Giáp Thìn"


@pytest.mark.parametrize(
    "day, month, year, label",
    [
        (10, 2, 2024, "Giáp Thìn"),
        (1, 1, 2024, "Giáp Tý"),
        (1, 1, 2000, "Mậu Ngọ"),
        (25, 7, 2025, "Ất Mùi"),
        (1, 10, 2025, "Quý Mão"),
        (24, 10, 2025, "Bính Dần"),
        (25, 10, 2025, "Đinh Mão"),
        (26, 10, 2025, "Mậu Thìn"),
    ],
)
def test_day_stem_branch(day, month, year, label):
    assert sx.day_stem_branch(to_jdn(day, month, year)) == label


def test_day_labels_cycle_every_sixty_days():
    random.seed(3)
    for _ in range(500):
        jd = random.randint(2159358, 2524593)
        assert sx.day_stem_branch(jd) != sx.day_stem_branch(jd + 1)
        assert sx.day_stem_branch(jd) == sx.day_stem_branch(jd + 60)


@pytest.mark.parametrize(
    "month, year, label",
    [
        (1, 2024, "Bính Dần"),
        (12, 2023, "Ất Sửu"),
        (1, 2025, "Mậu Dần"),
        (9, 2025, "Bính Tuất"),
        (12, 2025, "Kỷ Sửu"),
    ],
)
def test_month_stem_branch(month, year, label):
    assert sx.month_stem_branch(month, year) == label


def test_month_rows_repeat_every_five_stems():
    for a, b in zip(sx.CAN[:5], sx.CAN[5:]):
        assert sx.MONTH_STEM_BRANCH[a] == sx.MONTH_STEM_BRANCH[b]
    assert all(row[0].endswith("Dần") for row in sx.MONTH_STEM_BRANCH.values())


@pytest.mark.parametrize("month, year", [(0, 2024), (13, 2024), (1, 1199), (1, 2200)])
def test_month_stem_branch_rejects_bad_input(month, year):
    with pytest.raises(InvalidInputError):
        sx.month_stem_branch(month, year)


def test_zodiac_animal():
    assert sx.zodiac_animal(2024) == "Rồng"
    assert sx.zodiac_animal(2025) == "Rắn"
    assert sx.zodiac_animal(2020) == "Chuột"
