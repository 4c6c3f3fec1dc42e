import pytest

from katas.century import what_century


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        ("2011", "21st"),
        ("2154", "22nd"),
        ("2259", "23rd"),
        ("1234", "13th"),
        ("1023", "11th"),
        ("2000", "20th"),
        ("2700", "27th"),
    ],
)
def test_sample(year, expected):
    assert what_century(year) == expected


def test_teens_use_th():
    assert what_century("1150") == "12th"
    assert what_century("1250") == "13th"


@pytest.mark.parametrize("year", ["", "20x1", "twenty", "2.5"])
def test_invalid_year(year):
    with pytest.raises(ValueError):
        what_century(year)