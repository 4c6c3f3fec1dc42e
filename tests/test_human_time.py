import pytest

from katas.human_time import human_readable_time


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "00:00:00"),
        (59, "00:00:59"),
        (60, "00:01:00"),
        (90, "00:01:30"),
        (3599, "00:59:59"),
        (3600, "01:00:00"),
        (45296, "12:34:56"),
        (86399, "23:59:59"),
        (86400, "24:00:00"),
        (359999, "99:59:59"),
    ],
)
def test_sample(seconds, expected):
    assert human_readable_time(seconds) == expected


def test_negative_rejected():
    with pytest.raises(ValueError):
        human_readable_time(-1)