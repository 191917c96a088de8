from __future__ import annotations

import pytest

from chart_helpers.transforms import format_number, transform_from_center


@pytest.mark.parametrize(
    "args, expected",
    [
        ((10, 10, 20, 20, 2), "translate(-30, -30) scale(2)"),
        ((10, 10, 12, 16, 3), "translate(-26, -38) scale(3)"),
        ((0, 0, 10, 10, 1), "translate(-10, -10) scale(1)"),
        ((10.0, 10.0, 20.0, 20.0, 2.0), "translate(-30, -30) scale(2)"),
        ((0, 0, 3, 5, 0.5), "translate(-1.5, -2.5) scale(0.5)"),
        ((0, 0, 1e21, 1, 1), "translate(-1e+21, -1) scale(1)"),
    ],
)
def test_transform_from_center(args, expected: str) -> None:
    assert transform_from_center(*args) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (-30.0, "-30"),
        (7, "7"),
        (0.25, "0.25"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (-2.5e22, "-2.5e+22"),
    ],
)
def test_format_number(value, expected: str) -> None:
    assert format_number(value) == expected
