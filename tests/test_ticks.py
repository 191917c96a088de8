"""Unit tests for discrete axis tick selection."""

from __future__ import annotations

import pytest

from chart_helpers.ticks import discrete_ticks, round_half_up


@pytest.mark.parametrize(
    "count, expected",
    [
        (1, [0]),
        (2, [0, 99]),
        (3, [0, 50, 99]),
        (4, [0, 33, 66, 99]),
    ],
)
def test_discrete_ticks_on_a_range(count: int, expected: list) -> None:
    assert discrete_ticks(list(range(100)), count) == expected


@pytest.mark.parametrize("count", [3, 4, 50])
def test_discrete_ticks_returns_plain_sequence_when_count_is_too_big(count: int) -> None:
    assert discrete_ticks([1, 2, 3], count) == [1, 2, 3]


def test_discrete_ticks_empty() -> None:
    assert discrete_ticks([], 100) == []


def test_discrete_ticks_non_positive_count() -> None:
    assert discrete_ticks([1, 2, 3], 0) == []


def test_discrete_ticks_keeps_first_and_last() -> None:
    labels = [f"wk{i}" for i in range(53)]

    for count in range(2, 53):
        ticks = discrete_ticks(labels, count)
        assert len(ticks) == count
        assert ticks[0] == "wk0"
        assert ticks[-1] == "wk52"


def test_discrete_ticks_accepts_iterables() -> None:
    assert discrete_ticks(range(11), 3) == [0, 5, 10]


def test_round_half_up() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
