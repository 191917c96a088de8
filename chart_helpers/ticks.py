from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def discrete_ticks(values: Iterable[Any], count: int) -> List[Any]:
    """Pick `count` evenly spaced entries, always keeping the first and the last.

    Tick i takes index round(i * (n - 1) / (count - 1)). A count that covers
    the whole sequence returns it unchanged.
    """
    items = list(values)
    n = len(items)
    count = int(count)
    if n == 0 or count < 1:
        return []
    if count >= n:
        logger.debug("discrete_ticks: count %d covers all %d values", count, n)
        return items
    if count == 1:
        return [items[0]]

    step = (n - 1) / (count - 1)
    return [items[round_half_up(i * step)] for i in range(count)]
