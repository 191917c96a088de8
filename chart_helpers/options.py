from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

TICK_COUNT_DEFAULT = 5


@dataclass(frozen=True)
class ChartOptions:
    tick_count: int = TICK_COUNT_DEFAULT
    domain_padding: float = 0.0
    include_zero: bool = True
    stacked: bool = False


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except Exception:
        logger.debug("ignoring non-integer option value %r", value)
        return default


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except Exception:
        logger.debug("ignoring non-numeric option value %r", value)
        return default


def normalize_options(raw: Optional[dict]) -> ChartOptions:
    raw = raw or {}

    tick_count = _as_int(raw.get("tick_count", TICK_COUNT_DEFAULT), TICK_COUNT_DEFAULT)
    tick_count = max(1, min(100, tick_count))

    domain_padding = _as_float(raw.get("domain_padding", 0.0), 0.0)
    domain_padding = max(0.0, min(1.0, domain_padding))

    return ChartOptions(
        tick_count=tick_count,
        domain_padding=domain_padding,
        include_zero=bool(raw.get("include_zero", True)),
        stacked=bool(raw.get("stacked", False)),
    )
