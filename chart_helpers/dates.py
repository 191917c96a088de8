"""Multi-scale date labels for time axes.

Each timestamp gets the coarsest label that still tells it apart from its
neighbours on a tick axis: a year boundary reads `2024`, a month boundary
`March`, a plain day `Tue 14`, an hour `03 PM`, and so on down to
milliseconds.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

SUNDAY = 6


def format_date(value: Any) -> str:
    if value is None:
        return ""
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        return ""

    if ts.microsecond // 1000:
        return f".{ts.microsecond // 1000:03d}"
    if ts.second:
        return ts.strftime(":%S")
    if ts.minute:
        return ts.strftime("%I:%M")
    if ts.hour:
        return ts.strftime("%I %p")
    if ts.weekday() != SUNDAY and ts.day != 1:
        return ts.strftime("%a %d")
    if ts.day != 1:
        return ts.strftime("%b %d")
    if ts.month != 1:
        return ts.strftime("%B")
    return ts.strftime("%Y")
