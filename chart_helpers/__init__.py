"""Chart data helpers (UI-agnostic).

This package contains:
- field extraction and extrema over lists of records (or DataFrames)
- discrete axis ticks and multi-scale date labels
- SVG transform strings
- chart options and Altair glue (scales, axes, long-format frames)
"""

from chart_helpers.dates import format_date
from chart_helpers.records import (
    by_fields,
    group_by_fields,
    max_by_fields,
    max_by_fields_stacked,
    min_by_fields,
)
from chart_helpers.ticks import discrete_ticks
from chart_helpers.transforms import transform_from_center

__all__ = [
    "by_fields",
    "discrete_ticks",
    "format_date",
    "group_by_fields",
    "max_by_fields",
    "max_by_fields_stacked",
    "min_by_fields",
    "transform_from_center",
]
