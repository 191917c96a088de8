from __future__ import annotations

import logging
from typing import Any, List, Optional

import altair as alt
import pandas as pd

from chart_helpers.fields import FieldSelector, Records, as_field_list, as_records
from chart_helpers.options import ChartOptions
from chart_helpers.records import by_fields, max_by_fields, max_by_fields_stacked, min_by_fields
from chart_helpers.ticks import discrete_ticks

logger = logging.getLogger(__name__)


def value_domain(records: Records, fields: FieldSelector, options: Optional[ChartOptions] = None) -> Optional[List[Any]]:
    """[lo, hi] for the value axis, or None when there is nothing numeric to plot."""
    options = options or ChartOptions()
    lo = min_by_fields(records, fields)
    hi = max_by_fields_stacked(records, fields) if options.stacked else max_by_fields(records, fields)
    if lo is None or hi is None:
        return None

    if options.include_zero:
        lo = min(0, lo)
    if options.domain_padding:
        hi = hi + options.domain_padding * (hi - lo)
    return [lo, hi]


def axis_values(records: Records, field: str, options: Optional[ChartOptions] = None) -> List[Any]:
    options = options or ChartOptions()
    values = [v for v in by_fields(records, field) if v is not None]
    return discrete_ticks(values, options.tick_count)


def long_frame(records: Records, x_field: str, fields: FieldSelector) -> pd.DataFrame:
    """Melt the selected fields into `x_field`, `series`, `value` columns."""
    rows = as_records(records)
    field_list = [f for f in as_field_list(fields) if f != x_field]
    if not rows:
        logger.debug("long_frame: no records for %s", field_list)

    df = pd.DataFrame(rows, columns=[x_field, *field_list])
    return df.melt(id_vars=x_field, value_vars=field_list, var_name="series", value_name="value")


def value_scale(records: Records, fields: FieldSelector, options: Optional[ChartOptions] = None) -> alt.Scale:
    domain = value_domain(records, fields, options)
    return alt.Scale(domain=domain) if domain else alt.Scale()


def tick_axis(records: Records, field: str, options: Optional[ChartOptions] = None) -> alt.Axis:
    return alt.Axis(values=axis_values(records, field, options), grid=False)
