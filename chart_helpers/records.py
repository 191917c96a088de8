from __future__ import annotations

import logging
import numbers
from typing import Any, List, Optional

import pandas as pd

from chart_helpers.fields import FieldSelector, Records, as_field_list, as_records, field_value

logger = logging.getLogger(__name__)


def group_by_fields(records: Records, fields: FieldSelector) -> List[List[Any]]:
    """One list of values per field, in field order, preserving record order.

    A record without the field contributes None at its position.
    """
    rows = as_records(records)
    return [[field_value(rec, f) for rec in rows] for f in as_field_list(fields)]


def by_fields(records: Records, fields: FieldSelector) -> List[Any]:
    """Values of every selected field across the records, flattened field by field."""
    return [v for values in group_by_fields(records, fields) for v in values]


def is_number(value: Any) -> bool:
    """Real numbers only; bools, numeric strings and NaN are not plottable values."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not pd.isna(value)


def _numbers(values: List[Any]) -> List[Any]:
    return [v for v in values if is_number(v)]


def min_by_fields(records: Records, fields: FieldSelector) -> Optional[Any]:
    """Smallest numeric value across the selected fields, returned as it appears in the records."""
    values = _numbers(by_fields(records, fields))
    if not values:
        logger.debug("min_by_fields: no numeric values for %s", as_field_list(fields))
        return None
    return min(values)


def max_by_fields(records: Records, fields: FieldSelector) -> Optional[Any]:
    values = _numbers(by_fields(records, fields))
    if not values:
        logger.debug("max_by_fields: no numeric values for %s", as_field_list(fields))
        return None
    return max(values)


def max_by_fields_stacked(records: Records, fields: FieldSelector) -> Optional[Any]:
    """Largest per-record sum of the selected fields.

    Absent or non-numeric fields add nothing to a record's total; records with
    no numeric value in any selected field are left out.
    """
    columns = group_by_fields(records, fields)
    if not columns or not columns[0]:
        logger.debug("max_by_fields_stacked: nothing to stack")
        return None

    totals = [sum(stack) for stack in map(_numbers, zip(*columns)) if stack]
    return max(totals) if totals else None
