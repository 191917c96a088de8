from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd

FieldSelector = Union[str, Iterable[str], None]
Records = Union[Iterable[Mapping[str, Any]], pd.DataFrame, None]


def as_field_list(fields: FieldSelector) -> List[str]:
    """Normalize a field name or a sequence of field names into a list."""
    if fields is None:
        return []
    if isinstance(fields, str):
        return [fields]
    return [str(f) for f in fields]


def as_records(records: Records) -> List[Dict[str, Any]]:
    """Return the input as a list of dicts.

    DataFrames are converted row by row with NaN cells mapped to None, so a
    missing cell looks the same as a missing key.
    """
    if records is None:
        return []
    if isinstance(records, pd.DataFrame):
        if records.empty:
            return []
        frame = records.astype(object).where(records.notna(), None)
        return frame.to_dict("records")
    if isinstance(records, (str, bytes, Mapping)):
        raise TypeError(f"expected a collection of records, got {type(records).__name__}")

    out: List[Dict[str, Any]] = []
    for rec in records:
        if not isinstance(rec, Mapping):
            raise TypeError(f"expected a mapping per record, got {type(rec).__name__}")
        out.append(dict(rec))
    return out


def field_value(record: Mapping[str, Any], field: str) -> Optional[Any]:
    return record.get(field, None)
