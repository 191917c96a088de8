from __future__ import annotations

from pydantic import BaseModel

from chart_helpers.options import TICK_COUNT_DEFAULT, ChartOptions, normalize_options


class ChartOptionsModel(BaseModel):
    tick_count: int = TICK_COUNT_DEFAULT
    domain_padding: float = 0.0
    include_zero: bool = True
    stacked: bool = False


def options_from_model(model: ChartOptionsModel) -> ChartOptions:
    return normalize_options(model.model_dump())
