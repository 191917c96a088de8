from __future__ import annotations

from typing import Union

Number = Union[int, float]

# Floats from this magnitude up print in exponent form (`1e+21`).
EXPONENT_THRESHOLD = 1e21


def format_number(value: Number) -> str:
    """Render a number the way it reads in an SVG attribute (`-30`, not `-30.0`)."""
    if isinstance(value, float):
        if value.is_integer() and abs(value) < EXPONENT_THRESHOLD:
            return str(int(value))
        return repr(value)
    return str(value)


def transform_from_center(x: Number, y: Number, width: Number, height: Number, scale: Number) -> str:
    """SVG transform that scales a box by `scale` and shifts it back into place.

    The offset on each axis is the origin minus the scaled extent:
    `translate(x - width * scale, y - height * scale) scale(scale)`.
    """
    tx = x - width * scale
    ty = y - height * scale
    return f"translate({format_number(tx)}, {format_number(ty)}) scale({format_number(scale)})"
