"""Single-precision value model: parsing operand text and formatting results."""

from __future__ import annotations

import re
from typing import Final

import numpy as np

Value = np.float32

_NUMBER_RE: Final = re.compile(
    r"""
    ^
    [+-]?
    (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)        # mantissa
    (?:[eE][+-]?[0-9]+)?                    # optional exponent
    $
    """,
    re.VERBOSE,
)
_SPECIAL_VALUES: Final[dict[str, float]] = {
    "inf": np.inf,
    "+inf": np.inf,
    "-inf": -np.inf,
    "infinity": np.inf,
    "+infinity": np.inf,
    "-infinity": -np.inf,
    "nan": np.nan,
    "+nan": np.nan,
    "-nan": np.nan,
}

NAN: Final[Value] = np.float32(np.nan)


def parse_value(text: str) -> Value | None:
    """Parse ``text`` as a float32, returning ``None`` when it is not a number."""
    special = _SPECIAL_VALUES.get(text.lower())
    if special is not None:
        return np.float32(special)
    if not _NUMBER_RE.match(text):
        return None
    return np.float32(float(text))


def format_value(value: Value) -> str:
    """Render ``value`` as the shortest decimal that round-trips through float32.

    Integral results drop the trailing ``.0`` (``-2250``), non-finite values
    render as ``inf``, ``-inf`` and ``NaN``.
    """
    value = np.float32(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, trim="-")
