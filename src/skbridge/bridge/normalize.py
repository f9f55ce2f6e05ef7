"""Conversion of values returned across the foreign boundary."""

from __future__ import annotations

from typing import Any

import numpy as np


def normalize(value: Any) -> Any:
    """Collapse a rank-1 ``ndarray`` into a list; pass everything else through.

    Multi-dimensional arrays, 0-d arrays and unrecognised objects come back
    unchanged so callers can handle them explicitly.
    """

    if isinstance(value, np.ndarray) and value.ndim == 1:
        return value.tolist()
    return value


__all__ = ["normalize"]
