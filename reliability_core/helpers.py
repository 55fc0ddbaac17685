"""Small numeric helpers."""

from __future__ import annotations

from typing import TypeVar

import numpy as np
import pandas as pd

Numeric = TypeVar("Numeric", int, float, np.ndarray, pd.Series)


def add_one(x: Numeric) -> Numeric:
    """Return ``x + 1``.

    Works on plain numbers as well as element-wise on numpy arrays and pandas
    Series.
    """

    return x + 1
