"""Acquisition of component failure rates from manufacturer sheets."""

from __future__ import annotations

import logging
import math
import zipfile
from collections import OrderedDict
from pathlib import Path
from typing import Dict, Union

import pandas as pd

from .validation import ReliabilityError

logger = logging.getLogger(__name__)


class ComponentSheetError(ReliabilityError):
    """Raised when a component sheet cannot be turned into failure rates."""


def load_component_rates(
    path: Union[str, Path],
    id_column: str = "code",
    rate_column: str = "lambda",
    delimiter: str = ";",
) -> Dict[str, float]:
    """Return ``{component id: λ}`` in sheet order.

    Parameters
    ----------
    path:
        ``.csv`` file (split on ``delimiter``) or ``.xlsx`` workbook (first
        sheet).
    id_column, rate_column:
        Column names holding the component identifier and its failure rate
        (failures per unit time, same unit as the time points).
    """

    path = Path(path)
    sheet = _read_sheet(path, delimiter)

    missing = [col for col in (id_column, rate_column) if col not in sheet.columns]
    if missing:
        raise ComponentSheetError(
            f"{path}: missing column(s) {', '.join(repr(col) for col in missing)}."
        )

    rates: Dict[str, float] = OrderedDict()
    for position, (comp_id, raw_rate) in enumerate(zip(sheet[id_column], sheet[rate_column])):
        label = _component_label(comp_id, position)
        if label in rates:
            logger.warning("%s: duplicate component '%s' ignored", path, label)
            continue
        rates[label] = _rate_value(raw_rate, f"{path}: {label}")

    logger.info("Loaded %d component rate(s) from %s", len(rates), path)
    return rates


def _read_sheet(path: Path, delimiter: str) -> pd.DataFrame:
    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            return pd.read_csv(path, delimiter=delimiter)
        if suffix == ".xlsx":
            return pd.read_excel(path, engine="openpyxl")
    except (OSError, ValueError, zipfile.BadZipFile) as exc:
        raise ComponentSheetError(f"Unable to open file \"{path}\". Error: {exc}") from exc
    raise ComponentSheetError(f"Unsupported component sheet format: '{path.suffix}' ({path}).")


def _component_label(comp_id: object, position: int) -> str:
    if isinstance(comp_id, str) and comp_id.strip():
        return comp_id.strip()
    if comp_id is None or (isinstance(comp_id, float) and math.isnan(comp_id)):
        return f"component-{position + 1}"
    return str(comp_id)


def _rate_value(raw: object, context: str) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ComponentSheetError(f"{context}: missing failure rate.")
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ComponentSheetError(f"{context}: invalid numeric value {raw!r} for failure rate.")
    if math.isnan(value):
        raise ComponentSheetError(f"{context}: missing failure rate.")
    return value
