"""Generation and storage of the package's bundled ``helper`` table."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any, Union

import pandas as pd
import yaml

from .validation import ReliabilityError

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path("data") / "helper.csv"
CSV_DELIMITER = ";"


class DataFormatError(ReliabilityError):
    """Raised when a data file cannot be written or read in the requested format."""


def make_data() -> pd.DataFrame:
    """Return the ``helper`` table (a single row ``x=1, y=2, z=3``)."""

    return pd.DataFrame({"x": [1], "y": [2], "z": [3]})


def save_data(table: pd.DataFrame, path: Union[str, Path] = DEFAULT_DATA_PATH) -> Path:
    """Write ``table`` to ``path``; the format follows the file suffix.

    ``.csv`` files are semicolon delimited, ``.xlsx`` files go through
    openpyxl and ``.yaml``/``.yml`` files hold a list of row mappings.
    """

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in (".csv", ".xlsx", ".yaml", ".yml"):
        raise DataFormatError(f"Unsupported data file format: '{path.suffix}' ({path}).")

    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        table.to_csv(path, sep=CSV_DELIMITER, index=False)
    elif suffix == ".xlsx":
        table.to_excel(path, index=False, engine="openpyxl")
    else:
        records = [
            {key: _plain(value) for key, value in row.items()}
            for row in table.to_dict(orient="records")
        ]
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(records, f, sort_keys=False, allow_unicode=True)

    logger.info("Wrote %d row(s) to %s", len(table), path)
    return path


def load_data(path: Union[str, Path] = DEFAULT_DATA_PATH) -> pd.DataFrame:
    """Read a table previously written by :func:`save_data`."""

    path = Path(path)
    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            return pd.read_csv(path, sep=CSV_DELIMITER)
        if suffix == ".xlsx":
            return pd.read_excel(path, engine="openpyxl")
        if suffix in (".yaml", ".yml"):
            with open(path, "r", encoding="utf-8") as f:
                records = yaml.safe_load(f) or []
            return pd.DataFrame.from_records(records)
    except (OSError, ValueError, zipfile.BadZipFile, yaml.YAMLError) as exc:
        raise DataFormatError(f"Unable to read data file \"{path}\": {exc}") from exc
    raise DataFormatError(f"Unsupported data file format: '{path.suffix}' ({path}).")


def _plain(value: Any) -> Any:
    # numpy scalars are not representable by yaml.safe_dump
    return value.item() if hasattr(value, "item") else value
