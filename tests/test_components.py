from pathlib import Path

import pandas as pd
import pytest

from reliability_core.components import ComponentSheetError, load_component_rates


def _write_csv(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_component_rates_from_csv(tmp_path: Path) -> None:
    sheet = _write_csv(tmp_path / "components.csv", "code;lambda\nPT-101;0.001\nXV-201;0.02\n")

    rates = load_component_rates(sheet)

    assert list(rates.items()) == [("PT-101", 0.001), ("XV-201", 0.02)]


def test_load_component_rates_from_xlsx_with_custom_columns(tmp_path: Path) -> None:
    target = tmp_path / "components.xlsx"
    pd.DataFrame({"tag": ["A", "B"], "rate": [1.0e-6, 2.5e-6]}).to_excel(target, index=False, engine="openpyxl")

    rates = load_component_rates(target, id_column="tag", rate_column="rate")

    assert rates == {"A": 1.0e-6, "B": 2.5e-6}


def test_duplicate_components_keep_first(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    sheet = _write_csv(tmp_path / "components.csv", "code;lambda\nA;0.1\nA;0.2\n")

    rates = load_component_rates(sheet)

    assert rates == {"A": 0.1}
    assert "duplicate component 'A'" in caplog.text


def test_missing_column_is_reported(tmp_path: Path) -> None:
    sheet = _write_csv(tmp_path / "components.csv", "code;pfh\nA;0.1\n")

    with pytest.raises(ComponentSheetError, match="'lambda'"):
        load_component_rates(sheet)


@pytest.mark.parametrize("cell", ["", "fast"])
def test_bad_rate_cell_names_component(tmp_path: Path, cell: str) -> None:
    sheet = _write_csv(tmp_path / "components.csv", f"code;lambda\nA;0.1\nB;{cell}\n")

    with pytest.raises(ComponentSheetError, match="B"):
        load_component_rates(sheet)


def test_unreadable_sheet(tmp_path: Path) -> None:
    with pytest.raises(ComponentSheetError, match="Unable to open"):
        load_component_rates(tmp_path / "nope.csv")


def test_unsupported_sheet_format(tmp_path: Path) -> None:
    sheet = _write_csv(tmp_path / "components.txt", "code;lambda\n")

    with pytest.raises(ComponentSheetError, match="Unsupported"):
        load_component_rates(sheet)


def test_corrupt_xlsx_sheet(tmp_path: Path) -> None:
    sheet = tmp_path / "components.xlsx"
    sheet.write_text("not a workbook", encoding="utf-8")

    with pytest.raises(ComponentSheetError, match="Unable to open"):
        load_component_rates(sheet)
