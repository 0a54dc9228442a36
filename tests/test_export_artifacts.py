from __future__ import annotations

import json
from pathlib import Path

import pandas as pd

from pascal_row.adapter import compute_row
from pascal_row.export import row_frame, write_row_csv, write_row_json, write_row_plot
from pascal_row.models import Settings


def _settings() -> Settings:
    return Settings()


def test_row_frame_columns() -> None:
    df = row_frame(compute_row(5, settings=_settings()))
    assert list(df.columns) == ["index", "coefficient"]
    assert df["index"].tolist() == [0, 1, 2, 3, 4]
    assert df["coefficient"].tolist() == [1, 4, 6, 4, 1]


def test_csv_is_written_with_exact_u64_values(tmp_path: Path) -> None:
    result = compute_row(68, width="u64", settings=_settings())
    out = write_row_csv(result, tmp_path / "nested" / "row.csv")
    assert out.exists()

    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "index,coefficient"
    assert lines[34] == f"33,{result.values[33]}"
    assert result.values[33] == 14226520737620288370

    df = pd.read_csv(out)
    assert len(df) == 68


def test_json_payload_is_stable(tmp_path: Path) -> None:
    result = compute_row(36, settings=_settings())
    out = write_row_json(result, tmp_path / "row.json")
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["n"] == 36
    assert payload["row_index"] == 35
    assert payload["width"] == "u32"
    assert payload["overflow"] == "wrap"
    assert payload["wrapped"] is True
    assert payload["values"] == result.values
    assert list(payload.keys()) == sorted(payload.keys())


def test_plot_is_written(tmp_path: Path) -> None:
    out = write_row_plot(compute_row(10, settings=_settings()), tmp_path / "figs" / "row.png")
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_empty_row_exports(tmp_path: Path) -> None:
    result = compute_row(0, settings=_settings())
    assert write_row_csv(result, tmp_path / "empty.csv").read_text(encoding="utf-8").strip() == "index,coefficient"
    assert write_row_plot(result, tmp_path / "empty.png").exists()
