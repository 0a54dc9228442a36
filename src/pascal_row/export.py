from __future__ import annotations

import json
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

from .models import RowResult


def row_frame(result: RowResult) -> pd.DataFrame:
    # object dtype keeps u64 coefficients as exact Python ints
    return pd.DataFrame(
        {
            "index": list(range(result.n)),
            "coefficient": pd.Series(result.values, dtype=object),
        }
    )


def write_row_csv(result: RowResult, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    row_frame(result).to_csv(path, index=False)
    return path


def write_row_json(result: RowResult, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = result.model_dump(mode="json")
    path.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def write_row_plot(result: RowResult, path: Path) -> Path:
    """Bar chart of the row; wrapped rows are titled as such."""
    path.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure()
    plt.bar(range(result.n), [float(v) for v in result.values])
    title = f"Pascal's triangle, row {result.row_index if result.row_index is not None else '-'}"
    if result.wrapped:
        title += f" (mod 2**{result.width.bits})"
    plt.title(title)
    plt.xlabel("i")
    plt.ylabel("C(n-1, i)")

    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path
