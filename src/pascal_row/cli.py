from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from .adapter import compute_row
from .config import load_settings
from .errors import CoefficientOverflowError, InvalidRowIndexError, RowTooLargeError
from .export import row_frame, write_row_csv, write_row_json, write_row_plot
from .models import OverflowPolicy
from .registry import FunctionRegistry
from .widths import RowWidth, safe_lengths

app = typer.Typer(add_completion=False, help="Pascal's triangle row generator")

# ---- Function registry commands ----
functions_app = typer.Typer(help="Inspect the host-callable functions.")
app.add_typer(functions_app, name="functions")


@functions_app.command("list")
def list_functions() -> None:
    """List registered functions as module.name."""
    registry = FunctionRegistry()
    for name in registry.list_functions():
        meta = registry.describe_function(name)
        typer.echo(f"{meta.get('module', '')}.{name}")


@functions_app.command("describe")
def describe_function(
    name: str = typer.Option(..., "--name", help="Function name to describe")
) -> None:
    """Show metadata for a registered function as JSON."""
    registry = FunctionRegistry()
    try:
        meta = registry.describe_function(name)
    except KeyError as exc:
        typer.echo(str(exc.args[0]), err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(meta, indent=2, sort_keys=True, default=str))


@app.command()
def row(
    n: int = typer.Argument(..., help="Row length (returns row n-1 of the triangle)"),
    width: Optional[RowWidth] = typer.Option(
        None, "--width", help="Coefficient width (default: PASCAL_ROW_WIDTH or u32)", case_sensitive=False
    ),
    overflow: Optional[OverflowPolicy] = typer.Option(
        None, "--overflow", help="wrap|raise (default: PASCAL_ROW_OVERFLOW or wrap)", case_sensitive=False
    ),
    fmt: str = typer.Option("json", "--format", help="json|text|csv"),
    csv_out: Optional[Path] = typer.Option(None, "--csv", help="Also write the row as CSV"),
    json_out: Optional[Path] = typer.Option(None, "--json", help="Also write the full result as JSON"),
    plot_out: Optional[Path] = typer.Option(None, "--plot", help="Also write a bar chart (PNG)"),
):
    """
    Print the n coefficients C(n-1, 0..n-1).

    Exit codes: 2 for invalid input, 1 for overflow or size-limit errors.
    """
    fmt = fmt.strip().lower()
    if fmt not in {"json", "text", "csv"}:
        typer.echo(f"ERROR: Unknown format '{fmt}' (expected json|text|csv)", err=True)
        raise typer.Exit(code=2)

    try:
        result = compute_row(n, width=width, overflow=overflow, settings=load_settings())
    except InvalidRowIndexError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except (CoefficientOverflowError, RowTooLargeError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    for w in result.warnings:
        typer.echo(f"WARNING: {w}", err=True)

    if fmt == "json":
        typer.echo(json.dumps(result.values))
    elif fmt == "text":
        typer.echo(" ".join(str(v) for v in result.values))
    else:
        typer.echo(row_frame(result).to_csv(index=False).rstrip("\n"))

    try:
        if csv_out:
            typer.echo(f"CSV: {write_row_csv(result, csv_out)}", err=True)
        if json_out:
            typer.echo(f"JSON: {write_row_json(result, json_out)}", err=True)
        if plot_out:
            typer.echo(f"Plot: {write_row_plot(result, plot_out)}", err=True)
    except OSError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def limits():
    """
    Print the largest safe row length for each coefficient width.

    Longer rows wrap (or are rejected with --overflow raise).
    """
    for width, length in safe_lengths().items():
        typer.echo(f"{width}: n <= {length} (row {length - 1})")
