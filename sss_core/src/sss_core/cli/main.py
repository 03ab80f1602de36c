"""Typer-based command line interface for SSS Core."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from ..config import AppConfig, dump_default_config, load_config
from ..errors import InvalidBase, InvalidDigit
from ..logging import configure_logging
from ..models import CaseResult
from ..paths import project_config_path
from ..radix import decode, encode
from ..runner import process_case
from ..utils.text import int_to_text

app = typer.Typer(help="Recover threshold-shared secrets from decoded share points")

_RULE = "=" * 60


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    configure_logging(ctx.obj.logging.normalized_level())


def _echo_case(index: int, result: CaseResult) -> None:
    typer.echo(_RULE)
    typer.echo(f"Processing Test Case {index}: {result.source}")
    typer.echo(_RULE)
    if result.k is not None:
        typer.echo(f"Total shares (n): {result.n}")
        typer.echo(f"Threshold (k): {result.k}")
        typer.echo(f"Polynomial degree (m): {result.k - 1}")
        typer.echo("")
    if result.points:
        typer.echo("Decoding shares:")
        for record, point in zip(result.records, result.points):
            typer.echo(f'Point {point} -> Base {record.base} value: "{record.value}"')
        typer.echo("")
    if not result.ok:
        typer.echo(f"Error processing {result.source}: {result.error}", err=True)
        return

    selected = ", ".join(str(point) for point in result.points[: result.k])
    typer.echo(f"Using first {result.k} shares for secret reconstruction:")
    typer.echo(f"Selected shares: [{selected}]")
    report = result.consistency
    if report is not None:
        suffix = " (truncated)" if report.truncated else ""
        if report.consistent:
            typer.echo(f"Consistency: all {report.subsets_checked} subsets agree{suffix}")
        else:
            typer.echo(
                f"Consistency: {len(report.mismatches)} of {report.subsets_checked} subsets disagree{suffix}"
            )
            for mismatch in report.mismatches:
                xs = ", ".join(int_to_text(x) for x in mismatch.xs)
                value = "-" if mismatch.secret is None else int_to_text(mismatch.secret)
                typer.echo(f"  x = [{xs}] -> {value} ({mismatch.reason})")
    typer.echo("")
    typer.echo(f"SECRET FOR TEST CASE {index}: {int_to_text(result.secret)}")
    typer.echo("")


@app.command()
def recover(
    ctx: typer.Context,
    files: List[Path] = typer.Argument(..., help="Test-case JSON files"),
    verify: Optional[bool] = typer.Option(
        None, "--verify/--no-verify", help="Check that every k-subset yields the same secret"
    ),
    max_subsets: Optional[int] = typer.Option(
        None, "--max-subsets", min=1, help="Cap the number of subsets checked"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit results as JSON"),
) -> None:
    """Reconstruct the secret of every test case, continuing past failures."""
    config: AppConfig = ctx.obj
    results = [
        process_case(path, config, verify=verify, max_subsets=max_subsets) for path in files
    ]
    if as_json:
        typer.echo(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        for index, result in enumerate(results, start=1):
            _echo_case(index, result)
    if not all(result.ok for result in results):
        raise typer.Exit(code=1)


@app.command()
def convert(
    value: str = typer.Argument(..., help="Digits to convert"),
    base: int = typer.Option(..., "-b", "--base", help="Radix VALUE is written in"),
    to: int = typer.Option(10, "--to", help="Radix to print the result in"),
) -> None:
    """Decode VALUE from one radix and print it in another."""
    try:
        typer.echo(encode(decode(value, base), to))
    except (InvalidBase, InvalidDigit) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)


@app.command()
def init_config(
    target: Optional[Path] = typer.Argument(None, help="Destination (default: ./.sss/config.yaml)"),
) -> None:
    destination = target or project_config_path()
    dump_default_config(destination)
    typer.echo(f"Default configuration written to {destination}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
