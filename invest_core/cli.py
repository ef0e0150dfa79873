from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table

from invest_core.domain.brackets import INCOME_BRACKETS
from invest_core.domain.models import IncomeBracket, SimulationResult
from invest_core.io import config as config_io
from invest_core.services import pipeline, recommendation, reports, validation

app = typer.Typer(help="Investment simulator: compound growth of monthly contributions.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostic log messages")):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _save_json(path: Path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)


def _format_month(month: int) -> str:
    if month == 0:
        return "Start"
    if month % 12 == 0:
        years = month // 12
        return f"{years} year{'s' if years > 1 else ''}"
    return f"{month} months"


def _money(value: float) -> str:
    return f"{value:,.2f} €"


def _load_brackets(path: Optional[Path]) -> Tuple[IncomeBracket, ...]:
    if path is None:
        return INCOME_BRACKETS
    try:
        return config_io.load_bracket_table(path)
    except (OSError, ValueError, KeyError) as exc:
        raise typer.BadParameter(f"Cannot read bracket table {path}: {exc}") from exc


def _collect_raw(inputs: Optional[Path], **overrides: Optional[str]) -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    if inputs:
        try:
            loaded = config_io.load_raw_inputs(inputs)
        except (OSError, ValueError) as exc:
            raise typer.BadParameter(f"Cannot read inputs {inputs}: {exc}") from exc
        for key, value in loaded.items():
            try:
                validation.canonical_field(key)
            except KeyError:
                typer.echo(f"Ignoring unknown input in {inputs}: {key}", err=True)
                continue
            raw[key] = value
    raw.update({k: v for k, v in overrides.items() if v is not None})
    return raw


def _result_to_json(result: SimulationResult, errors: Dict[str, str]) -> dict:
    payload = result.to_dict()
    payload["validation"] = errors
    payload["diagnostics"] = result.diagnostics
    return payload


def _yearly_table(result: SimulationResult) -> Table:
    table = Table(title="Yearly breakdown")
    table.add_column("Year", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Contributed", justify="right")
    table.add_column("Gain", justify="right", style="green")
    for row in reports.yearly_breakdown(result).itertuples(index=False):
        table.add_row(_format_month(int(row.year) * 12), _money(row.total), _money(row.contributed), _money(row.gain))
    return table


def _print_summary(console: Console, result: SimulationResult) -> None:
    rec = result.recommendation
    console.print("\n[bold cyan]== Investment Summary ==[/bold cyan]")
    console.print(f"Amount invested: [bold]{_money(result.total_contributed)}[/bold]")
    console.print(f"Interest earned: [green]{_money(result.total_gain)}[/green]")
    console.print(f"Final amount: [bold]{_money(result.final_total)}[/bold]")
    console.print(
        f"Recommended savings: [green]{rec.recommended_monthly_amount:,.0f} €[/green] per month "
        f"({rec.percentage_of_income:g}% of income)"
    )
    for notice in result.diagnostics:
        console.print(f"[yellow]{notice}[/yellow]")


@app.command()
def simulate(
    initial_capital: Optional[str] = typer.Option(None, help="Initial capital"),
    monthly_contribution: Optional[str] = typer.Option(None, help="Monthly contribution"),
    annual_rate: Optional[str] = typer.Option(None, help="Annual interest rate in percent (0-100)"),
    years: Optional[str] = typer.Option(None, help="Duration in years (1-50)"),
    bracket: Optional[str] = typer.Option(None, help="Income bracket id"),
    inputs: Optional[Path] = typer.Option(None, help="JSON file with raw inputs; options override it"),
    brackets_file: Optional[Path] = typer.Option(None, help="JSON bracket table replacing the built-in one"),
    yearly: bool = typer.Option(False, help="Print the yearly breakdown table"),
    csv: Optional[Path] = typer.Option(None, help="Write the monthly series as CSV"),
    out: Optional[Path] = typer.Option(None, help="Output path for simulation JSON"),
):
    """Validate inputs and run the monthly compounding simulation."""
    raw = _collect_raw(
        inputs,
        initial_capital=initial_capital,
        monthly_contribution=monthly_contribution,
        annual_rate_percent=annual_rate,
        years=years,
        income_bracket_id=bracket,
    )
    outcome = pipeline.run_simulation(raw, brackets=_load_brackets(brackets_file))
    for field, message in outcome.errors.items():
        typer.echo(f"{field}: {message}", err=True)

    if csv:
        csv.parent.mkdir(parents=True, exist_ok=True)
        outcome.result.to_frame().to_csv(csv, index=False)
        typer.echo(f"Series written to {csv}")
    if yearly:
        Console().print(_yearly_table(outcome.result))

    payload = _result_to_json(outcome.result, outcome.errors)
    if out:
        _save_json(out, payload)
        typer.echo(f"Simulation written to {out}")
    elif not yearly:
        typer.echo(json.dumps(payload, indent=2))


@app.command()
def recommend(
    bracket: str = typer.Option(..., help="Income bracket id"),
    brackets_file: Optional[Path] = typer.Option(None, help="JSON bracket table replacing the built-in one"),
):
    """Recommended monthly savings for an income bracket."""
    rec = recommendation.resolve_recommendation(bracket, _load_brackets(brackets_file))
    if rec.notice:
        typer.echo(rec.notice, err=True)
    typer.echo(
        json.dumps(
            {
                "recommended_monthly_amount": rec.recommended_monthly_amount,
                "percentage_of_income": rec.percentage_of_income,
            },
            indent=2,
        )
    )


@app.command()
def brackets(
    brackets_file: Optional[Path] = typer.Option(None, help="JSON bracket table replacing the built-in one"),
):
    """List the income brackets and their recommendations."""
    table = Table(title="Income brackets")
    table.add_column("Id")
    table.add_column("Label")
    table.add_column("Range", justify="right")
    table.add_column("Savings rate", justify="right")
    table.add_column("Recommended", justify="right", style="green")
    for item in _load_brackets(brackets_file):
        rec = recommendation.resolve_recommendation(item.id, (item,))
        table.add_row(
            item.id,
            item.label,
            f"{item.min_income:,.0f} - {item.max_income:,.0f}",
            f"{rec.percentage_of_income:g}%",
            f"{rec.recommended_monthly_amount:,.0f} €",
        )
    Console().print(table)


@app.command()
def interactive():
    """
    Interactive mode: answer a few questions, get totals and a yearly table.
    """
    console = Console()
    console.print("[bold cyan]Investment Simulator[/bold cyan]\n")

    console.print("Income brackets:")
    for idx, item in enumerate(INCOME_BRACKETS, start=1):
        console.print(f"  [green]{idx}[/green] {item.label}")
    choice = typer.prompt("Choose your monthly income bracket (1-5)", default="1")
    try:
        bracket_id = INCOME_BRACKETS[int(choice) - 1].id
    except (ValueError, IndexError):
        console.print("[yellow]Unknown choice, using the first bracket.[/yellow]")
        bracket_id = INCOME_BRACKETS[0].id

    raw = {
        "initial_capital": typer.prompt("Initial capital", default="0"),
        "monthly_contribution": typer.prompt("Monthly contribution", default="120"),
        "annual_rate_percent": typer.prompt("Annual rate (%)", default="3"),
        "years": typer.prompt("Duration (years)", default="3"),
        "income_bracket_id": bracket_id,
    }
    outcome = pipeline.run_simulation(raw)
    for message in outcome.errors.values():
        console.print(f"[yellow]{message}; adjusted.[/yellow]")

    result = outcome.result
    _print_summary(console, result)
    console.print(_yearly_table(result))

    rec = result.recommendation
    contribution = result.parameters.monthly_contribution
    console.print("\n[green]Tip:[/green]")
    if contribution >= rec.recommended_monthly_amount:
        console.print("Your monthly contribution meets the recommendation for your income bracket.")
    else:
        gap = rec.recommended_monthly_amount - contribution
        console.print(f"Adding about [bold]{gap:,.0f} €/month[/bold] would match the recommendation for your bracket.")
    console.print("\n[bold cyan]Done.[/bold cyan]\n")


if __name__ == "__main__":
    app()
