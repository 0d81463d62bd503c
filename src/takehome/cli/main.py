"""CLI entry point for takehome."""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from pathlib import Path
from typing import Any

import click

from takehome.analytics.jurisdictions import rank_jurisdictions
from takehome.config.defaults import DEFAULT_TAX_YEAR, default_input
from takehome.config.schema import CalculationInput
from takehome.core.engine import CalculationResult, TaxCalculationEngine
from takehome.core.timeframe import TimeframeIncome
from takehome.io.serialize import (
    dump_comparison,
    dump_result,
    load_input,
    parse_decimal,
    parse_input,
    parse_split_method,
    round_cents,
)
from takehome.models.filing_status import FilingStatus
from takehome.models.household import calculate_split
from takehome.models.jurisdiction import Jurisdiction
from takehome.taxes.embedded import EmbeddedTaxData
from takehome.utils.exceptions import TakeHomeError

_FILING_STATUSES = [s.value for s in FilingStatus]


class DecimalType(click.ParamType):
    """Click parameter parsed straight to Decimal."""

    name = "decimal"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            return parse_decimal(value)
        except TakeHomeError as exc:
            self.fail(str(exc), param, ctx)


DECIMAL = DecimalType()

tables_dir_option = click.option(
    "--tables-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory with alternative YAML tax tables.",
)


def _money(value: Decimal) -> str:
    return f"${round_cents(value):,}"


def _percent(value: Decimal) -> str:
    return f"{round_cents(value)}%"


def _engine(year: int, tables_dir: Path | None) -> TaxCalculationEngine:
    try:
        provider = EmbeddedTaxData(tax_year=year, tables_dir=tables_dir)
    except TakeHomeError as exc:
        raise click.ClickException(str(exc)) from exc
    return TaxCalculationEngine(provider, year)


def _read_input(path: Path) -> CalculationInput:
    try:
        return load_input(path.read_text())
    except (TakeHomeError, ValueError) as exc:
        raise click.ClickException(f"{path}: {exc}") from exc


def _echo_result(result: CalculationResult) -> None:
    taxes = result.tax_breakdown
    inp = result.input
    click.echo(
        f"{inp.filing_status.display_name} filer in {inp.jurisdiction.display_name}, "
        f"tax year {result.tax_year}"
    )
    click.echo(f"  Gross income:       {_money(result.income.gross)}")
    marginal = _percent(taxes.federal.marginal_rate * 100)
    click.echo(f"  Federal tax:        {_money(taxes.federal.tax)}  (marginal {marginal})")
    click.echo(f"  Jurisdiction tax:   {_money(taxes.jurisdiction.total_tax)}")
    if taxes.jurisdiction.disability_tax:
        click.echo(f"    disability:       {_money(taxes.jurisdiction.disability_tax)}")
    if taxes.jurisdiction.local_tax:
        click.echo(f"    local (est.):     {_money(taxes.jurisdiction.local_tax)}")
    click.echo(f"  Payroll tax:        {_money(taxes.payroll.total)}")
    effective = _percent(result.effective_rates.total_percent)
    click.echo(f"  Total taxes:        {_money(taxes.total_taxes)}  (effective {effective})")
    click.echo(
        f"\nTake-home pay: {_money(result.income.net)}"
        f" ({_percent(result.income.take_home_percentage)} of gross)"
    )
    _echo_timeframes(result.income.timeframes)


def _echo_timeframes(timeframes: TimeframeIncome) -> None:
    click.echo(f"  Monthly:      {_money(timeframes.monthly)}")
    click.echo(f"  Semi-monthly: {_money(timeframes.semi_monthly)}")
    click.echo(f"  Bi-weekly:    {_money(timeframes.bi_weekly)}")
    click.echo(f"  Weekly:       {_money(timeframes.weekly)}")
    click.echo(f"  Daily:        {_money(timeframes.daily)}")
    click.echo(f"  Hourly:       {_money(timeframes.hourly)}")


@click.group()
@click.version_option(package_name="takehome")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """takehome: take-home pay after federal, state and payroll taxes."""
    level_name = "DEBUG" if verbose else os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to JSON input file. Other options override its fields.",
)
@click.option("--gross", type=DECIMAL, default=None, help="Annual gross income.")
@click.option(
    "--filing-status",
    type=click.Choice(_FILING_STATUSES),
    default=None,
    help="Filing status.",
)
@click.option("--state", "state_code", default=None, help="Two-letter jurisdiction code.")
@click.option("--pre-tax", type=DECIMAL, default=None, help="Annual pre-tax deductions.")
@click.option("--post-tax", type=DECIMAL, default=None, help="Annual post-tax deductions.")
@click.option("--traditional", type=DECIMAL, default=None, help="Traditional 401(k) contributions.")
@click.option("--roth", type=DECIMAL, default=None, help="Roth 401(k) contributions.")
@click.option("--year", default=DEFAULT_TAX_YEAR, type=int, help="Tax year.")
@tables_dir_option
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write results JSON.",
)
def calculate(
    config_path: Path | None,
    gross: Decimal | None,
    filing_status: str | None,
    state_code: str | None,
    pre_tax: Decimal | None,
    post_tax: Decimal | None,
    traditional: Decimal | None,
    roth: Decimal | None,
    year: int,
    tables_dir: Path | None,
    output_path: Path | None,
) -> None:
    """Calculate take-home pay for one taxpayer."""
    inp = _read_input(config_path) if config_path is not None else default_input()

    updates: dict[str, Any] = {}
    if gross is not None:
        updates["gross_income"] = gross
    if filing_status is not None:
        updates["filing_status"] = FilingStatus(filing_status)
    if state_code is not None:
        jurisdiction = Jurisdiction.from_code(state_code)
        if jurisdiction is None:
            raise click.BadParameter(f"unknown jurisdiction {state_code!r}", param_hint="--state")
        updates["jurisdiction"] = jurisdiction
    if pre_tax is not None:
        updates["pre_tax_deductions"] = pre_tax
    if post_tax is not None:
        updates["post_tax_deductions"] = post_tax
    if traditional is not None:
        updates["traditional_retirement"] = traditional
    if roth is not None:
        updates["roth_retirement"] = roth
    if updates:
        inp = inp.model_copy(update=updates)

    result = _engine(year, tables_dir).calculate(inp)
    _echo_result(result)

    if output_path is not None:
        output_path.write_text(dump_result(result))
        click.echo(f"\nResults written to {output_path}")


@cli.command()
@click.argument("base_path", type=click.Path(exists=True, path_type=Path))
@click.argument("scenario_path", type=click.Path(exists=True, path_type=Path))
@click.option("--year", default=DEFAULT_TAX_YEAR, type=int, help="Tax year.")
@tables_dir_option
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write comparison JSON.",
)
def compare(
    base_path: Path,
    scenario_path: Path,
    year: int,
    tables_dir: Path | None,
    output_path: Path | None,
) -> None:
    """Compare take-home pay between two JSON input files."""
    base = _read_input(base_path)
    scenario = _read_input(scenario_path)
    comparison = _engine(year, tables_dir).compare_scenarios(base, scenario)

    click.echo(f"Base net:     {_money(comparison.base.income.net)}")
    click.echo(f"Scenario net: {_money(comparison.scenario.income.net)}")
    sign = "+" if comparison.is_positive else ""
    click.echo(
        f"Difference:   {sign}{_money(comparison.net_difference)} per year, "
        f"{sign}{_money(comparison.monthly_difference)} per month "
        f"({sign}{_percent(comparison.net_difference_percent)})"
    )

    if output_path is not None:
        output_path.write_text(dump_comparison(comparison))
        click.echo(f"\nComparison written to {output_path}")


@cli.command()
@click.argument("amount", type=DECIMAL)
@click.option("--hours-per-week", type=DECIMAL, default=None, help="Hours worked per week.")
@click.option("--days-per-week", type=DECIMAL, default=None, help="Days worked per week.")
def timeframes(
    amount: Decimal,
    hours_per_week: Decimal | None,
    days_per_week: Decimal | None,
) -> None:
    """Break an annual AMOUNT down by pay period."""
    if hours_per_week is None and days_per_week is None:
        breakdown = TimeframeIncome.from_annual(amount)
    else:
        breakdown = TimeframeIncome.from_annual_custom(
            amount,
            hours_per_week if hours_per_week is not None else Decimal("40"),
            days_per_week if days_per_week is not None else Decimal("5"),
        )
    click.echo(f"  Annual:       {_money(breakdown.annual)}")
    _echo_timeframes(breakdown)


@cli.command()
@click.argument("primary_net", type=DECIMAL)
@click.argument("partner_net", type=DECIMAL)
@click.argument("expense", type=DECIMAL)
@click.option(
    "--method",
    default="proportional",
    help="proportional, equal, or custom:<primary ratio> (e.g. custom:0.6).",
)
def split(primary_net: Decimal, partner_net: Decimal, expense: Decimal, method: str) -> None:
    """Split a monthly shared EXPENSE between two partners."""
    try:
        split_method, ratio = parse_split_method(method)
    except TakeHomeError as exc:
        raise click.BadParameter(str(exc), param_hint="--method") from exc
    result = calculate_split(primary_net, partner_net, expense, split_method, ratio)
    click.echo(f"Primary: {_money(result.primary_monthly)} ({_percent(result.primary_percent)})")
    click.echo(f"Partner: {_money(result.partner_monthly)} ({_percent(result.partner_percent)})")


@cli.command()
def jurisdictions() -> None:
    """List supported jurisdictions and their tax features."""
    for j in Jurisdiction:
        features = []
        if j.no_income_tax:
            features.append("no income tax")
        elif j.flat_tax:
            features.append("flat tax")
        else:
            features.append("progressive")
        if j.disability_insurance:
            features.append("SDI")
        if j.local_tax:
            features.append("local tax")
        click.echo(f"{j.code}  {j.display_name:<16} {', '.join(features)}")


@cli.command()
@click.option("--gross", type=DECIMAL, required=True, help="Annual gross income.")
@click.option(
    "--filing-status",
    type=click.Choice(_FILING_STATUSES),
    default=FilingStatus.SINGLE.value,
    help="Filing status.",
)
@click.option("--state", "state_code", default="CA", help="Home jurisdiction to compare against.")
@click.option("--top", default=10, type=int, help="Number of jurisdictions to show.")
@click.option("--year", default=DEFAULT_TAX_YEAR, type=int, help="Tax year.")
@tables_dir_option
@click.option("--workers", default=None, type=int, help="Worker threads (1 = sequential).")
def rank(
    gross: Decimal,
    filing_status: str,
    state_code: str,
    top: int,
    year: int,
    tables_dir: Path | None,
    workers: int | None,
) -> None:
    """Rank jurisdictions by take-home pay for the same income."""
    try:
        inp = parse_input(str(gross), filing_status, state_code)
    except TakeHomeError as exc:
        raise click.ClickException(str(exc)) from exc
    engine = _engine(year, tables_dir)
    ranking = rank_jurisdictions(inp, engine.provider, year, max_workers=workers)

    click.echo(f"Home: {ranking.home.display_name}, net {_money(ranking.home_net_income)}")
    for i, row in enumerate(ranking.rows[:top], start=1):
        sign = "+" if row.difference > 0 else ""
        click.echo(
            f"{i:>3}. {row.jurisdiction.code}  {_money(row.net_income):>14}  "
            f"({sign}{_money(row.difference)})"
        )


if __name__ == "__main__":
    cli()
