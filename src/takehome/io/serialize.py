"""Conversion between raw text / JSON and the calculation types.

Everything crossing this boundary is text: amounts are decimal strings so
that no value ever passes through binary floating point. Parse failures
raise a named :class:`~takehome.utils.exceptions.InputError` carrying the
offending text.
"""

from __future__ import annotations

import json
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from takehome.config.schema import CalculationInput
from takehome.core.engine import CalculationResult, ScenarioComparison
from takehome.core.timeframe import TimeframeIncome
from takehome.models.filing_status import FilingStatus
from takehome.models.household import HouseholdSplit, SplitMethod
from takehome.models.jurisdiction import Jurisdiction
from takehome.utils.exceptions import (
    ConfigError,
    InvalidDecimalError,
    InvalidFilingStatusError,
    InvalidJurisdictionError,
    InvalidSplitMethodError,
)

CENT = Decimal("0.01")

_INPUT_AMOUNT_FIELDS = (
    "gross_income",
    "pre_tax_deductions",
    "post_tax_deductions",
    "traditional_retirement",
    "roth_retirement",
)


def round_cents(value: Decimal) -> Decimal:
    """Round to the nearest cent, halves away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def parse_decimal(text: str) -> Decimal:
    """Parse a finite decimal amount such as ``"85000"`` or ``"1234.56"``."""
    try:
        value = Decimal(str(text).strip())
    except InvalidOperation as exc:
        raise InvalidDecimalError(str(text)) from exc
    if not value.is_finite():
        raise InvalidDecimalError(str(text))
    return value


def parse_filing_status(text: str) -> FilingStatus:
    """Parse an exact filing status value such as ``"married_filing_jointly"``."""
    try:
        return FilingStatus(text)
    except ValueError as exc:
        raise InvalidFilingStatusError(text) from exc


def parse_jurisdiction(code: str) -> Jurisdiction:
    jurisdiction = Jurisdiction.from_code(code)
    if jurisdiction is None:
        raise InvalidJurisdictionError(code)
    return jurisdiction


def parse_split_method(text: str) -> tuple[SplitMethod, Decimal | None]:
    """Parse ``proportional``, ``equal`` or ``custom:<primary ratio>``.

    Returns:
        The method and, for custom splits, the primary partner's ratio.
    """
    name, _, ratio_text = text.partition(":")
    if name == SplitMethod.CUSTOM.value and ratio_text:
        try:
            ratio = parse_decimal(ratio_text)
        except InvalidDecimalError as exc:
            raise InvalidSplitMethodError(text) from exc
        if not Decimal("0") <= ratio <= Decimal("1"):
            raise InvalidSplitMethodError(text)
        return SplitMethod.CUSTOM, ratio
    if not ratio_text and name in (SplitMethod.PROPORTIONAL.value, SplitMethod.EQUAL.value):
        return SplitMethod(name), None
    raise InvalidSplitMethodError(text)


def parse_input(
    gross_income: str,
    filing_status: str = FilingStatus.SINGLE.value,
    jurisdiction: str = Jurisdiction.CALIFORNIA.value,
    pre_tax_deductions: str = "0",
    post_tax_deductions: str = "0",
    traditional_retirement: str = "0",
    roth_retirement: str = "0",
) -> CalculationInput:
    """Build a validated input from text fields."""
    return CalculationInput(
        gross_income=parse_decimal(gross_income),
        filing_status=parse_filing_status(filing_status),
        jurisdiction=parse_jurisdiction(jurisdiction),
        pre_tax_deductions=parse_decimal(pre_tax_deductions),
        post_tax_deductions=parse_decimal(post_tax_deductions),
        traditional_retirement=parse_decimal(traditional_retirement),
        roth_retirement=parse_decimal(roth_retirement),
    )


def dump_input(inp: CalculationInput) -> str:
    """Serialize an input to JSON with decimal strings."""
    return json.dumps(inp.model_dump(mode="json"), indent=2)


def load_input(json_str: str) -> CalculationInput:
    """Deserialize an input from JSON.

    Amounts may be given as strings or numbers; omitted fields take their
    defaults.
    """
    data: dict[str, Any] = json.loads(json_str, parse_float=Decimal)
    fields = {k: str(data[k]) for k in _INPUT_AMOUNT_FIELDS if k in data}
    if "filing_status" in data:
        fields["filing_status"] = str(data["filing_status"])
    if "jurisdiction" in data:
        fields["jurisdiction"] = str(data["jurisdiction"])
    unknown = set(data) - set(_INPUT_AMOUNT_FIELDS) - {"filing_status", "jurisdiction"}
    if unknown:
        raise ConfigError(f"unknown input fields: {sorted(unknown)}")
    fields.setdefault("gross_income", "0")
    return parse_input(**fields)


def timeframes_to_dict(timeframes: TimeframeIncome) -> dict[str, str]:
    return {
        "annual": str(timeframes.annual),
        "monthly": str(timeframes.monthly),
        "semi_monthly": str(timeframes.semi_monthly),
        "bi_weekly": str(timeframes.bi_weekly),
        "weekly": str(timeframes.weekly),
        "daily": str(timeframes.daily),
        "hourly": str(timeframes.hourly),
    }


def result_to_dict(result: CalculationResult) -> dict[str, str]:
    """Flatten a result to string fields, rounded to the cent."""
    taxes = result.tax_breakdown
    rates = result.effective_rates
    return {
        "tax_year": str(result.tax_year),
        "filing_status": result.input.filing_status.value,
        "jurisdiction": taxes.jurisdiction.code,
        "gross_income": str(round_cents(result.income.gross)),
        "federal_taxable_income": str(round_cents(taxes.federal.taxable_income)),
        "federal_tax": str(round_cents(taxes.federal.tax)),
        "federal_marginal_rate": str(taxes.federal.marginal_rate),
        "jurisdiction_taxable_income": str(round_cents(taxes.jurisdiction.taxable_income)),
        "jurisdiction_income_tax": str(round_cents(taxes.jurisdiction.income_tax)),
        "jurisdiction_disability_tax": str(round_cents(taxes.jurisdiction.disability_tax)),
        "jurisdiction_local_tax": str(round_cents(taxes.jurisdiction.local_tax)),
        "jurisdiction_tax": str(round_cents(taxes.jurisdiction.total_tax)),
        "social_security": str(round_cents(taxes.payroll.base_tax)),
        "medicare": str(round_cents(taxes.payroll.supplemental_tax)),
        "additional_medicare": str(round_cents(taxes.payroll.surtax)),
        "payroll_tax": str(round_cents(taxes.payroll.total)),
        "total_taxes": str(round_cents(taxes.total_taxes)),
        "net_income": str(round_cents(result.income.net)),
        "monthly_net": str(round_cents(result.income.timeframes.monthly)),
        "bi_weekly_net": str(round_cents(result.income.timeframes.bi_weekly)),
        "hourly_net": str(round_cents(result.income.timeframes.hourly)),
        "take_home_percentage": str(round_cents(result.income.take_home_percentage)),
        "effective_federal_rate": str(round_cents(rates.federal_percent)),
        "effective_jurisdiction_rate": str(round_cents(rates.jurisdiction_percent)),
        "effective_payroll_rate": str(round_cents(rates.payroll_percent)),
        "effective_total_rate": str(round_cents(rates.total_percent)),
    }


def comparison_to_dict(comparison: ScenarioComparison) -> dict[str, str]:
    return {
        "base_net": str(round_cents(comparison.base.income.net)),
        "scenario_net": str(round_cents(comparison.scenario.income.net)),
        "net_difference": str(round_cents(comparison.net_difference)),
        "monthly_difference": str(round_cents(comparison.monthly_difference)),
        "net_difference_percent": str(round_cents(comparison.net_difference_percent)),
        "is_positive": "true" if comparison.is_positive else "false",
    }


def split_to_dict(split: HouseholdSplit) -> dict[str, str]:
    return {
        "primary_ratio": str(split.primary_ratio),
        "partner_ratio": str(split.partner_ratio),
        "primary_monthly": str(round_cents(split.primary_monthly)),
        "partner_monthly": str(round_cents(split.partner_monthly)),
        "total_monthly": str(round_cents(split.total_monthly)),
    }


def dump_result(result: CalculationResult) -> str:
    """Serialize a result summary to JSON."""
    return json.dumps(result_to_dict(result), indent=2)


def dump_comparison(comparison: ScenarioComparison) -> str:
    data = {
        "base": result_to_dict(comparison.base),
        "scenario": result_to_dict(comparison.scenario),
        "comparison": comparison_to_dict(comparison),
    }
    return json.dumps(data, indent=2)


def all_jurisdiction_codes() -> list[str]:
    return [j.code for j in Jurisdiction]


def all_filing_statuses() -> list[str]:
    return [s.value for s in FilingStatus]


def jurisdiction_has_no_income_tax(code: str) -> bool:
    """True for a known code with no wage income tax; False for unknown codes."""
    jurisdiction = Jurisdiction.from_code(code)
    return jurisdiction is not None and jurisdiction.no_income_tax
