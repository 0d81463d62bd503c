"""Default configuration values and scenario templates for takehome."""

from __future__ import annotations

from decimal import Decimal

from takehome.config.schema import CalculationInput, TaxDataConfig
from takehome.models.filing_status import FilingStatus
from takehome.models.jurisdiction import Jurisdiction

DEFAULT_TAX_YEAR = 2024

# 2024 employee elective deferral limit for 401(k) plans.
RETIREMENT_DEFERRAL_LIMIT = Decimal("23000")


def default_input() -> CalculationInput:
    """Single filer in California with no income."""
    return CalculationInput(
        gross_income=Decimal("0"),
        filing_status=FilingStatus.SINGLE,
        jurisdiction=Jurisdiction.CALIFORNIA,
    )


def default_data_config() -> TaxDataConfig:
    return TaxDataConfig(tax_year=DEFAULT_TAX_YEAR)


def sample_input() -> CalculationInput:
    """A $100k single filer in California with typical deductions."""
    return CalculationInput(
        gross_income=Decimal("100000"),
        filing_status=FilingStatus.SINGLE,
        jurisdiction=Jurisdiction.CALIFORNIA,
        pre_tax_deductions=Decimal("3000"),
        traditional_retirement=Decimal("6000"),
    )


def raise_scenario(base: CalculationInput, amount: Decimal) -> CalculationInput:
    """Same taxpayer with ``amount`` added to gross income."""
    return base.model_copy(update={"gross_income": base.gross_income + amount})


def relocation_scenario(base: CalculationInput, jurisdiction: Jurisdiction) -> CalculationInput:
    """Same taxpayer living in ``jurisdiction``."""
    return base.model_copy(update={"jurisdiction": jurisdiction})


def max_retirement_scenario(
    base: CalculationInput,
    amount: Decimal = RETIREMENT_DEFERRAL_LIMIT,
) -> CalculationInput:
    """Same taxpayer deferring ``amount`` to a traditional 401(k)."""
    return base.model_copy(update={"traditional_retirement": amount})
