"""Pydantic v2 configuration models for takehome."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from takehome.models.filing_status import FilingStatus
from takehome.models.jurisdiction import Jurisdiction


class CalculationInput(BaseModel):
    """One taxpayer's annual figures. All money amounts are in dollars."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    gross_income: Decimal = Field(default=Decimal("0"), description="Annual gross income")
    filing_status: FilingStatus = FilingStatus.SINGLE
    jurisdiction: Jurisdiction = Jurisdiction.CALIFORNIA
    pre_tax_deductions: Decimal = Field(
        default=Decimal("0"),
        description="Health, HSA, FSA and other deductions taken before income tax",
    )
    post_tax_deductions: Decimal = Field(
        default=Decimal("0"), description="Deductions taken from after-tax pay"
    )
    traditional_retirement: Decimal = Field(
        default=Decimal("0"), description="Pre-tax (traditional 401k) contributions"
    )
    roth_retirement: Decimal = Field(
        default=Decimal("0"), description="After-tax (Roth 401k) contributions"
    )


class TaxDataConfig(BaseModel):
    """Where the tax tables come from."""

    model_config = ConfigDict(extra="forbid")

    tax_year: int = Field(default=2024, ge=2000, le=2100)
    tables_dir: Path | None = Field(
        default=None,
        description="Directory of YAML tables overriding the packaged ones",
    )
