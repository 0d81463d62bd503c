"""Tax data provider protocol and the configuration records it returns."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Protocol, Union

from takehome.models.filing_status import FilingStatus
from takehome.models.jurisdiction import Jurisdiction
from takehome.taxes.brackets import TaxBracket


@dataclass(frozen=True, slots=True)
class NoTax:
    """Jurisdiction levies no tax on wages."""


@dataclass(frozen=True, slots=True)
class FlatRate:
    """Single rate applied to all taxable income."""

    rate: Decimal


@dataclass(frozen=True, slots=True)
class Progressive:
    """Bracketed schedule with an optional jurisdiction standard deduction.

    Both mappings are keyed by filing status; a missing key means an empty
    schedule or a zero deduction.
    """

    brackets: Mapping[FilingStatus, tuple[TaxBracket, ...]]
    standard_deduction: Mapping[FilingStatus, Decimal] | None = None


TaxType = Union[NoTax, FlatRate, Progressive]


@dataclass(frozen=True, slots=True)
class DisabilityInsurance:
    """Employee disability insurance premium, capped at ``wage_base`` when set."""

    rate: Decimal
    wage_base: Decimal | None = None


@dataclass(frozen=True, slots=True)
class JurisdictionConfig:
    """Everything the jurisdiction calculator needs for one jurisdiction and year."""

    tax_type: TaxType = field(default_factory=NoTax)
    disability_insurance: DisabilityInsurance | None = None
    local_tax_rate: Decimal | None = None


@dataclass(frozen=True, slots=True)
class PayrollTaxConfig:
    """Payroll (FICA) parameters for one year.

    Attributes:
        base_rate: Social Security rate, applied up to ``wage_base``.
        wage_base: Annual cap on wages subject to the base rate.
        supplemental_rate: Medicare rate, applied to all wages.
        surtax_rate: Additional Medicare rate above the filing-status threshold.
        surtax_thresholds: Thresholds by filing status. When ``None`` the
            payroll calculator's built-in thresholds apply.
    """

    base_rate: Decimal
    wage_base: Decimal
    supplemental_rate: Decimal
    surtax_rate: Decimal
    surtax_thresholds: Mapping[FilingStatus, Decimal] | None = None


class TaxDataProvider(Protocol):
    """Protocol for sources of tax tables.

    Implementations are read-only once constructed and may be shared across
    threads without locking.
    """

    def federal_brackets(self, filing_status: FilingStatus, year: int) -> Sequence[TaxBracket]:
        """Federal ordinary-income brackets for the filing status."""
        ...

    def standard_deduction(self, filing_status: FilingStatus, year: int) -> Decimal:
        """Federal standard deduction for the filing status."""
        ...

    def payroll_config(self, year: int) -> PayrollTaxConfig:
        """Payroll tax rates and caps for the year."""
        ...

    def jurisdiction_config(self, jurisdiction: Jurisdiction, year: int) -> JurisdictionConfig:
        """Jurisdiction tax rules. Unknown jurisdictions resolve to :class:`NoTax`."""
        ...
