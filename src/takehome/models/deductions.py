"""Payroll deductions and retirement contributions.

Itemized deductions are collapsed into the four totals the engine consumes
with :func:`summarize_deductions` and :func:`apply_deductions`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from takehome.config.schema import CalculationInput
from takehome.models.income import PayFrequency

ZERO = Decimal("0")


class DeductionType(str, Enum):
    HEALTH_INSURANCE = "health_insurance"
    DENTAL_INSURANCE = "dental_insurance"
    VISION_INSURANCE = "vision_insurance"
    HSA = "hsa"
    FSA = "fsa"
    COMMUTER = "commuter"
    LIFE_INSURANCE = "life_insurance"
    DISABILITY_INSURANCE = "disability_insurance"
    UNION_DUES = "union_dues"
    TRADITIONAL_401K = "traditional_401k"
    ROTH_401K = "roth_401k"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _DEDUCTION_NAMES[self]

    @property
    def is_pre_tax(self) -> bool:
        """Whether the deduction comes out before income tax."""
        return self in _PRE_TAX


_DEDUCTION_NAMES: dict[DeductionType, str] = {
    DeductionType.HEALTH_INSURANCE: "Health Insurance",
    DeductionType.DENTAL_INSURANCE: "Dental Insurance",
    DeductionType.VISION_INSURANCE: "Vision Insurance",
    DeductionType.HSA: "HSA",
    DeductionType.FSA: "FSA",
    DeductionType.COMMUTER: "Commuter Benefits",
    DeductionType.LIFE_INSURANCE: "Life Insurance",
    DeductionType.DISABILITY_INSURANCE: "Disability Insurance",
    DeductionType.UNION_DUES: "Union Dues",
    DeductionType.TRADITIONAL_401K: "Traditional 401(k)",
    DeductionType.ROTH_401K: "Roth 401(k)",
    DeductionType.OTHER: "Other",
}

_PRE_TAX = frozenset(
    {
        DeductionType.HEALTH_INSURANCE,
        DeductionType.DENTAL_INSURANCE,
        DeductionType.VISION_INSURANCE,
        DeductionType.HSA,
        DeductionType.FSA,
        DeductionType.COMMUTER,
        DeductionType.TRADITIONAL_401K,
    }
)


class DeductionFrequency(str, Enum):
    PER_PAYCHECK = "per_paycheck"
    MONTHLY = "monthly"
    ANNUAL = "annual"


@dataclass(frozen=True, slots=True)
class Deduction:
    """A single recurring deduction as it appears on a pay stub."""

    deduction_type: DeductionType
    amount: Decimal
    frequency: DeductionFrequency = DeductionFrequency.PER_PAYCHECK
    name: str = ""

    def annual_amount(self, pay_frequency: PayFrequency = PayFrequency.BI_WEEKLY) -> Decimal:
        if self.frequency is DeductionFrequency.PER_PAYCHECK:
            return self.amount * pay_frequency.periods_per_year
        if self.frequency is DeductionFrequency.MONTHLY:
            return self.amount * 12
        return self.amount

    @property
    def label(self) -> str:
        return self.name or self.deduction_type.display_name


@dataclass(frozen=True, slots=True)
class RetirementContributions:
    """Annual employee and employer retirement contributions.

    Attributes:
        traditional: Employee pre-tax contributions.
        roth: Employee after-tax contributions.
        employer_match: Employer match before vesting.
        vesting_percentage: Fraction of the match that is vested (0-1).
    """

    traditional: Decimal = ZERO
    roth: Decimal = ZERO
    employer_match: Decimal = ZERO
    vesting_percentage: Decimal = Decimal("1")

    @property
    def total_employee_contributions(self) -> Decimal:
        return self.traditional + self.roth

    @property
    def vested_employer_match(self) -> Decimal:
        return self.employer_match * self.vesting_percentage

    @property
    def total_with_match(self) -> Decimal:
        return self.total_employee_contributions + self.vested_employer_match


@dataclass(frozen=True, slots=True)
class DeductionsSummary:
    """Annual deduction totals split the way the engine taxes them."""

    pre_tax: Decimal = ZERO
    post_tax: Decimal = ZERO
    retirement: RetirementContributions = field(default_factory=RetirementContributions)

    @property
    def total(self) -> Decimal:
        return self.pre_tax + self.post_tax + self.retirement.total_employee_contributions


def summarize_deductions(
    deductions: Iterable[Deduction],
    pay_frequency: PayFrequency = PayFrequency.BI_WEEKLY,
    employer_match: Decimal = ZERO,
    vesting_percentage: Decimal = Decimal("1"),
) -> DeductionsSummary:
    """Annualize itemized deductions and bucket them.

    401(k) deductions become retirement contributions; everything else is
    pre-tax or post-tax according to its type.
    """
    pre_tax = ZERO
    post_tax = ZERO
    traditional = ZERO
    roth = ZERO
    for deduction in deductions:
        annual = deduction.annual_amount(pay_frequency)
        if deduction.deduction_type is DeductionType.TRADITIONAL_401K:
            traditional += annual
        elif deduction.deduction_type is DeductionType.ROTH_401K:
            roth += annual
        elif deduction.deduction_type.is_pre_tax:
            pre_tax += annual
        else:
            post_tax += annual
    return DeductionsSummary(
        pre_tax=pre_tax,
        post_tax=post_tax,
        retirement=RetirementContributions(
            traditional=traditional,
            roth=roth,
            employer_match=employer_match,
            vesting_percentage=vesting_percentage,
        ),
    )


def apply_deductions(inp: CalculationInput, summary: DeductionsSummary) -> CalculationInput:
    """Return a copy of ``inp`` whose deduction fields come from ``summary``."""
    return inp.model_copy(
        update={
            "pre_tax_deductions": summary.pre_tax,
            "post_tax_deductions": summary.post_tax,
            "traditional_retirement": summary.retirement.traditional,
            "roth_retirement": summary.retirement.roth,
        }
    )
