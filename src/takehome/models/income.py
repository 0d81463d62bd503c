"""Income sources, pay frequency and calculated take-home income."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from takehome.core.timeframe import TimeframeIncome


class PayFrequency(str, Enum):
    """How often the employer runs payroll."""

    WEEKLY = "weekly"
    BI_WEEKLY = "bi_weekly"
    SEMI_MONTHLY = "semi_monthly"
    MONTHLY = "monthly"

    @property
    def periods_per_year(self) -> Decimal:
        return {
            PayFrequency.WEEKLY: Decimal("52"),
            PayFrequency.BI_WEEKLY: Decimal("26"),
            PayFrequency.SEMI_MONTHLY: Decimal("24"),
            PayFrequency.MONTHLY: Decimal("12"),
        }[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", "-").title()


@dataclass(frozen=True, slots=True)
class IncomeInput:
    """Annual income from all sources."""

    salary: Decimal = Decimal("0")
    bonuses: Decimal = Decimal("0")
    other_income: Decimal = Decimal("0")
    pay_frequency: PayFrequency = PayFrequency.BI_WEEKLY

    @property
    def total_gross(self) -> Decimal:
        return self.salary + self.bonuses + self.other_income

    def per_paycheck(self, annual: Decimal | None = None) -> Decimal:
        """Split an annual amount (gross by default) across paychecks."""
        if annual is None:
            annual = self.total_gross
        return annual / self.pay_frequency.periods_per_year


@dataclass(frozen=True, slots=True)
class CalculatedIncome:
    """Gross and net income with the net broken out by period.

    Attributes:
        gross: Annual gross income.
        net: Annual take-home income after taxes and all deductions.
        timeframes: ``net`` expressed per period.
        take_home_percentage: Net as a percentage of gross (0 when gross <= 0).
    """

    gross: Decimal
    net: Decimal
    timeframes: TimeframeIncome
    take_home_percentage: Decimal
