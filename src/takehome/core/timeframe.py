"""Conversion of annual amounts to and from pay-period amounts."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

ZERO = Decimal("0")
WEEKS_PER_YEAR = Decimal("52")


class Timeframe(str, Enum):
    """A calendar period with a fixed number of occurrences per year.

    Daily assumes a 5-day week and hourly a 40-hour week.
    """

    ANNUAL = "annual"
    MONTHLY = "monthly"
    SEMI_MONTHLY = "semi_monthly"
    BI_WEEKLY = "bi_weekly"
    WEEKLY = "weekly"
    DAILY = "daily"
    HOURLY = "hourly"

    @property
    def periods_per_year(self) -> Decimal:
        return _PERIODS_PER_YEAR[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_PERIODS_PER_YEAR: dict[Timeframe, Decimal] = {
    Timeframe.ANNUAL: Decimal("1"),
    Timeframe.MONTHLY: Decimal("12"),
    Timeframe.SEMI_MONTHLY: Decimal("24"),
    Timeframe.BI_WEEKLY: Decimal("26"),
    Timeframe.WEEKLY: Decimal("52"),
    Timeframe.DAILY: Decimal("260"),
    Timeframe.HOURLY: Decimal("2080"),
}

_DISPLAY_NAMES: dict[Timeframe, str] = {
    Timeframe.ANNUAL: "Annual",
    Timeframe.MONTHLY: "Monthly",
    Timeframe.SEMI_MONTHLY: "Semi-Monthly",
    Timeframe.BI_WEEKLY: "Bi-Weekly",
    Timeframe.WEEKLY: "Weekly",
    Timeframe.DAILY: "Daily",
    Timeframe.HOURLY: "Hourly",
}


@dataclass(frozen=True, slots=True)
class TimeframeIncome:
    """One annual amount expressed per period.

    Attributes:
        annual: The annual amount.
        monthly: Annual / 12.
        semi_monthly: Annual / 24.
        bi_weekly: Annual / 26.
        weekly: Annual / 52.
        daily: Annual / working days per year.
        hourly: Annual / working hours per year.
    """

    annual: Decimal
    monthly: Decimal
    semi_monthly: Decimal
    bi_weekly: Decimal
    weekly: Decimal
    daily: Decimal
    hourly: Decimal

    @classmethod
    def from_annual(cls, annual: Decimal) -> TimeframeIncome:
        """Split an annual amount assuming a 40-hour, 5-day week."""
        return cls(
            annual=annual,
            monthly=annual / Timeframe.MONTHLY.periods_per_year,
            semi_monthly=annual / Timeframe.SEMI_MONTHLY.periods_per_year,
            bi_weekly=annual / Timeframe.BI_WEEKLY.periods_per_year,
            weekly=annual / Timeframe.WEEKLY.periods_per_year,
            daily=annual / Timeframe.DAILY.periods_per_year,
            hourly=annual / Timeframe.HOURLY.periods_per_year,
        )

    @classmethod
    def from_annual_custom(
        cls,
        annual: Decimal,
        hours_per_week: Decimal,
        days_per_week: Decimal,
    ) -> TimeframeIncome:
        """Split an annual amount for a non-standard working week.

        A non-positive ``hours_per_week`` or ``days_per_week`` gives a zero
        hourly or daily figure.
        """
        standard = cls.from_annual(annual)
        daily = annual / (WEEKS_PER_YEAR * days_per_week) if days_per_week > 0 else ZERO
        hourly = annual / (WEEKS_PER_YEAR * hours_per_week) if hours_per_week > 0 else ZERO
        return cls(
            annual=annual,
            monthly=standard.monthly,
            semi_monthly=standard.semi_monthly,
            bi_weekly=standard.bi_weekly,
            weekly=standard.weekly,
            daily=daily,
            hourly=hourly,
        )

    def get(self, timeframe: Timeframe) -> Decimal:
        return getattr(self, timeframe.value)


class TimeframeConverter:
    """Stateless period conversions routed through the annual amount."""

    @staticmethod
    def from_annual(annual: Decimal) -> TimeframeIncome:
        return TimeframeIncome.from_annual(annual)

    @staticmethod
    def from_annual_custom(
        annual: Decimal, hours_per_week: Decimal, days_per_week: Decimal
    ) -> TimeframeIncome:
        return TimeframeIncome.from_annual_custom(annual, hours_per_week, days_per_week)

    @staticmethod
    def to_annual(amount: Decimal, timeframe: Timeframe) -> Decimal:
        return amount * timeframe.periods_per_year

    @staticmethod
    def convert(amount: Decimal, from_timeframe: Timeframe, to_timeframe: Timeframe) -> Decimal:
        """Convert a per-period amount to another period via its annual total."""
        annual = TimeframeConverter.to_annual(amount, from_timeframe)
        return annual / to_timeframe.periods_per_year

    @staticmethod
    def hours_to_earn(hourly_rate: Decimal, target: Decimal) -> Decimal:
        if hourly_rate <= 0:
            return ZERO
        return target / hourly_rate

    @staticmethod
    def days_to_earn(daily_rate: Decimal, target: Decimal) -> Decimal:
        if daily_rate <= 0:
            return ZERO
        return target / daily_rate
