"""Two-person household and shared expense splitting."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

ZERO = Decimal("0")
HALF = Decimal("0.5")
ONE = Decimal("1")
HUNDRED = Decimal("100")


class SplitMethod(str, Enum):
    """How a shared expense is divided between partners.

    PROPORTIONAL splits by each partner's share of combined net income,
    EQUAL splits 50/50 and CUSTOM uses a fixed primary ratio.
    """

    PROPORTIONAL = "proportional"
    EQUAL = "equal"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class PartnerProfile:
    name: str
    gross_income: Decimal = ZERO
    net_income: Decimal = ZERO


@dataclass(frozen=True, slots=True)
class Household:
    partner: PartnerProfile | None = None
    split_method: SplitMethod = SplitMethod.PROPORTIONAL
    custom_ratio: Decimal | None = None
    shared_expenses_monthly: Decimal = ZERO


@dataclass(frozen=True, slots=True)
class HouseholdSplit:
    """Each partner's share of a monthly shared expense."""

    primary_ratio: Decimal
    partner_ratio: Decimal
    primary_monthly: Decimal
    partner_monthly: Decimal
    total_monthly: Decimal

    @property
    def primary_percent(self) -> Decimal:
        return self.primary_ratio * HUNDRED

    @property
    def partner_percent(self) -> Decimal:
        return self.partner_ratio * HUNDRED


def calculate_split(
    primary_net: Decimal,
    partner_net: Decimal,
    shared_expense: Decimal,
    method: SplitMethod = SplitMethod.PROPORTIONAL,
    custom_ratio: Decimal | None = None,
) -> HouseholdSplit:
    """Divide ``shared_expense`` between two partners.

    Args:
        primary_net: Primary earner's net income.
        partner_net: Partner's net income, in the same period as ``primary_net``.
        shared_expense: Monthly expense to split.
        method: Split method.
        custom_ratio: Primary partner's share (0-1) for ``SplitMethod.CUSTOM``.

    Returns:
        HouseholdSplit. A proportional split of a non-positive combined
        income falls back to 50/50.

    Raises:
        ValueError: If a custom split has no ratio or one outside 0-1.
    """
    if method is SplitMethod.PROPORTIONAL:
        combined = primary_net + partner_net
        primary_ratio = primary_net / combined if combined > 0 else HALF
    elif method is SplitMethod.EQUAL:
        primary_ratio = HALF
    else:
        if custom_ratio is None or not ZERO <= custom_ratio <= ONE:
            raise ValueError(f"custom split needs a ratio between 0 and 1, got {custom_ratio}")
        primary_ratio = custom_ratio

    partner_ratio = ONE - primary_ratio
    return HouseholdSplit(
        primary_ratio=primary_ratio,
        partner_ratio=partner_ratio,
        primary_monthly=shared_expense * primary_ratio,
        partner_monthly=shared_expense * partner_ratio,
        total_monthly=shared_expense,
    )


def split_household(primary_net: Decimal, household: Household) -> HouseholdSplit:
    """Split a household's shared expenses using its configured method."""
    partner_net = household.partner.net_income if household.partner is not None else ZERO
    return calculate_split(
        primary_net,
        partner_net,
        household.shared_expenses_monthly,
        household.split_method,
        household.custom_ratio,
    )
