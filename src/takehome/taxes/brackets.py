"""Progressive bracket evaluation shared by the federal and jurisdiction calculators.

A bracket schedule is a list of :class:`TaxBracket` sorted by floor, where
each bracket's ceiling is the next bracket's floor and only the last bracket
may be unbounded. Every bracket carries ``base_tax``, the cumulative tax owed
on all income below its floor, so the tax for any income can be read off in
closed form from the single bracket containing it. The per-bracket breakdown
recomputes the same total by summation and is used to cross-check it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from takehome.utils.exceptions import TaxTableError

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")

# Reported as the marginal rate when a schedule has no brackets at all.
DEFAULT_MARGINAL_RATE = Decimal("0.10")


@dataclass(frozen=True, slots=True)
class TaxBracket:
    """One band of a progressive schedule.

    Attributes:
        floor: Lowest income taxed at ``rate``.
        ceiling: Income at which the next bracket starts, or ``None`` for the top bracket.
        rate: Marginal rate applied within the bracket.
        base_tax: Tax owed on all income below ``floor``.
    """

    floor: Decimal
    ceiling: Decimal | None
    rate: Decimal
    base_tax: Decimal = ZERO

    def contains(self, income: Decimal) -> bool:
        if income < self.floor:
            return False
        return self.ceiling is None or income < self.ceiling

    def tax_at(self, income: Decimal) -> Decimal:
        """Total tax on ``income`` assuming it falls in this bracket."""
        if income <= self.floor:
            return self.base_tax
        return self.base_tax + (income - self.floor) * self.rate


@dataclass(frozen=True, slots=True)
class BracketAmount:
    """The slice of income taxed within one bracket."""

    floor: Decimal
    ceiling: Decimal | None
    rate: Decimal
    taxable_in_bracket: Decimal
    tax_paid: Decimal


@dataclass(frozen=True, slots=True)
class BracketEvaluation:
    """Tax, marginal rate and per-bracket breakdown for one income."""

    tax: Decimal
    marginal_rate: Decimal
    breakdown: tuple[BracketAmount, ...]


def build_brackets(schedule: Sequence[tuple[Decimal | None, Decimal]]) -> tuple[TaxBracket, ...]:
    """Build a bracket list from ``(upper_bound, rate)`` pairs.

    The first bracket starts at zero and each later bracket starts at the
    previous upper bound, so the result is contiguous by construction.
    Base tax is accumulated bracket by bracket.

    Args:
        schedule: Pairs ordered from lowest to highest bracket. Only the last
            pair may have ``None`` as its upper bound.

    Returns:
        Immutable tuple of brackets.

    Raises:
        TaxTableError: If bounds are not strictly increasing or an unbounded
            bracket is not last.
    """
    brackets: list[TaxBracket] = []
    floor = ZERO
    base_tax = ZERO
    for i, (upper_bound, rate) in enumerate(schedule):
        if upper_bound is None and i != len(schedule) - 1:
            raise TaxTableError("only the last bracket may be unbounded")
        if upper_bound is not None and upper_bound <= floor:
            raise TaxTableError(
                f"bracket bounds must increase: {upper_bound} follows {floor}"
            )
        if rate < 0:
            raise TaxTableError(f"negative bracket rate {rate}")
        brackets.append(TaxBracket(floor=floor, ceiling=upper_bound, rate=rate, base_tax=base_tax))
        if upper_bound is not None:
            base_tax += (upper_bound - floor) * rate
            floor = upper_bound
    return tuple(brackets)


def validate_brackets(brackets: Sequence[TaxBracket]) -> None:
    """Check sort order, contiguity and cumulative base tax.

    Raises:
        TaxTableError: On the first violation found.
    """
    for i, bracket in enumerate(brackets):
        if bracket.ceiling is None and i != len(brackets) - 1:
            raise TaxTableError(f"unbounded bracket at position {i} is not last")
        if bracket.ceiling is not None and bracket.ceiling <= bracket.floor:
            raise TaxTableError(f"bracket at {bracket.floor} has ceiling {bracket.ceiling}")
        if i == 0:
            continue
        prev = brackets[i - 1]
        if prev.ceiling != bracket.floor:
            raise TaxTableError(
                f"brackets are not contiguous: {prev.ceiling} then {bracket.floor}"
            )
        expected = prev.base_tax + prev.rate * (bracket.floor - prev.floor)
        if abs(bracket.base_tax - expected) > CENT:
            raise TaxTableError(
                f"base tax {bracket.base_tax} at {bracket.floor} should be {expected}"
            )


def find_bracket(income: Decimal, brackets: Sequence[TaxBracket]) -> TaxBracket:
    """Return the bracket with the greatest floor not above ``income``.

    Incomes below the first floor resolve to the first bracket.
    """
    found = brackets[0]
    for bracket in brackets:
        if income >= bracket.floor:
            found = bracket
        else:
            break
    return found


def closed_form_tax(income: Decimal, brackets: Sequence[TaxBracket]) -> Decimal:
    if income <= 0 or not brackets:
        return ZERO
    return find_bracket(income, brackets).tax_at(income)


def bracket_breakdown(income: Decimal, brackets: Sequence[TaxBracket]) -> tuple[BracketAmount, ...]:
    """Split ``income`` across every bracket whose floor lies below it."""
    rows: list[BracketAmount] = []
    for bracket in brackets:
        if income <= bracket.floor:
            break
        top = income if bracket.ceiling is None else min(income, bracket.ceiling)
        in_bracket = top - bracket.floor
        if in_bracket <= 0:
            continue
        rows.append(
            BracketAmount(
                floor=bracket.floor,
                ceiling=bracket.ceiling,
                rate=bracket.rate,
                taxable_in_bracket=in_bracket,
                tax_paid=in_bracket * bracket.rate,
            )
        )
    return tuple(rows)


def marginal_rate(income: Decimal, brackets: Sequence[TaxBracket]) -> Decimal:
    if not brackets:
        return DEFAULT_MARGINAL_RATE
    if income <= 0:
        return brackets[0].rate
    return find_bracket(income, brackets).rate


def evaluate(income: Decimal, brackets: Sequence[TaxBracket]) -> BracketEvaluation:
    """Evaluate a progressive schedule at ``income``.

    The closed-form amount is the headline tax. The summed breakdown must
    agree with it to the cent; a larger gap means the schedule's base taxes
    are inconsistent and is logged.

    Args:
        income: Taxable income after any deductions.
        brackets: Sorted, contiguous bracket list (may be empty).

    Returns:
        BracketEvaluation with tax, marginal rate and breakdown. Non-positive
        income or an empty schedule yields zero tax and an empty breakdown.
    """
    rate = marginal_rate(income, brackets)
    if income <= 0 or not brackets:
        return BracketEvaluation(tax=ZERO, marginal_rate=rate, breakdown=())

    tax = closed_form_tax(income, brackets)
    breakdown = bracket_breakdown(income, brackets)
    summed = sum((row.tax_paid for row in breakdown), ZERO)
    if abs(tax - summed) > CENT:
        logger.warning(
            "Bracket forms disagree at income %s: closed form %s, summed %s",
            income,
            tax,
            summed,
        )
    return BracketEvaluation(tax=tax, marginal_rate=rate, breakdown=breakdown)
