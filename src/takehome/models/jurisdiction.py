"""Jurisdiction registry: the 50 states plus the District of Columbia.

Each member's value is its two-letter postal code. The capability flags
describe which parts of the jurisdiction calculator can apply; the rates
themselves come from a tax data provider.
"""

from __future__ import annotations

from enum import Enum


class Jurisdiction(str, Enum):
    """A US state or the District of Columbia."""

    ALABAMA = "AL"
    ALASKA = "AK"
    ARIZONA = "AZ"
    ARKANSAS = "AR"
    CALIFORNIA = "CA"
    COLORADO = "CO"
    CONNECTICUT = "CT"
    DELAWARE = "DE"
    DISTRICT_OF_COLUMBIA = "DC"
    FLORIDA = "FL"
    GEORGIA = "GA"
    HAWAII = "HI"
    IDAHO = "ID"
    ILLINOIS = "IL"
    INDIANA = "IN"
    IOWA = "IA"
    KANSAS = "KS"
    KENTUCKY = "KY"
    LOUISIANA = "LA"
    MAINE = "ME"
    MARYLAND = "MD"
    MASSACHUSETTS = "MA"
    MICHIGAN = "MI"
    MINNESOTA = "MN"
    MISSISSIPPI = "MS"
    MISSOURI = "MO"
    MONTANA = "MT"
    NEBRASKA = "NE"
    NEVADA = "NV"
    NEW_HAMPSHIRE = "NH"
    NEW_JERSEY = "NJ"
    NEW_MEXICO = "NM"
    NEW_YORK = "NY"
    NORTH_CAROLINA = "NC"
    NORTH_DAKOTA = "ND"
    OHIO = "OH"
    OKLAHOMA = "OK"
    OREGON = "OR"
    PENNSYLVANIA = "PA"
    RHODE_ISLAND = "RI"
    SOUTH_CAROLINA = "SC"
    SOUTH_DAKOTA = "SD"
    TENNESSEE = "TN"
    TEXAS = "TX"
    UTAH = "UT"
    VERMONT = "VT"
    VIRGINIA = "VA"
    WASHINGTON = "WA"
    WEST_VIRGINIA = "WV"
    WISCONSIN = "WI"
    WYOMING = "WY"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        if self is Jurisdiction.DISTRICT_OF_COLUMBIA:
            return "Washington D.C."
        return self.name.replace("_", " ").title()

    @property
    def no_income_tax(self) -> bool:
        """True when wages are not subject to a jurisdiction income tax."""
        return self.value in _NO_INCOME_TAX

    @property
    def flat_tax(self) -> bool:
        return self.value in _FLAT_TAX

    @property
    def disability_insurance(self) -> bool:
        """True when employees pay a state disability insurance (SDI) premium."""
        return self.value in _DISABILITY_INSURANCE

    @property
    def local_tax(self) -> bool:
        """True when cities or counties levy their own income tax."""
        return self.value in _LOCAL_TAX

    @classmethod
    def from_code(cls, code: str) -> Jurisdiction | None:
        """Look up a jurisdiction by postal code, ignoring case and whitespace."""
        try:
            return cls(code.strip().upper())
        except ValueError:
            return None

    @classmethod
    def all(cls) -> list[Jurisdiction]:
        return list(cls)


_NO_INCOME_TAX = frozenset({"AK", "FL", "NV", "NH", "SD", "TN", "TX", "WA", "WY"})
_FLAT_TAX = frozenset({"CO", "IL", "IN", "KY", "MA", "MI", "NC", "PA", "UT"})
_DISABILITY_INSURANCE = frozenset({"CA", "HI", "NJ", "NY", "RI"})
_LOCAL_TAX = frozenset(
    {"AL", "CO", "DE", "IN", "IA", "KY", "MD", "MI", "MO", "NJ", "NY", "OH", "OR", "PA", "WV"}
)
