"""Filing status registry."""

from __future__ import annotations

from enum import Enum


class FilingStatus(str, Enum):
    """Tax filing status. Used only as a key into bracket and deduction tables."""

    SINGLE = "single"
    MARRIED_FILING_JOINTLY = "married_filing_jointly"
    MARRIED_FILING_SEPARATELY = "married_filing_separately"
    HEAD_OF_HOUSEHOLD = "head_of_household"
    QUALIFYING_WIDOWER = "qualifying_widower"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @classmethod
    def all(cls) -> list[FilingStatus]:
        return list(cls)


_DISPLAY_NAMES: dict[FilingStatus, str] = {
    FilingStatus.SINGLE: "Single",
    FilingStatus.MARRIED_FILING_JOINTLY: "Married Filing Jointly",
    FilingStatus.MARRIED_FILING_SEPARATELY: "Married Filing Separately",
    FilingStatus.HEAD_OF_HOUSEHOLD: "Head of Household",
    FilingStatus.QUALIFYING_WIDOWER: "Qualifying Widow(er)",
}

_SHORT_NAMES: dict[FilingStatus, str] = {
    FilingStatus.SINGLE: "Single",
    FilingStatus.MARRIED_FILING_JOINTLY: "MFJ",
    FilingStatus.MARRIED_FILING_SEPARATELY: "MFS",
    FilingStatus.HEAD_OF_HOUSEHOLD: "HoH",
    FilingStatus.QUALIFYING_WIDOWER: "QW",
}
