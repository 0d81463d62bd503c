"""Custom exceptions for takehome."""

from __future__ import annotations


class TakeHomeError(Exception):
    """Base exception for takehome."""


class ConfigError(TakeHomeError):
    """Invalid configuration."""


class TaxTableError(ConfigError):
    """Missing or malformed tax table data."""


class InputError(TakeHomeError):
    """Raw input text that could not be converted to a domain value.

    Attributes:
        text: The offending input, exactly as received.
    """

    kind = "input"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid {self.kind}: {text!r}")


class InvalidDecimalError(InputError):
    """Text is not a finite decimal number."""

    kind = "decimal"


class InvalidFilingStatusError(InputError):
    """Text does not name a filing status."""

    kind = "filing status"


class InvalidJurisdictionError(InputError):
    """Text is not a known jurisdiction code."""

    kind = "jurisdiction"


class InvalidSplitMethodError(InputError):
    """Text does not name an expense split method."""

    kind = "split method"
