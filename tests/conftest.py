"""Shared test fixtures."""

from __future__ import annotations

import pytest

from takehome.core.engine import TaxCalculationEngine
from takehome.taxes.embedded import EmbeddedTaxData


@pytest.fixture(scope="session")
def provider() -> EmbeddedTaxData:
    """Packaged 2024 tax tables, loaded once."""
    return EmbeddedTaxData(tax_year=2024)


@pytest.fixture
def engine(provider: EmbeddedTaxData) -> TaxCalculationEngine:
    return TaxCalculationEngine(provider, tax_year=2024)
