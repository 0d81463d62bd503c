"""Tax data provider backed by the YAML tables shipped with the package."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from pathlib import Path
from typing import Any

from takehome.config.schema import TaxDataConfig
from takehome.io.yaml_loader import load_package_yaml, load_yaml, to_decimal
from takehome.models.filing_status import FilingStatus
from takehome.models.jurisdiction import Jurisdiction
from takehome.taxes.base import (
    DisabilityInsurance,
    FlatRate,
    JurisdictionConfig,
    NoTax,
    PayrollTaxConfig,
    Progressive,
)
from takehome.taxes.brackets import TaxBracket, build_brackets, validate_brackets
from takehome.utils.exceptions import TaxTableError

logger = logging.getLogger(__name__)


def _filing_status_key(key: Any) -> FilingStatus:
    try:
        return FilingStatus(str(key))
    except ValueError as exc:
        raise TaxTableError(f"unknown filing status {key!r} in tax table") from exc


def _parse_schedule(rows: list[list[Any]]) -> tuple[TaxBracket, ...]:
    schedule = [
        (None if upper is None else to_decimal(upper), to_decimal(rate)) for upper, rate in rows
    ]
    brackets = build_brackets(schedule)
    validate_brackets(brackets)
    return brackets


def _parse_brackets_by_status(
    data: Mapping[Any, Any],
) -> dict[FilingStatus, tuple[TaxBracket, ...]]:
    return {_filing_status_key(k): _parse_schedule(v) for k, v in data.items()}


def _parse_amounts_by_status(data: Mapping[Any, Any]) -> dict[FilingStatus, Decimal]:
    return {_filing_status_key(k): to_decimal(v) for k, v in data.items()}


def _parse_jurisdiction(code: str, entry: Any) -> JurisdictionConfig:
    if not isinstance(entry, Mapping):
        raise TaxTableError(f"{code}: jurisdiction entry must be a mapping, got {entry!r}")
    tax_type_name = entry.get("tax_type", "none")
    if tax_type_name == "none":
        return JurisdictionConfig(tax_type=NoTax())

    tax_type: FlatRate | Progressive
    if tax_type_name == "flat":
        tax_type = FlatRate(rate=to_decimal(entry["rate"]))
    elif tax_type_name == "progressive":
        deduction = entry.get("standard_deduction")
        tax_type = Progressive(
            brackets=_parse_brackets_by_status(entry.get("brackets", {})),
            standard_deduction=None if deduction is None else _parse_amounts_by_status(deduction),
        )
    else:
        raise TaxTableError(f"{code}: unknown tax_type {tax_type_name!r}")

    disability = None
    sdi = entry.get("disability_insurance")
    if sdi is not None:
        wage_base = sdi.get("wage_base")
        disability = DisabilityInsurance(
            rate=to_decimal(sdi["rate"]),
            wage_base=None if wage_base is None else to_decimal(wage_base),
        )

    local_rate = entry.get("local_tax_rate")
    return JurisdictionConfig(
        tax_type=tax_type,
        disability_insurance=disability,
        local_tax_rate=None if local_rate is None else to_decimal(local_rate),
    )


class EmbeddedTaxData:
    """Tax tables for a single year, loaded from YAML once at construction.

    The provider answers every query from its loaded year; a request for a
    different year is served from the same tables. Instances are immutable
    after ``__init__`` and safe to share between threads.

    Args:
        tax_year: Year whose tables to load.
        tables_dir: Directory holding ``us_federal_<year>.yaml`` and
            ``jurisdictions_<year>.yaml``. Defaults to the packaged tables.
    """

    def __init__(self, tax_year: int = 2024, tables_dir: Path | None = None) -> None:
        self.tax_year = tax_year
        federal = self._load(f"us_federal_{tax_year}.yaml", tables_dir)
        states = self._load(f"jurisdictions_{tax_year}.yaml", tables_dir)

        try:
            self._standard_deduction = _parse_amounts_by_status(federal["standard_deduction"])
            self._brackets = _parse_brackets_by_status(federal["ordinary_brackets"])
            payroll = federal["payroll"]
            thresholds = payroll.get("surtax_thresholds")
            self._payroll = PayrollTaxConfig(
                base_rate=to_decimal(payroll["base_rate"]),
                wage_base=to_decimal(payroll["wage_base"]),
                supplemental_rate=to_decimal(payroll["supplemental_rate"]),
                surtax_rate=to_decimal(payroll["surtax_rate"]),
                surtax_thresholds=(
                    None if thresholds is None else _parse_amounts_by_status(thresholds)
                ),
            )

            default_entry = states.get("default")
            self._default_jurisdiction = (
                None if default_entry is None else _parse_jurisdiction("default", default_entry)
            )
            self._jurisdictions: dict[str, JurisdictionConfig] = {
                str(code): _parse_jurisdiction(str(code), entry)
                for code, entry in states.get("jurisdictions", {}).items()
            }
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise TaxTableError(f"malformed {tax_year} tax tables: {exc!r}") from exc

        logger.debug(
            "Loaded %d tax tables: %d federal schedules, %d jurisdictions",
            tax_year,
            len(self._brackets),
            len(self._jurisdictions),
        )

    @classmethod
    def from_config(cls, config: TaxDataConfig) -> EmbeddedTaxData:
        return cls(tax_year=config.tax_year, tables_dir=config.tables_dir)

    @staticmethod
    def _load(filename: str, tables_dir: Path | None) -> dict[str, Any]:
        if tables_dir is None:
            data = load_package_yaml(f"taxes/tables/{filename}")
        else:
            data = load_yaml(tables_dir / filename)
        if not isinstance(data, dict):
            raise TaxTableError(f"{filename} must contain a mapping")
        return data

    def _check_year(self, year: int) -> None:
        if year != self.tax_year:
            logger.debug("Requested tax year %d; serving %d tables", year, self.tax_year)

    def federal_brackets(self, filing_status: FilingStatus, year: int) -> tuple[TaxBracket, ...]:
        self._check_year(year)
        return self._brackets.get(filing_status, ())

    def standard_deduction(self, filing_status: FilingStatus, year: int) -> Decimal:
        self._check_year(year)
        if filing_status in self._standard_deduction:
            return self._standard_deduction[filing_status]
        return self._standard_deduction.get(FilingStatus.SINGLE, Decimal("0"))

    def payroll_config(self, year: int) -> PayrollTaxConfig:
        self._check_year(year)
        return self._payroll

    def jurisdiction_config(self, jurisdiction: Jurisdiction, year: int) -> JurisdictionConfig:
        self._check_year(year)
        config = self._jurisdictions.get(jurisdiction.code)
        if config is not None:
            return config
        if self._default_jurisdiction is not None:
            return self._default_jurisdiction
        logger.debug("No tax table for %s; treating as no-tax", jurisdiction.code)
        return JurisdictionConfig(tax_type=NoTax())
