"""YAML data file loader for tax tables."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from takehome.utils.exceptions import TaxTableError

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict or list).

    Raises:
        TaxTableError: If the file does not exist or is not valid YAML.
    """
    try:
        with open(path) as f:
            return yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise TaxTableError(f"tax table not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise TaxTableError(f"could not parse {path}: {exc}") from exc


def load_package_yaml(relative_path: str) -> Any:
    """Load a YAML file relative to the takehome package root.

    Args:
        relative_path: Path relative to ``src/takehome/``,
            e.g. ``"taxes/tables/us_federal_2024.yaml"``.

    Returns:
        Parsed YAML content.
    """
    return load_yaml(PACKAGE_ROOT / relative_path)


def to_decimal(value: Any) -> Decimal:
    """Convert a YAML scalar to Decimal without binary float artifacts.

    YAML floats such as ``0.0145`` go through their shortest ``str`` form,
    which round-trips the literal written in the table.
    """
    if isinstance(value, bool):
        raise TaxTableError(f"expected a number, got {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise TaxTableError(f"expected a number, got {value!r}") from exc
