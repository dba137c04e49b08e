"""
Jurisdiction -> bracket table resolution.

Region codes are matched case-insensitively. The tax year is checked before the
region so an unsupported year is reported even for a valid code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from core.errors import UnknownRegionError, UnsupportedYearError

from .brackets import BracketTable
from .tables import (
    CA_FEDERAL,
    CA_PROVINCIAL,
    CURRENT_TAX_YEAR,
    US_CAPITAL_GAINS,
    US_FEDERAL,
    US_STATE,
)


class Country(str, Enum):
    CA = "CA"
    US = "US"


class Jurisdiction(BaseModel):
    """A (country, province/state) pair, e.g. Jurisdiction(country="CA", region="on")."""

    model_config = ConfigDict(frozen=True)

    country: Country
    region: str

    @field_validator("country", mode="before")
    @classmethod
    def upper_country(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("region")
    @classmethod
    def upper_region(cls, v: str) -> str:
        return v.strip().upper()


@dataclass(frozen=True)
class CanadianBrackets:
    federal: BracketTable
    provincial: BracketTable


@dataclass(frozen=True)
class USBrackets:
    federal: BracketTable
    state: BracketTable


@dataclass(frozen=True)
class JurisdictionTables:
    """Country-neutral view: federal + regional (province or state) tables."""
    federal: BracketTable
    regional: BracketTable


def _check_year(year: int, available: Mapping[int, object]) -> None:
    if year not in available:
        raise UnsupportedYearError(
            f"No tax tables for year {year}. Available: {sorted(available)}"
        )


def _lookup(code: str, regions: Dict[str, BracketTable], kind: str) -> BracketTable:
    key = str(code).strip().upper()
    if key not in regions:
        raise UnknownRegionError(f"Unknown {kind} '{code}'. Available: {sorted(regions)}")
    return regions[key]


def get_canadian_brackets(code: str, year: int = CURRENT_TAX_YEAR) -> CanadianBrackets:
    """Federal + provincial tables for a province / territory code (e.g. 'ON')."""
    _check_year(year, CA_FEDERAL)
    provincial = _lookup(code, CA_PROVINCIAL[year], "province")
    return CanadianBrackets(federal=CA_FEDERAL[year], provincial=provincial)


def get_us_brackets(code: str, year: int = CURRENT_TAX_YEAR) -> USBrackets:
    """
    Federal + state tables for a state code (50 states + DC).
    No-income-tax states return an empty state table, not an error.
    """
    _check_year(year, US_FEDERAL)
    state = _lookup(code, US_STATE[year], "state")
    return USBrackets(federal=US_FEDERAL[year], state=state)


def get_us_capital_gains_table(year: int = CURRENT_TAX_YEAR) -> BracketTable:
    _check_year(year, US_CAPITAL_GAINS)
    return US_CAPITAL_GAINS[year]


def resolve_jurisdiction(jurisdiction: Jurisdiction, year: int = CURRENT_TAX_YEAR) -> JurisdictionTables:
    if jurisdiction.country == Country.CA:
        ca = get_canadian_brackets(jurisdiction.region, year)
        return JurisdictionTables(federal=ca.federal, regional=ca.provincial)
    us = get_us_brackets(jurisdiction.region, year)
    return JurisdictionTables(federal=us.federal, regional=us.state)


def supported_regions(country: Country | str, year: int = CURRENT_TAX_YEAR) -> List[str]:
    """Sorted region codes tabulated for `country` in `year`."""
    c = Country(str(country.value if isinstance(country, Country) else country).upper())
    registry = CA_PROVINCIAL if c == Country.CA else US_STATE
    _check_year(year, registry)
    return sorted(registry[year])
