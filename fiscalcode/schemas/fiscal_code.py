"""Pydantic schemas for the fiscal code parser, decoder and public results.

Pure data classes — every model is frozen once built.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fiscalcode.models.enums import CodeKind, ErrorKind, Gender

# ---------------------------------------------------------------------------
# Place registry
# ---------------------------------------------------------------------------


class PlaceRecord(BaseModel):
    """Municipality or foreign country identified by a 4-character place code.

    Loaded from JSON with camelCase keys (countryCode, countryName).
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    country_code: str  # ISO 3166-1 alpha-2, e.g. "IT"
    country_name: str  # e.g. "Italia"
    city: str | None = None  # only for Italian municipalities
    state: str | None = None  # province abbreviation, e.g. "RM"

    def display_name(self) -> str:
        """Compact form: "Roma/RM/IT/Italia", absent parts omitted."""
        parts = [self.city, self.state, self.country_code, self.country_name]
        return "/".join(part for part in parts if part)

    def __str__(self) -> str:
        return (
            f"Country: {self.country_name} ({self.country_code})\n"
            f"\tCity: {self.city or 'N/A'} ({self.state or 'N/A'})"
        )


# ---------------------------------------------------------------------------
# Structural parser output
# ---------------------------------------------------------------------------


class ParsedStandardCode(BaseModel):
    """Typed fields of a 16-character code, numeric fields already canonical."""

    model_config = ConfigDict(frozen=True)

    code: str  # as written (may contain omocodia letters)
    canonical: str  # omocodia substitutions reversed
    surname_code: str
    name_code: str
    birth_year: int  # 0–99
    birth_month_letter: str
    birth_day_sex: int  # 1–31 male, 41–71 female
    place_code: str  # canonical, e.g. "H501"
    check_character: str


class ProvisionalCode(BaseModel):
    """11-digit provisional code: 10 digits plus the check digit."""

    model_config = ConfigDict(frozen=True)

    code: str
    body: str
    check_digit: str


# ---------------------------------------------------------------------------
# Public results
# ---------------------------------------------------------------------------


class DecodedIdentity(BaseModel):
    """Identity data recovered from a standard fiscal code."""

    model_config = ConfigDict(frozen=True)

    born_on: date
    gender: Gender
    age: int  # completed years on the reference date
    place_code: str
    place_of_birth: PlaceRecord


class ValidationResult(BaseModel):
    """Outcome of validate_detailed — error is None iff valid."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    code: str  # normalized input
    kind: CodeKind | None = None
    error: ErrorKind | None = None
    message: str | None = None


class DecodeResult(BaseModel):
    """Outcome of decode — identity is set iff valid."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    code: str  # normalized input
    identity: DecodedIdentity | None = None
    error: ErrorKind | None = None
    message: str | None = None
