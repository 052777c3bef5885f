"""Fixed-width structural parser for fiscal codes.

Standard code layout (0-indexed slices):
  [0:3]   surname code   — letters
  [3:6]   name code      — letters
  [6:8]   birth year     — digits
  [8]     month letter   — letter
  [9:11]  day + sex      — digits
  [11:15] place code     — letter + 3 digits
  [15]    check char     — letter

Numeric slots are parsed after omocodia canonicalization, so a letter left in
one of them is a format error.
"""

from __future__ import annotations

import string

from fiscalcode.decoders.errors import FiscalCodeError
from fiscalcode.decoders.omocodia import canonicalize
from fiscalcode.models.enums import ErrorKind
from fiscalcode.schemas.fiscal_code import ParsedStandardCode, ProvisionalCode

STANDARD_LENGTH = 16
PROVISIONAL_LENGTH = 11

_LETTERS = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)

# (slice, allowed characters, field label)
_STANDARD_SLOTS: tuple[tuple[slice, frozenset[str], str], ...] = (
    (slice(0, 3), _LETTERS, "surname code"),
    (slice(3, 6), _LETTERS, "name code"),
    (slice(6, 8), _DIGITS, "birth year"),
    (slice(8, 9), _LETTERS, "birth month"),
    (slice(9, 11), _DIGITS, "birth day"),
    (slice(11, 12), _LETTERS, "birth place"),
    (slice(12, 15), _DIGITS, "birth place"),
    (slice(15, 16), _LETTERS, "check character"),
)


def normalize(code: str) -> str:
    """Trim surrounding whitespace and uppercase."""
    return code.strip().upper()


def parse_standard(code: str) -> ParsedStandardCode:
    """Split a normalized 16-character code into typed fields.

    Raises:
        FiscalCodeError: INVALID_LENGTH or INVALID_FORMAT.
    """
    if len(code) != STANDARD_LENGTH:
        raise FiscalCodeError(
            ErrorKind.INVALID_LENGTH,
            f"Standard fiscal code must be {STANDARD_LENGTH} characters, got {len(code)}",
        )

    canonical = canonicalize(code)
    for slot, allowed, label in _STANDARD_SLOTS:
        if not allowed.issuperset(canonical[slot]):
            raise FiscalCodeError(
                ErrorKind.INVALID_FORMAT,
                f"Invalid fiscal code format: bad {label} {code[slot]!r}",
            )

    return ParsedStandardCode(
        code=code,
        canonical=canonical,
        surname_code=canonical[0:3],
        name_code=canonical[3:6],
        birth_year=int(canonical[6:8]),
        birth_month_letter=canonical[8],
        birth_day_sex=int(canonical[9:11]),
        place_code=canonical[11:15],
        check_character=canonical[15],
    )


def parse_provisional(code: str) -> ProvisionalCode:
    """Validate the shape of a normalized 11-digit provisional code.

    Raises:
        FiscalCodeError: INVALID_LENGTH or INVALID_FORMAT.
    """
    if len(code) != PROVISIONAL_LENGTH:
        raise FiscalCodeError(
            ErrorKind.INVALID_LENGTH,
            f"Provisional fiscal code must be {PROVISIONAL_LENGTH} digits, got {len(code)}",
        )
    if not _DIGITS.issuperset(code):
        raise FiscalCodeError(ErrorKind.INVALID_FORMAT, "Provisional fiscal code must contain only digits")
    return ProvisionalCode(code=code, body=code[:-1], check_digit=code[-1])
