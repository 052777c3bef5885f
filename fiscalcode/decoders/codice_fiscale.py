"""Italian Codice Fiscale (CF) validator and decoder.

Pure Python — no I/O beyond the cached place registry. Validates standard
(16-character) and provisional (11-digit) codes, and extracts birthdate,
age, gender and birthplace from standard codes.

CF format: AAABBB 00C00 D000 E
  - AAA:  surname consonants (then vowels, then X)
  - BBB:  name consonants (then vowels, then X)
  - 00:   year of birth (last 2 digits)
  - C:    month of birth (letter A–T, non-sequential)
  - 00:   day of birth (1–31 male, 41–71 female)
  - D000: birthplace code (codice catastale / Belfiore)
  - E:    check character

Digits in the year, day and place number may be replaced by letters
(omocodia); see fiscalcode.decoders.omocodia.

Reference: DPR 605/1973, Decreto MEF 12/03/1974.
"""

from __future__ import annotations

import logging
from datetime import date

from fiscalcode.decoders.checksum import verify_provisional, verify_standard
from fiscalcode.decoders.errors import FiscalCodeError
from fiscalcode.decoders.parser import (
    PROVISIONAL_LENGTH,
    STANDARD_LENGTH,
    normalize,
    parse_provisional,
    parse_standard,
)
from fiscalcode.decoders.places import PlaceRegistry, get_registry
from fiscalcode.models.enums import CodeKind, ErrorKind, Gender
from fiscalcode.schemas.fiscal_code import (
    DecodedIdentity,
    DecodeResult,
    ParsedStandardCode,
    PlaceRecord,
    ValidationResult,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MONTH_MAP: dict[str, int] = {
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "H": 6,
    "L": 7, "M": 8, "P": 9, "R": 10, "S": 11, "T": 12,
}

FEMALE_DAY_OFFSET = 40


# ---------------------------------------------------------------------------
# Field decoding
# ---------------------------------------------------------------------------


def decode_gender(birth_day_sex: int) -> tuple[Gender, int]:
    """Split the day field into gender and actual day of month."""
    if birth_day_sex > FEMALE_DAY_OFFSET:
        gender, day = Gender.FEMALE, birth_day_sex - FEMALE_DAY_OFFSET
    else:
        gender, day = Gender.MALE, birth_day_sex
    if day < 1 or day > 31:
        raise FiscalCodeError(ErrorKind.INVALID_DAY, f"Invalid birth day: {birth_day_sex:02d}")
    return gender, day


def decode_month(letter: str) -> int:
    month = MONTH_MAP.get(letter)
    if month is None:
        raise FiscalCodeError(ErrorKind.INVALID_MONTH, f"Invalid birth month: {letter}")
    return month


def resolve_year(two_digit_year: int, today: date) -> int:
    """Most recent year ending in two_digit_year strictly before today's year."""
    year = today.year // 100 * 100 + two_digit_year
    if year >= today.year:
        year -= 100
    return year


def compute_age(born_on: date, today: date) -> int:
    age = today.year - born_on.year
    if (today.month, today.day) < (born_on.month, born_on.day):
        age -= 1
    return age


def lookup_place(place_code: str, registry: PlaceRegistry) -> PlaceRecord:
    place = registry.get(place_code)
    if place is None:
        raise FiscalCodeError(ErrorKind.UNKNOWN_BIRTH_PLACE, f"Unknown birth place: {place_code}")
    return place


def decode_parsed(
    parsed: ParsedStandardCode,
    today: date,
    registry: PlaceRegistry | None = None,
) -> DecodedIdentity:
    """Turn parsed fields into birth date, gender and place of birth.

    Raises:
        FiscalCodeError: INVALID_MONTH, INVALID_DAY, INVALID_DATE or UNKNOWN_BIRTH_PLACE.
    """
    month = decode_month(parsed.birth_month_letter)
    gender, day = decode_gender(parsed.birth_day_sex)
    year = resolve_year(parsed.birth_year, today)

    try:
        born_on = date(year, month, day)
    except ValueError as e:
        raise FiscalCodeError(
            ErrorKind.INVALID_DATE,
            f"Invalid birth date: {year}-{month:02d}-{day:02d}",
        ) from e

    place = lookup_place(parsed.place_code, registry or get_registry())

    return DecodedIdentity(
        born_on=born_on,
        gender=gender,
        age=compute_age(born_on, today),
        place_code=parsed.place_code,
        place_of_birth=place,
    )


def _decode_standard(code: str, today: date) -> DecodedIdentity:
    parsed = parse_standard(code)
    # Checksum is defined over the code as written, omocodia letters included
    verify_standard(code)
    return decode_parsed(parsed, today)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_detailed(code: str, today: date | None = None) -> ValidationResult:
    """Validate a standard or provisional fiscal code, reporting why it fails.

    Args:
        code: The fiscal code; surrounding whitespace and case are ignored.
        today: Reference date for the century rule (defaults to today).

    Returns:
        ValidationResult with the matched code kind, or the error kind and message.
    """
    cf = normalize(code)
    kind: CodeKind | None = None
    try:
        if len(cf) == PROVISIONAL_LENGTH:
            kind = CodeKind.PROVISIONAL
            verify_provisional(parse_provisional(cf).code)
        elif len(cf) == STANDARD_LENGTH:
            kind = CodeKind.STANDARD
            _decode_standard(cf, today or date.today())
        else:
            raise FiscalCodeError(
                ErrorKind.INVALID_LENGTH,
                f"Fiscal code must be {STANDARD_LENGTH} or {PROVISIONAL_LENGTH} characters, got {len(cf)}",
            )
    except FiscalCodeError as e:
        logger.debug("Rejected fiscal code %s: %s", cf, e.kind.value)
        return ValidationResult(valid=False, code=cf, kind=kind, error=e.kind, message=e.message)

    return ValidationResult(valid=True, code=cf, kind=kind)


def validate(code: str) -> bool:
    """True iff the code is a well-formed, checksum-correct standard or provisional code."""
    return validate_detailed(code).valid


def decode(code: str, today: date | None = None) -> DecodeResult:
    """Decode a standard fiscal code into birth date, gender and birthplace.

    Provisional codes carry no identity data and always fail with
    UNSUPPORTED_OPERATION, whatever their check digit.

    Args:
        code: The 16-character fiscal code.
        today: Reference date for the century rule and age (defaults to today).

    Returns:
        DecodeResult with the decoded identity, or the error kind and message.
    """
    cf = normalize(code)
    try:
        if len(cf) == PROVISIONAL_LENGTH:
            parse_provisional(cf)
            raise FiscalCodeError(
                ErrorKind.UNSUPPORTED_OPERATION,
                "Provisional fiscal codes carry no identity data",
            )
        if len(cf) != STANDARD_LENGTH:
            raise FiscalCodeError(
                ErrorKind.INVALID_LENGTH,
                f"Fiscal code must be {STANDARD_LENGTH} characters, got {len(cf)}",
            )
        identity = _decode_standard(cf, today or date.today())
    except FiscalCodeError as e:
        logger.debug("Could not decode fiscal code %s: %s", cf, e.kind.value)
        return DecodeResult(valid=False, code=cf, error=e.kind, message=e.message)

    return DecodeResult(valid=True, code=cf, identity=identity)
