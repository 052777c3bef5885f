"""Check character / check digit computation.

Standard codes: the 15-character body is weighted by position parity
(1-indexed odd positions use ODD_VALUES, even positions EVEN_VALUES), the
sum mod 26 is mapped to a letter.

Provisional codes: Luhn-style digit doubling on the 10-digit body.

Reference: Decreto MEF 12/03/1974, Decreto MEF 23/12/1976 (codici provvisori).
"""

from __future__ import annotations

import string

from fiscalcode.decoders.errors import FiscalCodeError
from fiscalcode.models.enums import ErrorKind

DIGITS = frozenset(string.digits)
ALPHABET = frozenset(string.digits + string.ascii_uppercase)

# ---------------------------------------------------------------------------
# Tables per Decreto MEF 12/03/1974
# ---------------------------------------------------------------------------

ODD_VALUES: dict[str, int] = {
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15,
    "7": 17, "8": 19, "9": 21,
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15,
    "H": 17, "I": 19, "J": 21, "K": 2, "L": 4, "M": 18, "N": 20,
    "O": 11, "P": 3, "Q": 6, "R": 8, "S": 12, "T": 14, "U": 16,
    "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
}

EVEN_VALUES: dict[str, int] = {
    **{digit: int(digit) for digit in string.digits},
    **{letter: i for i, letter in enumerate(string.ascii_uppercase)},
}

REMAINDER_LETTERS: dict[int, str] = dict(enumerate(string.ascii_uppercase))

STANDARD_BODY_LENGTH = 15
PROVISIONAL_BODY_LENGTH = 10


def standard_check_char(body: str) -> str:
    """Compute the check character for the first 15 characters of a code.

    Raises:
        FiscalCodeError: INVALID_FORMAT if the body has the wrong length or a
            character outside 0-9 / A-Z.
    """
    if len(body) != STANDARD_BODY_LENGTH:
        raise FiscalCodeError(
            ErrorKind.INVALID_FORMAT,
            f"Check character body must be {STANDARD_BODY_LENGTH} characters, got {len(body)}",
        )
    total = 0
    for i, char in enumerate(body):
        if char not in ALPHABET:
            raise FiscalCodeError(ErrorKind.INVALID_FORMAT, f"Invalid character {char!r} at position {i + 1}")
        if i % 2 == 0:  # odd position (1-indexed)
            total += ODD_VALUES[char]
        else:  # even position (1-indexed)
            total += EVEN_VALUES[char]
    return REMAINDER_LETTERS[total % 26]


def provisional_check_digit(body: str) -> str:
    """Compute the check digit for the first 10 digits of a provisional code.

    Raises:
        FiscalCodeError: INVALID_FORMAT if the body is not exactly 10 decimal digits.
    """
    if len(body) != PROVISIONAL_BODY_LENGTH or not DIGITS.issuperset(body):
        raise FiscalCodeError(
            ErrorKind.INVALID_FORMAT,
            f"Provisional code body must be {PROVISIONAL_BODY_LENGTH} digits",
        )
    odd_sum = sum(int(digit) for digit in body[0::2])
    even_sum = 0
    for digit in body[1::2]:
        doubled = int(digit) * 2
        even_sum += doubled - 9 if doubled >= 10 else doubled
    return str((10 - (odd_sum + even_sum) % 10) % 10)


def verify_standard(code: str) -> None:
    """Check the trailing character of a 16-character code as written.

    Raises:
        FiscalCodeError: INVALID_CHECKSUM on mismatch.
    """
    expected = standard_check_char(code[:STANDARD_BODY_LENGTH])
    found = code[STANDARD_BODY_LENGTH:]
    if found != expected:
        raise FiscalCodeError(
            ErrorKind.INVALID_CHECKSUM,
            f"Invalid check character: found {found}, expected {expected}",
        )


def verify_provisional(code: str) -> None:
    """Check the trailing digit of an 11-digit provisional code.

    Raises:
        FiscalCodeError: INVALID_CHECKSUM on mismatch.
    """
    expected = provisional_check_digit(code[:PROVISIONAL_BODY_LENGTH])
    found = code[PROVISIONAL_BODY_LENGTH:]
    if found != expected:
        raise FiscalCodeError(
            ErrorKind.INVALID_CHECKSUM,
            f"Invalid check digit: found {found}, expected {expected}",
        )
