"""Omocodia: letter-for-digit substitutions that disambiguate colliding codes.

When two people would get the same code, the Agenzia delle Entrate replaces
digits with letters, starting from the rightmost numeric position, and
recomputes the check character. Only the seven numeric positions below are
ever substituted.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import combinations

from fiscalcode.decoders.checksum import standard_check_char

# 0-indexed positions of year (6-7), day (9-10), place number (12-14)
OMOCODIA_POSITIONS: tuple[int, ...] = (6, 7, 9, 10, 12, 13, 14)

DIGIT_TO_LETTER: dict[str, str] = {
    "0": "L", "1": "M", "2": "N", "3": "P", "4": "Q",
    "5": "R", "6": "S", "7": "T", "8": "U", "9": "V",
}
LETTER_TO_DIGIT: dict[str, str] = {letter: digit for digit, letter in DIGIT_TO_LETTER.items()}


def canonicalize(code: str) -> str:
    """Replace substitution letters at the omocodia positions with their digits.

    Characters that are already digits, letters outside the substitution table
    and every other position pass through unchanged; the structural parser
    rejects whatever is still not a digit.
    """
    chars = list(code)
    for i in OMOCODIA_POSITIONS:
        if i < len(chars):
            chars[i] = LETTER_TO_DIGIT.get(chars[i], chars[i])
    return "".join(chars)


def is_omocode(code: str) -> bool:
    """True if any omocodia position holds a substitution letter."""
    return any(i < len(code) and code[i] in LETTER_TO_DIGIT for i in OMOCODIA_POSITIONS)


def substitute(code: str, positions: Iterable[int]) -> str:
    """Replace the digits at the given omocodia positions with their letters.

    The check character is left as it is.
    """
    chars = list(code)
    for i in positions:
        if i not in OMOCODIA_POSITIONS:
            msg = f"Position {i} is not an omocodia position"
            raise ValueError(msg)
        chars[i] = DIGIT_TO_LETTER.get(chars[i], chars[i])
    return "".join(chars)


def omocode_variants(code: str) -> Iterator[str]:
    """Yield every substituted variant of a code, check character recomputed.

    The input is canonicalized first; the 127 non-empty subsets of the
    omocodia positions are yielded in order of increasing size.
    """
    canonical = canonicalize(code)
    for size in range(1, len(OMOCODIA_POSITIONS) + 1):
        for positions in combinations(OMOCODIA_POSITIONS, size):
            body = substitute(canonical, positions)[:15]
            yield body + standard_check_char(body)
