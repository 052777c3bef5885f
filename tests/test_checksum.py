"""Tests for the check character / check digit engine.

Tests cover:
- Known standard codes (plain and omocodia)
- Uniqueness of the trailing letter for a given body
- Provisional Luhn-style check digit
- Rejection of bodies outside the alphabet
"""

from __future__ import annotations

import string

import pytest

from fiscalcode.decoders.checksum import (
    EVEN_VALUES,
    ODD_VALUES,
    provisional_check_digit,
    standard_check_char,
    verify_provisional,
    verify_standard,
)
from fiscalcode.decoders.errors import FiscalCodeError
from fiscalcode.models.enums import ErrorKind


class TestTables:
    """Replacement tables cover the full 36-symbol alphabet."""

    def test_odd_table_complete(self) -> None:
        assert set(ODD_VALUES) == set(string.digits + string.ascii_uppercase)

    def test_even_table_is_ordinal(self) -> None:
        assert EVEN_VALUES["7"] == 7
        assert EVEN_VALUES["A"] == 0
        assert EVEN_VALUES["Z"] == 25
        assert len(EVEN_VALUES) == 36


class TestStandardCheckChar:
    """Check character of 16-character codes."""

    @pytest.mark.parametrize(
        "code",
        [
            "GNTMTT99C27H501F",
            "MRARSS80A01H501T",
            "BNCLRD69T61A783M",
            "FCKTSS05C01Z122F",
            "RSSMRA85H52F205C",
            "BNCMRC90C15H501W",
        ],
    )
    def test_known_codes(self, code: str) -> None:
        assert standard_check_char(code[:15]) == code[15]

    def test_omocodia_computed_on_written_form(self) -> None:
        """Substitution letters are weighted as letters, not as their digits."""
        assert standard_check_char("GNTMTT99C27H50M") == "X"
        assert standard_check_char("GNTMTT99C27HR0M") == "S"

    def test_only_one_trailing_letter_is_valid(self) -> None:
        body = "GNTMTT99C27H501"
        accepted = []
        for letter in string.ascii_uppercase:
            try:
                verify_standard(body + letter)
            except FiscalCodeError as e:
                assert e.kind == ErrorKind.INVALID_CHECKSUM
            else:
                accepted.append(letter)
        assert accepted == ["F"]

    def test_mismatch_message(self) -> None:
        with pytest.raises(FiscalCodeError) as exc_info:
            verify_standard("FCKTSS05C01Z122K")
        assert exc_info.value.kind == ErrorKind.INVALID_CHECKSUM
        assert exc_info.value.message == "Invalid check character: found K, expected F"

    def test_character_outside_alphabet(self) -> None:
        with pytest.raises(FiscalCodeError) as exc_info:
            standard_check_char("GNTMTT99C27H5-1")
        assert exc_info.value.kind == ErrorKind.INVALID_FORMAT

    def test_wrong_body_length(self) -> None:
        with pytest.raises(FiscalCodeError):
            standard_check_char("GNTMTT")


class TestProvisionalCheckDigit:
    """Check digit of 11-digit provisional codes."""

    def test_known_code(self) -> None:
        assert provisional_check_digit("1234567890") == "3"

    def test_doubling_folds_above_nine(self) -> None:
        # even positions 9 → 18 → 9; odd zeros add nothing: 5 × 9 = 45 → 5
        assert provisional_check_digit("0909090909") == "5"

    def test_all_zeros(self) -> None:
        assert provisional_check_digit("0000000000") == "0"

    def test_verify_accepts_only_matching_digit(self) -> None:
        verify_provisional("12345678903")
        for digit in "012456789":
            with pytest.raises(FiscalCodeError) as exc_info:
                verify_provisional("1234567890" + digit)
            assert exc_info.value.kind == ErrorKind.INVALID_CHECKSUM

    def test_non_digit_rejected(self) -> None:
        with pytest.raises(FiscalCodeError) as exc_info:
            provisional_check_digit("12345A7890")
        assert exc_info.value.kind == ErrorKind.INVALID_FORMAT
