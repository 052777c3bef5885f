"""Tests for the omocodia resolver."""

from __future__ import annotations

import pytest

from fiscalcode.decoders.codice_fiscale import decode, validate
from fiscalcode.decoders.omocodia import (
    OMOCODIA_POSITIONS,
    canonicalize,
    is_omocode,
    omocode_variants,
    substitute,
)


class TestCanonicalize:
    def test_restores_digits(self) -> None:
        assert canonicalize("GNTMTT99C27HR0MS") == "GNTMTT99C27H501S"
        assert canonicalize("FCKTSS05C01ZMLQH") == "FCKTSS05C01Z104H"

    def test_all_positions(self) -> None:
        assert canonicalize("GNTMTTVVCNTHRLMF") == "GNTMTT99C27H501F"

    def test_plain_code_unchanged(self) -> None:
        assert canonicalize("GNTMTT99C27H501F") == "GNTMTT99C27H501F"

    def test_other_positions_untouched(self) -> None:
        """Letters outside the omocodia positions are never converted."""
        assert canonicalize("LMNPQR99C27H501F") == "LMNPQR99C27H501F"

    def test_letter_outside_table_passes_through(self) -> None:
        assert canonicalize("GNTMTT9AC27H501F") == "GNTMTT9AC27H501F"


class TestSubstitute:
    def test_single_position(self) -> None:
        assert substitute("GNTMTT99C27H501F", [14]) == "GNTMTT99C27H50MF"

    def test_rejects_non_omocodia_position(self) -> None:
        with pytest.raises(ValueError):
            substitute("GNTMTT99C27H501F", [11])

    def test_round_trip(self) -> None:
        code = "GNTMTT99C27H501F"
        assert canonicalize(substitute(code, OMOCODIA_POSITIONS)) == code


class TestIsOmocode:
    def test_plain(self) -> None:
        assert is_omocode("GNTMTT99C27H501F") is False

    def test_substituted(self) -> None:
        assert is_omocode("GNTMTT99C27H50MX") is True


class TestOmocodeVariants:
    def test_count(self) -> None:
        assert len(set(omocode_variants("GNTMTT99C27H501F"))) == 127

    def test_known_variants_included(self) -> None:
        variants = set(omocode_variants("GNTMTT99C27H501F"))
        assert "GNTMTT99C27H50MX" in variants
        assert "GNTMTT99C27HR0MS" in variants

    def test_every_variant_decodes_to_same_identity(self) -> None:
        plain = decode("GNTMTT99C27H501F").identity
        for variant in omocode_variants("GNTMTT99C27H501F"):
            assert validate(variant), variant
            identity = decode(variant).identity
            assert identity is not None
            assert identity.born_on == plain.born_on
            assert identity.gender == plain.gender
            assert identity.place_code == plain.place_code

    def test_variants_of_variant_are_the_same_class(self) -> None:
        assert set(omocode_variants("GNTMTT99C27H50MX")) == set(omocode_variants("GNTMTT99C27H501F"))
