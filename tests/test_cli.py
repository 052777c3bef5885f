"""Tests for the command-line entry point."""

from __future__ import annotations

import json

import pytest

from fiscalcode import main as cli
from fiscalcode.decoders import codice_fiscale
from fiscalcode.decoders.places import PlaceRegistryError


class TestMain:
    def test_valid_standard_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["gntmtt99c27h501f"]) == 0
        out = capsys.readouterr().out
        assert "GNTMTT99C27H501F: Code is valid" in out
        assert "Born on: 1999-03-27" in out
        assert "Gender: M" in out
        assert "Country: Italia (IT)" in out
        assert "City: Roma (RM)" in out

    def test_valid_provisional_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["12345678903"]) == 0
        out = capsys.readouterr().out
        assert "Code is valid" in out
        assert "Born on" not in out

    def test_invalid_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["GNTMTT99C27H501F", "FCKTSS05C01Z122K"]) == 1
        out = capsys.readouterr().out
        assert "FCKTSS05C01Z122K: Code is invalid (invalid_checksum" in out

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--json", "MKSKRS92L65Z219S", "12345678903", "X"]) == 1
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 3
        decoded = json.loads(lines[0])
        assert decoded["identity"]["born_on"] == "1992-07-25"
        assert decoded["identity"]["gender"] == "F"
        assert decoded["identity"]["place_of_birth"]["country_code"] == "JP"
        assert json.loads(lines[1])["kind"] == "provisional"
        assert json.loads(lines[2])["error"] == "invalid_length"

    def test_registry_unavailable(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def _broken() -> None:
            raise PlaceRegistryError("Place data file not found: /nowhere.json")

        monkeypatch.setattr(codice_fiscale, "get_registry", _broken)
        assert cli.main(["GNTMTT99C27H501F"]) == 2
        assert "Place data file not found" in capsys.readouterr().err

    def test_requires_a_code(self) -> None:
        with pytest.raises(SystemExit):
            cli.main([])
