"""Deterministic fiscal code decoders — checksum, omocodia, parser, places."""

from fiscalcode.decoders.codice_fiscale import decode, validate, validate_detailed

__all__ = ["decode", "validate", "validate_detailed"]
