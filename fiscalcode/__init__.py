"""Validation and decoding of Italian personal fiscal codes (codice fiscale)."""

from fiscalcode.decoders.codice_fiscale import decode, validate, validate_detailed
from fiscalcode.models.enums import CodeKind, ErrorKind, Gender

__version__ = "0.1.0"

__all__ = ["CodeKind", "ErrorKind", "Gender", "decode", "validate", "validate_detailed"]
