"""Exception raised inside the decoding pipeline.

Public operations catch it and turn it into a typed result; it never
escapes validate / validate_detailed / decode.
"""

from __future__ import annotations

from fiscalcode.models.enums import ErrorKind


class FiscalCodeError(Exception):
    """Raised when a pipeline stage rejects the code."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
