"""Domain enums used across the decoders and Pydantic schemas.

All enums use str mixin for JSON serialization.
"""

from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Sex encoded in the day field (day + 40 for women)."""

    MALE = "M"
    FEMALE = "F"


class CodeKind(str, Enum):
    """Which of the two fiscal code shapes an input matched."""

    STANDARD = "standard"  # 16 alphanumeric characters
    PROVISIONAL = "provisional"  # 11 digits


class ErrorKind(str, Enum):
    """Why a fiscal code was rejected — exactly one per rejected input."""

    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_MONTH = "invalid_month"
    INVALID_DAY = "invalid_day"
    INVALID_DATE = "invalid_date"
    UNKNOWN_BIRTH_PLACE = "unknown_birth_place"
    UNSUPPORTED_OPERATION = "unsupported_operation"  # decode on a provisional code
