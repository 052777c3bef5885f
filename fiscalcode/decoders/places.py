"""Place registry: 4-character place code → municipality / country record.

Loaded once from a JSON object keyed by place code (codici catastali for
Italian municipalities, Z-codes for foreign countries):

    {"H501": {"countryCode": "IT", "countryName": "Italia", "city": "Roma", "state": "RM"}}

The registry is immutable after loading and safe to share.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter, ValidationError

from fiscalcode.config import settings
from fiscalcode.schemas.fiscal_code import PlaceRecord

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(dict[str, PlaceRecord])


class PlaceRegistryError(Exception):
    """Raised when the place data file is missing or malformed."""


class PlaceRegistry:
    """Read-only mapping of place codes to PlaceRecord."""

    def __init__(self, records: Mapping[str, PlaceRecord]) -> None:
        self._records: Mapping[str, PlaceRecord] = MappingProxyType(
            {code.upper(): record for code, record in records.items()}
        )

    @classmethod
    def from_file(cls, path: Path) -> PlaceRegistry:
        """Load and validate a registry JSON file."""
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
            records = _RECORDS_ADAPTER.validate_python(raw)
        except FileNotFoundError as e:
            msg = f"Place data file not found: {path}"
            raise PlaceRegistryError(msg) from e
        except (json.JSONDecodeError, ValidationError) as e:
            msg = f"Malformed place data file {path}: {e}"
            raise PlaceRegistryError(msg) from e
        logger.debug("Loaded %d place codes from %s", len(records), path)
        return cls(records)

    def get(self, code: str) -> PlaceRecord | None:
        return self._records.get(code.upper())

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


@lru_cache(maxsize=1)
def get_registry() -> PlaceRegistry:
    """Registry loaded from settings.places_path on first use."""
    return PlaceRegistry.from_file(settings.places_path)
