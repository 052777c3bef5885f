"""Command-line entry point — checks fiscal codes given as arguments.

Usage:
    fiscalcode GNTMTT99C27H501F 12345678903
    fiscalcode --json MKSKRS92L65Z219S
    python -m fiscalcode.main CODE [CODE ...]

Exit status is 0 when every code is valid, 1 otherwise.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import structlog

from fiscalcode.config import settings
from fiscalcode.decoders.codice_fiscale import decode, validate_detailed
from fiscalcode.decoders.places import PlaceRegistryError
from fiscalcode.models.enums import CodeKind

# ── Logging setup ────────────────────────────────────────────────────


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


log = structlog.get_logger(__name__)

# ── Output ───────────────────────────────────────────────────────────


def _print_text(code: str) -> bool:
    result = validate_detailed(code)
    if not result.valid:
        print(f"{result.code}: Code is invalid ({result.error.value}: {result.message})")
        return False

    print(f"{result.code}: Code is valid")
    if result.kind is CodeKind.STANDARD:
        identity = decode(result.code).identity
        print("Info:")
        print(f"\tBorn on: {identity.born_on.isoformat()}")
        print(f"\tGender: {identity.gender.value}")
        print(f"\tAge: {identity.age}")
        print(f"\t{identity.place_of_birth}")
    return True


def _print_json(code: str) -> bool:
    result = validate_detailed(code)
    if result.valid and result.kind is CodeKind.STANDARD:
        print(decode(result.code).model_dump_json())
    else:
        print(result.model_dump_json())
    return result.valid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fiscalcode",
        description="Validate and decode Italian fiscal codes (codice fiscale)",
    )
    parser.add_argument("codes", nargs="+", metavar="CODE", help="Fiscal code to check")
    parser.add_argument("--json", action="store_true", help="Emit one JSON object per code")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point CLI"""
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level)

    emit = _print_json if args.json else _print_text
    try:
        outcomes = [emit(code) for code in args.codes]
    except PlaceRegistryError as e:
        log.error("place registry unavailable", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2

    invalid = outcomes.count(False)
    log.debug("checked fiscal codes", total=len(outcomes), invalid=invalid)
    return 1 if invalid else 0


if __name__ == "__main__":
    sys.exit(main())
