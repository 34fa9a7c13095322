"""
Vinculum CLI — тонкая обёртка над arabic_to_vinculum / vinculum_to_arabic.

Usage:
    vinculum encode 3999 4000
    vinculum decode XIV "V̅I̅"
    vinculum --json encode 1994
"""

import argparse
import json
import sys
from typing import Optional, Sequence, Union

import structlog

from src.cli.logging_config import LOG_LEVELS, configure_logging, default_log_level
from src.core.contracts import validate_conversion_result
from src.core.domain import ConversionDirection, ConversionResult
from src.core.numerals import VinculumError, arabic_to_vinculum, vinculum_to_arabic

log = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vinculum",
        description="Convert between integers and vinculum Roman numerals",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one ConversionResult JSON document per line",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Log level (default: $VINCULUM_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Integer → vinculum numeral")
    encode.add_argument("values", nargs="+", type=int, help="Non-negative integers")

    decode = subparsers.add_parser("decode", help="Vinculum numeral → integer")
    decode.add_argument("numerals", nargs="+", help="Vinculum numerals")

    return parser


def convert(command: str, raw: Union[int, str]) -> ConversionResult:
    """
    Одна конвертация в направлении command.

    Raises:
        VinculumError: ошибки кодека пробрасываются без изменений
    """
    if command == "encode":
        numeral = arabic_to_vinculum(raw)
        return ConversionResult(
            direction=ConversionDirection.ENCODE, arabic=raw, vinculum=numeral
        )

    value = vinculum_to_arabic(raw)
    return ConversionResult(
        direction=ConversionDirection.DECODE, arabic=value, vinculum=raw
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = args.log_level or default_log_level()
    except ValueError as e:
        parser.error(str(e))
    configure_logging(level)

    inputs = args.values if args.command == "encode" else args.numerals
    log.debug("cli_start", command=args.command, count=len(inputs))

    for raw in inputs:
        try:
            result = convert(args.command, raw)
        except VinculumError as e:
            log.warning("conversion_failed", command=args.command, input=raw, error=str(e))
            print(f"error: {e}", file=sys.stderr)
            return 1

        log.debug(
            "converted",
            direction=result.direction.value,
            arabic=result.arabic,
            vinculum=result.vinculum,
        )
        if args.json:
            document = result.model_dump(mode="json")
            validate_conversion_result(document)
            print(json.dumps(document, ensure_ascii=False))
        elif args.command == "encode":
            print(result.vinculum)
        else:
            print(result.arabic)

    return 0
