"""Console entry point for building value records."""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from pydantic import ValidationError

from vanilla.config import config
from vanilla.core.fields import UnknownFieldError, set_field
from vanilla.core.models import ValueRecord

logger = logging.getLogger(__name__)

NULL_LITERAL = "null"


def parse_assignment(text: str) -> Tuple[str, Optional[str]]:
    """Split FIELD=VALUE; the null literal becomes None.

    Raises:
        ValueError: If there is no "=" or the field name is empty
    """
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise ValueError(f"Expected FIELD=VALUE, got {text!r}")
    return name, None if value == NULL_LITERAL else value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vanilla-record",
        description="Build a value record from FIELD=VALUE assignments and print it.",
    )
    parser.add_argument(
        "assignments",
        nargs="*",
        metavar="FIELD=VALUE",
        help=f"Field name and its value; {NULL_LITERAL!r} unsets a field",
    )
    parser.add_argument("--log-level", default=None, help="Overrides VANILLA_LOG_LEVEL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the vanilla-record command."""
    args = build_parser().parse_args(argv)
    try:
        config.configure_logging(args.log_level)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    record = ValueRecord()
    try:
        for assignment in args.assignments:
            name, value = parse_assignment(assignment)
            set_field(record, name, value)
    except (ValidationError, UnknownFieldError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info(f"Built record with fields {sorted(record.model_fields_set)}")
    print(repr(record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
