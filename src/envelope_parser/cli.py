from __future__ import annotations

import argparse
import base64
import json
import logging
import sys
from collections.abc import Sequence
from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from envelope_parser.decoders import json_text
from envelope_parser.envelopes import ENVELOPES, get_envelope
from envelope_parser.errors import format_path
from envelope_parser.result import ParseFailure
from envelope_parser.settings import ParserSettings

LOGGER = logging.getLogger(__name__)


def configure_logging(settings: ParserSettings | None = None) -> None:
    settings = settings or ParserSettings()
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envelope-parser",
        description="Parse a saved AWS event and print the payloads it carries.",
    )
    parser.add_argument("kind", nargs="?", help="Envelope kind, see --list")
    parser.add_argument("event", nargs="?", type=Path, help="Path to the event JSON file")
    parser.add_argument(
        "--json-body",
        action="store_true",
        help="Decode each payload as JSON text before printing",
    )
    parser.add_argument("--list", action="store_true", help="List envelope kinds and exit")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    configure_logging()

    if args.list:
        for kind, envelope in sorted(ENVELOPES.items()):
            print(f"{kind}\t{envelope.name}")
        return 0

    if args.kind is None or args.event is None:
        arg_parser.error("kind and event are required unless --list is given")

    try:
        envelope = get_envelope(args.kind)
    except KeyError as exc:
        arg_parser.error(exc.args[0])

    try:
        event = json.loads(args.event.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        LOGGER.error("event_file_unreadable", extra={"path": str(args.event)})
        print(f"Could not read event from {args.event}: {exc}", file=sys.stderr)
        return 2

    schema: Any = json_text(Any) if args.json_body else Any
    outcome = envelope.safe_parse(event, schema)
    if isinstance(outcome, ParseFailure):
        print(outcome.error.message, file=sys.stderr)
        for issue in outcome.error.issues:
            print(
                f"{format_path(issue.path) or '<root>'}\t{issue.code}\t{issue.message}",
                file=sys.stderr,
            )
        return 1

    print(json.dumps(outcome.data, indent=2, default=_json_default))
    return 0


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
