"""CLI entry point for Lexirate."""

import argparse
import sys
from pathlib import Path

import orjson

from lexirate.config import Settings, get_settings
from lexirate.core.exceptions import LexirateError
from lexirate.core.logging import setup_logging
from lexirate.sentiment.rater import SentimentRater
from lexirate.sentiment.resources import list_samples, read_file


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexirate",
        description="Rate the sentiment of text with positive and negative word lists",
    )
    parser.add_argument(
        "--punctuation",
        choices=["split", "strip"],
        default=None,
        help="Split words at punctuation or delete it (default: from settings)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from settings)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    text_cmd = commands.add_parser("text", help="Rate a string given on the command line")
    text_cmd.add_argument("text", help="Text to rate")
    text_cmd.add_argument("--json", action="store_true", help="Print the full result as JSON")

    file_cmd = commands.add_parser("file", help="Rate the contents of a UTF-8 text file")
    file_cmd.add_argument("path", type=Path, help="File to rate")
    file_cmd.add_argument("--json", action="store_true", help="Print the full result as JSON")

    commands.add_parser("samples", help="Rate every bundled sample text")
    commands.add_parser("lexicon", help="Show word list sizes and overlap")
    return parser


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    overrides: dict[str, str] = {}
    if args.punctuation:
        overrides["punctuation_mode"] = args.punctuation
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


def _emit(rater: SentimentRater, text: str, as_json: bool) -> None:
    if as_json:
        payload = orjson.dumps(rater.analyze(text).to_dict(), option=orjson.OPT_INDENT_2)
        print(payload.decode())
    else:
        print(rater.rate(text))


def _run(args: argparse.Namespace, rater: SentimentRater) -> int:
    if args.command == "text":
        _emit(rater, args.text, args.json)
        return 0

    if args.command == "file":
        text = read_file(args.path)
        if text is None:
            print(f"error: could not read {args.path}", file=sys.stderr)
            return 1
        _emit(rater, text, args.json)
        return 0

    if args.command == "samples":
        for name in list_samples():
            print(f"{name}: {rater.rate_sample(name) or '(unreadable)'}")
        return 0

    lexicon = rater.lexicon
    print(f"positive: {len(lexicon.positive)}")
    print(f"negative: {len(lexicon.negative)}")
    overlap = sorted(lexicon.overlap)
    print(f"overlap: {len(overlap)}" + (f" ({', '.join(overlap)})" if overlap else ""))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _resolve_settings(args)
        setup_logging(settings)
        rater = SentimentRater.from_settings(settings)
        return _run(args, rater)
    except LexirateError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1
