"""
Command-line runner for the alphanumeric text guard.

Usage:
    textguard "Hello World 2024"
    printf 'one\ntwo!\n' | textguard -
"""

import argparse
import logging
import os
import sys
from functools import partial

import anyio
from dotenv import load_dotenv

from textguard.engine import Engine

load_dotenv()

logger = logging.getLogger("textguard_cli")


async def run(texts, engine):
    results = []
    for text in texts:
        # Validation is synchronous; keep it off the event loop
        result = await anyio.to_thread.run_sync(engine.run, text)
        results.append(result)
    return results


def read_texts(args):
    if args.texts == ["-"]:
        return [line.rstrip("\n") for line in sys.stdin]
    return args.texts


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def log_level(value):
    level = value.upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(f"invalid log level: {value!r} (choose from {', '.join(LOG_LEVELS)})")
    return level


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="textguard")
    parser.add_argument("texts", nargs="+", help="Text to validate, or '-' to read lines from stdin")
    parser.add_argument("--fail-on-invalid", action="store_true", help="Exit with status 1 if any text is invalid")
    parser.add_argument(
        "--log-level",
        type=log_level,
        default=os.getenv("TEXTGUARD_LOG_LEVEL", "WARNING"),
        help="Logging level (default: $TEXTGUARD_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level)

    texts = read_texts(args)
    logger.info(f"Validating {len(texts)} text(s)")

    results = anyio.run(partial(run, texts, Engine.default()), backend="trio")
    for result in results:
        print(result.render())

    if args.fail_on_invalid and not all(r.is_valid for r in results):
        return 1
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
