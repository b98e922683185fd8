#!/usr/bin/env python3
"""
ES123 course programs.

Command line entry point that:
- loads course settings (defaults, optionally merged with a JSON file)
- runs one console program against standard input
- optionally times the run with a Timer
"""
import argparse
import logging
import sys
from pathlib import Path

import orjson

from es123.adapters.console import ConsoleReader
from es123.application.programs import PROGRAMS, InvalidInputError
from es123.core.settings import SettingsError, SettingsService
from es123.timer import Timer, TimerError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_USAGE = 2

LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='es123',
        description='ES123 course programs'
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Optional: JSON settings file'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Log level for messages on stderr (default: WARNING)'
    )
    parser.add_argument(
        '--time',
        action='store_true',
        help='Print the elapsed time after the program output'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON (prompts go to stderr)'
    )

    subparsers = parser.add_subparsers(dest='program', required=True)
    subparsers.add_parser('greet', help='Say hello to someone, age included')
    subparsers.add_parser('operators', help='Apply operators to a floating point value')
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, stream=sys.stderr)


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.config is not None:
            config = SettingsService.load_file(args.config)
        else:
            config = SettingsService.load_defaults()
        timer = Timer(clock_name=config.clock)
    except (SettingsError, TimerError) as e:
        logger.error(f"Configuration failed: {e}")
        print(f"es123: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    out = sys.stdout
    prompt_out = sys.stderr if args.json else out
    reader = ConsoleReader(sys.stdin)

    logger.debug(f"Running program {args.program}")
    timer.start()
    try:
        result = PROGRAMS[args.program](reader, prompt_out, config)
    except InvalidInputError as e:
        print(f"\nes123: error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        out.write(orjson.dumps(result.model_dump()).decode('utf-8') + '\n')
    else:
        for line in result.lines(config.float_precision):
            print(line, file=out)

    if args.time:
        # keep stdout a single JSON document
        timer.report(prompt_out)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
