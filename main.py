"""Command line entry point for the Google Translate v2 client."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config import APP_NAME, APP_VERSION
from gtranslate.errors import GoogleTranslateError
from settings_manager import create_client_from_settings, load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Google Translate v2 client")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML settings file")
    parser.add_argument("--key", default=None, help="API access key (overrides settings)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    translate = commands.add_parser("translate", help="Translate one or more texts")
    translate.add_argument("text", nargs="+")
    translate.add_argument("-t", "--target", required=True, help="Target language code, e.g. bn")
    translate.add_argument("-s", "--source", default=None, help="Source language code (detected if omitted)")

    languages = commands.add_parser("languages", help="List supported languages")
    languages.add_argument("-t", "--target", default=None, help="Language used for the language names")

    detect = commands.add_parser("detect", help="Detect the language of one or more texts")
    detect.add_argument("text", nargs="+")
    return parser


def _text_arg(values: List[str]):
    # One positional argument keeps the single-value result shape.
    return values[0] if len(values) == 1 else values


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run one client operation and print its result."""
    args = build_parser().parse_args(argv)
    settings = load_settings(args.config)
    if args.key:
        settings["client"]["api_key"] = args.key

    level = "DEBUG" if args.verbose else str(settings.get("logging", {}).get("level", "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))

    try:
        client = create_client_from_settings(settings)
        if args.command == "translate":
            translated, detected = client.translate(_text_arg(args.text), args.target, args.source)
            if isinstance(translated, list):
                for index, line in enumerate(translated):
                    suffix = f"\t[{detected[index]}]" if detected and detected[index] else ""
                    print(f"{line}{suffix}")
            else:
                print(translated)
                if detected:
                    print(f"detected source: {detected}")
        elif args.command == "languages":
            for entry in client.languages(args.target):
                name = entry.get("name")
                print(f"{entry.get('language')}\t{name}" if name else entry.get("language"))
        elif args.command == "detect":
            result = client.detect(_text_arg(args.text))
            for language in result if isinstance(result, list) else [result]:
                print(language)
    except GoogleTranslateError as exc:
        print(f"{APP_NAME}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
