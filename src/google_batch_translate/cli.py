# SPDX-License-Identifier: Apache-2.0
"""
Google Batch Translate - CLI Tool

Translates a batch of texts in one request, optionally preserving
placeholders such as ``:name``.

Usage:
    batch-translate [TEXT ...] [options]

Examples:
    batch-translate "Hello" "Goodbye" -t fr
    batch-translate "Hello :name" -t de -p            # Keep :name intact
    batch-translate -f strings.txt -s en -t ja --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, NoReturn

import aiohttp

from google_batch_translate.config import TranslatorConfig
from google_batch_translate.errors import TranslatorError
from google_batch_translate.translators.google import GoogleBatchTranslator

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "GOOGLE_TRANSLATE_API_KEY"
PROXY_ENV_VAR = "GOOGLE_TRANSLATE_PROXY"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``).

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="batch-translate",
        description="Translate a batch of texts with Google Translate",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s "Hello" "Goodbye" -t fr              # English (detected) to French
  %(prog)s "Hello :name" -t de -p               # Preserve :name placeholders
  %(prog)s "Hi {{user}}" -t es --pattern "\\{{\\w+\\}}"  # Custom placeholder pattern
  %(prog)s -f strings.txt -s en -t ja --json    # Texts from file, JSON output

Environment Variables:
  {TOKEN_ENV_VAR}   API key (default: built-in web key)
  {PROXY_ENV_VAR}    Proxy URL
""",
    )

    # Input
    parser.add_argument(
        "texts",
        nargs="*",
        metavar="TEXT",
        help="Texts to translate",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="File with one text per line ('-' reads stdin)",
    )

    # Language options
    parser.add_argument(
        "-s",
        "--source",
        default=None,
        help="Source language code (default: auto-detect)",
    )
    parser.add_argument(
        "-t",
        "--target",
        default="en",
        help="Target language code (default: en)",
    )

    # Placeholder options
    parser.add_argument(
        "-p",
        "--preserve-parameters",
        action="store_true",
        help="Preserve placeholders (default pattern: ':(\\w+)')",
    )
    parser.add_argument(
        "--pattern",
        metavar="PATTERN",
        help="Custom placeholder regex (implies --preserve-parameters)",
    )

    # Connection options
    conn_group = parser.add_argument_group("Connection options")
    conn_group.add_argument(
        "--token",
        help=f"API key (or set {TOKEN_ENV_VAR})",
    )
    conn_group.add_argument(
        "--proxy",
        help=f"Proxy URL (or set {PROXY_ENV_VAR})",
    )
    conn_group.add_argument(
        "--url",
        help="Endpoint URL (default: translateHtml endpoint)",
    )
    conn_group.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds",
    )

    # Output options
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print translations and detected source as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def read_texts(args: argparse.Namespace) -> list[str]:
    """Collect texts from positional arguments and the optional input file.

    Args:
        args: Command line arguments.

    Returns:
        Texts in input order. Blank file lines are skipped.
    """
    texts = list(args.texts)
    if args.file is not None:
        if str(args.file) == "-":
            content = sys.stdin.read()
        else:
            content = args.file.read_text(encoding="utf-8")
        texts.extend(line for line in content.splitlines() if line.strip())
    return texts


def build_config(args: argparse.Namespace) -> TranslatorConfig:
    """Create translator configuration from arguments and environment.

    Args:
        args: Command line arguments.

    Returns:
        Translator configuration.

    Raises:
        ConfigurationError: On invalid values.
    """
    options: dict[str, Any] = {}
    if args.timeout is not None:
        options["timeout"] = aiohttp.ClientTimeout(total=args.timeout)

    return TranslatorConfig.create(
        target=args.target,
        source=args.source,
        options=options,
        token=args.token or os.environ.get(TOKEN_ENV_VAR) or None,
        preserve_parameters=args.pattern or args.preserve_parameters,
        proxy=args.proxy or os.environ.get(PROXY_ENV_VAR) or None,
        url=args.url,
    )


async def run(args: argparse.Namespace) -> int:
    """Execute batch translation.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    try:
        texts = read_texts(args)
    except OSError as e:
        print(f"Error: Cannot read input: {e}", file=sys.stderr)
        return 1

    if not texts:
        print("Error: No texts to translate", file=sys.stderr)
        return 1

    try:
        config = build_config(args)
        async with GoogleBatchTranslator(config=config) as translator:
            translations = await translator.translate(texts)
            detected = translator.last_detected_source
    except TranslatorError as e:
        print(f"Error: Translation failed: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    if translations is None:
        print("Error: No translation returned", file=sys.stderr)
        return 1

    if args.json:
        print(
            json.dumps(
                {"translations": translations, "detected_source": detected},
                ensure_ascii=False,
                indent=2,
            )
        )
    else:
        for line in translations:
            print(line)

    if detected:
        logger.info("Detected source language: %s", detected)

    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
