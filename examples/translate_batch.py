#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Batch translation example.

Shows basic usage of google-batch-translate: placeholder preservation,
detected source language, and a caller-side retry loop for rate limits
(the library itself never retries).

Usage:
    cd examples
    python translate_batch.py

Environment variables (read from .env automatically):
    GOOGLE_TRANSLATE_API_KEY: API key (optional, default web key is used)
    GOOGLE_TRANSLATE_PROXY: Proxy URL (optional)
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add src to path (for development)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

# Load .env file from project root
load_dotenv(PROJECT_ROOT / ".env")


# =============================================================================
# Settings
# =============================================================================

SOURCE_LANG = None  # None = auto-detect
TARGET_LANG = "fr"

# True = default ":(\w+)" pattern, or a custom regex string
PRESERVE_PARAMETERS: bool | str = True

TEXTS = [
    "Hello :name, welcome back!",
    "You have :count new messages.",
    "Goodbye",
]

MAX_RETRIES = 3
RETRY_DELAY = 1.0


# =============================================================================
# Main
# =============================================================================


async def translate_with_retry(translator, texts: list[str]) -> list[str] | None:
    """Translate, backing off exponentially on rate limits."""
    from google_batch_translate import RateLimitError

    attempt = 0
    while True:
        try:
            return await translator.translate(texts)
        except RateLimitError:
            if attempt >= MAX_RETRIES:
                raise
            delay = RETRY_DELAY * (2**attempt)
            print(f"Rate limited, retrying in {delay:.1f}s...")
            await asyncio.sleep(delay)
            attempt += 1


async def main() -> None:
    from google_batch_translate import GoogleBatchTranslator, TranslatorError

    print("=" * 60)
    print("Batch Translation Example")
    print("=" * 60)
    print(f"Languages:  {SOURCE_LANG or 'auto'} -> {TARGET_LANG}")
    print(f"Parameters: {PRESERVE_PARAMETERS}")
    print("=" * 60)

    async with GoogleBatchTranslator(
        target=TARGET_LANG,
        source=SOURCE_LANG,
        token=os.environ.get("GOOGLE_TRANSLATE_API_KEY") or None,
        preserve_parameters=PRESERVE_PARAMETERS,
        proxy=os.environ.get("GOOGLE_TRANSLATE_PROXY") or None,
    ) as translator:
        try:
            results = await translate_with_retry(translator, TEXTS)
        except TranslatorError as e:
            print(f"Error: {e}")
            sys.exit(1)

        if results is None:
            print("No translation returned")
            sys.exit(1)

        for original, translated in zip(TEXTS, results):
            print(f"{original}\n  -> {translated}")
        print(f"\nDetected source: {translator.last_detected_source}")


if __name__ == "__main__":
    asyncio.run(main())
