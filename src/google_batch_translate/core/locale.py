# SPDX-License-Identifier: Apache-2.0
"""Language code validation."""

from __future__ import annotations

import re

# Lowercase primary subtag, optional region/script subtag of either case.
LOCALE_PATTERN = re.compile(r"^([a-z]{2,3})(-[A-Za-z]{2,4})?$")


def is_valid_locale(code: str | None) -> bool:
    """Check whether ``code`` looks like a language code.

    Args:
        code: Language code to verify ("en", "en-US", "zh-CN").

    Returns:
        True if the code is well formed, False otherwise (including None).
    """
    if not isinstance(code, str):
        return False
    return LOCALE_PATTERN.fullmatch(code) is not None
