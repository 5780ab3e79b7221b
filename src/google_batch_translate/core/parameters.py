# SPDX-License-Identifier: Apache-2.0
"""Placeholder masking and restoration.

Template placeholders such as ``:name`` would be mangled by the remote
translator. Before sending, each placeholder is replaced with a numeric marker
(``${0}``, ``${1}``, ...). After translation the markers are swapped back for
the original literals.

Usage:
    pattern = compile_pattern(True)
    replacements = extract_parameters("Hello :name", pattern)  # [":name"]
    masked = mask_parameters("Hello :name", pattern)            # "Hello ${0}"
    inject_parameters("Bonjour ${0}", replacements)             # "Bonjour :name"
"""

from __future__ import annotations

import itertools
import logging
import re
from collections.abc import Iterator, Sequence

from google_batch_translate.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Matches ":identifier" tokens
DEFAULT_PARAMETER_PATTERN = r":(\w+)"

MARKER_PATTERN = re.compile(r"\$\{(\d+)\}")


def compile_pattern(
    preserve_parameters: bool | str | re.Pattern[str] | None,
) -> re.Pattern[str] | None:
    """Resolve a preserve-parameters setting to a compiled pattern.

    Args:
        preserve_parameters: True for the default ``:(\\w+)`` pattern,
            False or None to disable preservation, or a custom regex.

    Returns:
        Compiled pattern, or None when preservation is disabled.

    Raises:
        ConfigurationError: If the custom regex does not compile.
    """
    if preserve_parameters is None or preserve_parameters is False:
        return None
    if preserve_parameters is True:
        return re.compile(DEFAULT_PARAMETER_PATTERN)
    if isinstance(preserve_parameters, re.Pattern):
        return preserve_parameters
    try:
        return re.compile(preserve_parameters)
    except re.error as e:
        raise ConfigurationError(
            f"Invalid parameter pattern {preserve_parameters!r}: {e}"
        ) from e


def _iter_protected(
    text: str, pattern: re.Pattern[str]
) -> Iterator[re.Match[str]]:
    """Yield placeholder matches and pre-existing ``${i}`` literals, left to right.

    Literal markers already in ``text`` are protected like placeholders so
    that injection cannot confuse them with generated markers. On equal start
    positions the literal marker wins.
    """
    pos = 0
    while pos <= len(text):
        candidates = [
            m
            for m in (MARKER_PATTERN.search(text, pos), pattern.search(text, pos))
            if m is not None
        ]
        if not candidates:
            return
        found = min(candidates, key=lambda m: m.start())
        yield found
        pos = found.end() if found.end() > found.start() else found.end() + 1


def extract_parameters(text: str, pattern: re.Pattern[str] | None) -> list[str]:
    """Return the literal placeholder matches in ``text``, in order.

    Literal ``${i}`` sequences already present in ``text`` are included so
    they survive the mask/inject round trip verbatim.
    """
    if pattern is None:
        return []
    return [match.group(0) for match in _iter_protected(text, pattern)]


def mask_parameters(
    text: str,
    pattern: re.Pattern[str] | None,
    counter: Iterator[int] | None = None,
) -> str:
    """Replace each placeholder match with a ``${i}`` marker.

    Marker indices are drawn from ``counter``. A fresh counter starting at
    zero is used when none is given, so markers line up with the list returned
    by :func:`extract_parameters` for the same text. Passing one counter to
    several calls keeps numbering across them.

    Args:
        text: Text to mask.
        pattern: Placeholder pattern, or None to return ``text`` unchanged.
        counter: Source of marker indices.

    Returns:
        Masked text.
    """
    if pattern is None:
        return text
    indices = counter if counter is not None else itertools.count()
    parts: list[str] = []
    last = 0
    for match in _iter_protected(text, pattern):
        parts.append(text[last : match.start()])
        parts.append(f"${{{next(indices)}}}")
        last = match.end()
    parts.append(text[last:])
    return "".join(parts)


def inject_parameters(text: str, replacements: Sequence[str]) -> str:
    """Restore ``${i}`` markers in ``text`` to ``replacements[i]``.

    Markers whose index has no replacement are left in place.
    """
    if not replacements:
        return text

    def _restore(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(replacements):
            return replacements[index]
        logger.warning(
            "No replacement for marker %s (%d parameters extracted)",
            match.group(0),
            len(replacements),
        )
        return match.group(0)

    return MARKER_PATTERN.sub(_restore, text)
