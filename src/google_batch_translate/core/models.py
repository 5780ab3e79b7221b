# SPDX-License-Identifier: Apache-2.0
"""Data models for batch translation requests and results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TranslationRequest:
    """One batch sent to the remote endpoint.

    Attributes:
        texts: Texts to translate (order is preserved in the result).
        source: Source language code, or "auto" for detection.
        target: Target language code.
    """

    texts: list[str] = field(default_factory=list)
    source: str = "auto"
    target: str = "en"


@dataclass(frozen=True)
class TranslationResult:
    """Decoded response of one batch call.

    Attributes:
        translated_texts: Translations, parallel to the request texts.
        detected_source: Source language reported by the endpoint, unvalidated.
    """

    translated_texts: list[str]
    detected_source: str | None = None
