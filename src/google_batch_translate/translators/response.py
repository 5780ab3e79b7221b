# SPDX-License-Identifier: Apache-2.0
"""Response decoding and failure classification."""

from __future__ import annotations

import json
from typing import Any

from google_batch_translate.core.models import TranslationResult
from google_batch_translate.errors import (
    DecodingError,
    RateLimitError,
    RequestError,
    TextTooLargeError,
    TranslationError,
)
from google_batch_translate.translators.transport import TransportFailure

_STATUS_ERRORS: dict[int, type[TranslationError]] = {
    413: TextTooLargeError,
    429: RateLimitError,
    503: RateLimitError,
}


def decode_response(body: bytes | str) -> TranslationResult | None:
    """Decode a translateHtml response body.

    Expected shape: ``[[translated, ...], [detected_source, ...]]``.

    Args:
        body: Raw response body.

    Returns:
        Decoded result, or None when the response carries no translations.

    Raises:
        DecodingError: If the body is not JSON or has an unexpected shape.
    """
    try:
        data: Any = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodingError(f"Response cannot be decoded: {e}") from e

    if not isinstance(data, list):
        raise DecodingError(
            f"Expected a JSON array, got {type(data).__name__}"
        )

    translations = data[0] if data else None
    if not translations:
        return None
    if not isinstance(translations, list) or not all(
        isinstance(t, str) for t in translations
    ):
        raise DecodingError("Translations must be an array of strings")

    metadata = data[1] if len(data) > 1 else None
    if metadata is not None and not isinstance(metadata, list):
        raise DecodingError(
            f"Expected metadata array, got {type(metadata).__name__}"
        )

    detected = None
    if metadata and isinstance(metadata[0], str):
        detected = metadata[0]

    return TranslationResult(translated_texts=translations, detected_source=detected)


def classify_failure(failure: TransportFailure) -> TranslationError:
    """Map a transport failure to the matching TranslationError subclass.

    429/503 become RateLimitError, 413 becomes TextTooLargeError and anything
    else (including failures without a status) becomes RequestError.
    """
    error_class = RequestError
    if failure.status_code is not None:
        error_class = _STATUS_ERRORS.get(failure.status_code, RequestError)
    return error_class(failure.message, status_code=failure.status_code)
