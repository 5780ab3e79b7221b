# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for google-batch-translate."""

from __future__ import annotations


class TranslatorError(Exception):
    """Base exception for translator module."""

    pass


class ConfigurationError(TranslatorError):
    """Configuration error (empty API key, invalid parameter pattern, etc.).

    This error type is NOT retryable - fix the configuration first.
    """

    pass


class TranslationError(TranslatorError):
    """Error while sending a translation request.

    This error type is potentially retryable. Retry policy is left to the caller.

    Attributes:
        status_code: HTTP status reported by the transport, or None when the
            request failed before a response arrived.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(TranslationError):
    """The endpoint throttled the client (HTTP 429 or 503). Back off and retry."""


class TextTooLargeError(TranslationError):
    """The endpoint rejected the payload size (HTTP 413). Shrink the batch."""


class RequestError(TranslationError):
    """Any other transport failure (network, DNS, unexpected HTTP status)."""


class DecodingError(TranslatorError):
    """Response body is not valid JSON or does not have the expected shape."""
