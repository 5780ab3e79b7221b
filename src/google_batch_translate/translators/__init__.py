# SPDX-License-Identifier: Apache-2.0
"""Translation backend modules.

Usage:
    from google_batch_translate.translators import GoogleBatchTranslator
    async with GoogleBatchTranslator(target="fr", preserve_parameters=True) as translator:
        result = await translator.translate(["Hello :name", "Goodbye"])
"""

from google_batch_translate.errors import (
    ConfigurationError,
    DecodingError,
    RateLimitError,
    RequestError,
    TextTooLargeError,
    TranslationError,
    TranslatorError,
)
from google_batch_translate.translators.google import GoogleBatchTranslator
from google_batch_translate.translators.transport import (
    AiohttpTransport,
    Transport,
    TransportFailure,
)

__all__ = [
    # Exceptions
    "TranslatorError",
    "TranslationError",
    "ConfigurationError",
    "RateLimitError",
    "TextTooLargeError",
    "RequestError",
    "DecodingError",
    # Transport
    "Transport",
    "TransportFailure",
    "AiohttpTransport",
    # Backend
    "GoogleBatchTranslator",
]
