# SPDX-License-Identifier: Apache-2.0
"""Batch translation through the Google translateHtml web endpoint.

Usage:
    from google_batch_translate import GoogleBatchTranslator

    async with GoogleBatchTranslator(target="fr", preserve_parameters=True) as translator:
        result = await translator.translate(["Hello :name", "Goodbye"])
        # ["Bonjour :name", "Au revoir"]
        translator.last_detected_source  # "en"
"""

from google_batch_translate.config import (
    DEFAULT_API_KEY,
    DEFAULT_URL,
    TranslatorConfig,
    TranslatorConfigBuilder,
)
from google_batch_translate.core import (
    DEFAULT_PARAMETER_PATTERN,
    TranslationRequest,
    TranslationResult,
    extract_parameters,
    inject_parameters,
    is_valid_locale,
    mask_parameters,
)
from google_batch_translate.errors import (
    ConfigurationError,
    DecodingError,
    RateLimitError,
    RequestError,
    TextTooLargeError,
    TranslationError,
    TranslatorError,
)
from google_batch_translate.translators import (
    AiohttpTransport,
    GoogleBatchTranslator,
    Transport,
    TransportFailure,
)

__version__ = "0.1.0"

__all__ = [
    "AiohttpTransport",
    "ConfigurationError",
    "DEFAULT_API_KEY",
    "DEFAULT_PARAMETER_PATTERN",
    "DEFAULT_URL",
    "DecodingError",
    "GoogleBatchTranslator",
    "RateLimitError",
    "RequestError",
    "TextTooLargeError",
    "TranslationError",
    "TranslationRequest",
    "TranslationResult",
    "TranslatorConfig",
    "TranslatorConfigBuilder",
    "TranslatorError",
    "Transport",
    "TransportFailure",
    "extract_parameters",
    "inject_parameters",
    "is_valid_locale",
    "mask_parameters",
]
