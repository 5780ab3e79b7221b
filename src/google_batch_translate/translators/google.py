# SPDX-License-Identifier: Apache-2.0
"""Batch translation through the Google translateHtml web endpoint."""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from google_batch_translate.config import TranslatorConfig
from google_batch_translate.core.locale import is_valid_locale
from google_batch_translate.core.models import TranslationRequest, TranslationResult
from google_batch_translate.core.parameters import (
    compile_pattern,
    extract_parameters,
    inject_parameters,
    mask_parameters,
)
from google_batch_translate.errors import ConfigurationError, DecodingError
from google_batch_translate.translators.request import build_headers, encode_payload
from google_batch_translate.translators.response import (
    classify_failure,
    decode_response,
)
from google_batch_translate.translators.transport import (
    AiohttpTransport,
    Transport,
    TransportFailure,
)

logger = logging.getLogger(__name__)


class GoogleBatchTranslator:
    """Google Translate batch backend.

    Sends a whole batch of texts in a single request to the unofficial
    translateHtml endpoint. Placeholders matching the configured pattern are
    masked before sending and restored afterwards.

    Attributes:
        name: Backend identifier ("google").
    """

    def __init__(
        self,
        target: str = "en",
        source: str | None = None,
        options: Mapping[str, Any] | None = None,
        token: str | None = None,
        preserve_parameters: bool | str | re.Pattern[str] | None = False,
        proxy: str | None = None,
        *,
        url: str | None = None,
        config: TranslatorConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize GoogleBatchTranslator.

        Args:
            target: Target language code.
            source: Source language code (None for automatic detection).
            options: Extra HTTP request options passed to the transport.
            token: API key (None for the default key).
            preserve_parameters: True for the default ``:(\\w+)`` pattern,
                or a custom regex. False disables preservation.
            proxy: Proxy URL.
            url: Endpoint URL (None for the default endpoint).
            config: Complete configuration. Overrides all other settings.
            transport: Transport to send requests with. An aiohttp transport
                is created (and owned) when omitted.

        Raises:
            ConfigurationError: On invalid configuration values.
        """
        if config is None:
            config = TranslatorConfig.create(
                target=target,
                source=source,
                options=options,
                token=token,
                preserve_parameters=preserve_parameters,
                proxy=proxy,
                url=url,
            )
        self._config = config
        self._owns_transport = transport is None
        self._transport: Transport = transport or AiohttpTransport()
        self._last_detected_source: str | None = None

    @property
    def name(self) -> str:
        """Return backend name."""
        return "google"

    @property
    def config(self) -> TranslatorConfig:
        """Current configuration."""
        return self._config

    @property
    def last_detected_source(self) -> str | None:
        """Source language detected by the most recent successful call."""
        return self._last_detected_source

    def reconfigure(self, **changes: Any) -> TranslatorConfig:
        """Replace the configuration with an updated copy.

        Accepts ``TranslatorConfig`` field names, plus ``preserve_parameters``
        in any form accepted by the constructor. ``pattern`` accepts the same
        forms.

        Returns:
            The new configuration.

        Raises:
            ConfigurationError: On invalid values.
        """
        if "preserve_parameters" in changes:
            changes["pattern"] = changes.pop("preserve_parameters")
        if "pattern" in changes:
            changes["pattern"] = compile_pattern(changes["pattern"])
        try:
            self._config = dataclasses.replace(self._config, **changes)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration option: {e}") from e
        return self._config

    async def __aenter__(self) -> GoogleBatchTranslator:
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the transport if this translator created it."""
        if self._owns_transport and isinstance(self._transport, AiohttpTransport):
            await self._transport.close()

    async def translate(self, texts: Sequence[str]) -> list[str] | None:
        """Translate a batch of texts.

        Args:
            texts: Texts to translate.

        Returns:
            Translated texts (same order and length as input), or None when
            the endpoint returned no translation.

        Raises:
            RateLimitError: On HTTP 429/503.
            TextTooLargeError: On HTTP 413.
            RequestError: On any other transport failure.
            DecodingError: If the response cannot be decoded.
        """
        config = self._config
        texts = list(texts)
        if not texts:
            return []

        # Same source and target: nothing to translate
        if config.source is not None and config.source == config.target:
            logger.debug("Source equals target (%s), skipping request", config.target)
            return texts

        parameters = [extract_parameters(text, config.pattern) for text in texts]
        masked = [mask_parameters(text, config.pattern) for text in texts]

        result = await self._request(
            TranslationRequest(
                texts=masked,
                source=config.effective_source,
                target=config.target,
            ),
            config,
        )
        if result is None:
            logger.debug("Endpoint returned no translation")
            return None

        if len(result.translated_texts) != len(texts):
            raise DecodingError(
                f"Endpoint returned {len(result.translated_texts)} translations "
                f"for {len(texts)} texts"
            )

        if is_valid_locale(result.detected_source):
            self._last_detected_source = result.detected_source
        else:
            logger.debug("Ignoring detected source %r", result.detected_source)

        return [
            inject_parameters(translated, replacements)
            for translated, replacements in zip(result.translated_texts, parameters)
        ]

    async def _request(
        self,
        request: TranslationRequest,
        config: TranslatorConfig,
    ) -> TranslationResult | None:
        """Send one request and decode the response.

        Raises:
            TranslationError: On transport failure (classified by status).
            DecodingError: If the response cannot be decoded.
        """
        body = encode_payload(request)
        headers = build_headers(body, config.token)
        logger.debug(
            "Translating %d texts (%s -> %s)",
            len(request.texts),
            request.source,
            request.target,
        )
        try:
            raw = await self._transport.send(
                config.url,
                headers,
                body,
                proxy=config.proxy,
                options=config.options,
            )
        except TransportFailure as e:
            raise classify_failure(e) from e
        return decode_response(raw)

    @classmethod
    async def translate_once(
        cls,
        texts: Sequence[str],
        target: str = "en",
        source: str | None = None,
        options: Mapping[str, Any] | None = None,
        token: str | None = None,
        preserve_parameters: bool | str | re.Pattern[str] | None = False,
        proxy: str | None = None,
        *,
        transport: Transport | None = None,
    ) -> list[str] | None:
        """Translate a batch with a one-off translator.

        Takes the same arguments as the constructor plus ``texts``.

        Returns:
            Translated texts, or None when the endpoint returned no translation.
        """
        async with cls(
            target=target,
            source=source,
            options=options,
            token=token,
            preserve_parameters=preserve_parameters,
            proxy=proxy,
            transport=transport,
        ) as translator:
            return await translator.translate(texts)
