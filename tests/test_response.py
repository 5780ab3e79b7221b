# SPDX-License-Identifier: Apache-2.0
"""Tests for response decoding and failure classification."""

import pytest

from google_batch_translate.errors import (
    DecodingError,
    RateLimitError,
    RequestError,
    TextTooLargeError,
)
from google_batch_translate.translators.response import (
    classify_failure,
    decode_response,
)
from google_batch_translate.translators.transport import TransportFailure


class TestDecodeResponse:
    """Tests for decode_response."""

    def test_success(self) -> None:
        """Translations and detected locale should be decoded."""
        result = decode_response(b'[["Bonjour","Au revoir"],["en","en"]]')
        assert result is not None
        assert result.translated_texts == ["Bonjour", "Au revoir"]
        assert result.detected_source == "en"

    def test_str_body(self) -> None:
        """String bodies should be accepted."""
        result = decode_response('[["Hola"],["en"]]')
        assert result is not None
        assert result.translated_texts == ["Hola"]

    def test_without_metadata(self) -> None:
        """Missing metadata should leave detected_source unset."""
        result = decode_response(b'[["Hola"]]')
        assert result is not None
        assert result.detected_source is None

    @pytest.mark.parametrize("metadata", ["null", "[]", "[null]", "[1]"])
    def test_unusable_metadata(self, metadata: str) -> None:
        """Metadata without a string locale should leave detected_source unset."""
        result = decode_response(f'[["Hola"],{metadata}]')
        assert result is not None
        assert result.detected_source is None

    @pytest.mark.parametrize("body", [b"[]", b"[[]]", b"[null]", b'[[],["en"]]'])
    def test_no_translation(self, body: bytes) -> None:
        """Absent or empty translations should return None, not raise."""
        assert decode_response(body) is None

    @pytest.mark.parametrize("body", [b"", b"not json", b'[["unterminated"', b"\xff\xfe"])
    def test_malformed_body(self, body: bytes) -> None:
        """Malformed bodies should raise DecodingError."""
        with pytest.raises(DecodingError):
            decode_response(body)

    @pytest.mark.parametrize(
        "body",
        [
            b'{"translations": ["Hola"]}',
            b'"Hola"',
            b'["Hola"]',
            b'[[1, 2]]',
            b'[["Hola"],"en"]',
        ],
    )
    def test_unexpected_shape(self, body: bytes) -> None:
        """Structurally unexpected bodies should raise DecodingError."""
        with pytest.raises(DecodingError):
            decode_response(body)


class TestClassifyFailure:
    """Tests for classify_failure."""

    @pytest.mark.parametrize("status", [429, 503])
    def test_rate_limit(self, status: int) -> None:
        """429 and 503 should map to RateLimitError."""
        error = classify_failure(TransportFailure(status, "slow down"))
        assert isinstance(error, RateLimitError)
        assert error.status_code == status
        assert str(error) == "slow down"

    def test_too_large(self) -> None:
        """413 should map to TextTooLargeError."""
        error = classify_failure(TransportFailure(413, "too large"))
        assert isinstance(error, TextTooLargeError)
        assert error.status_code == 413

    @pytest.mark.parametrize("status", [400, 403, 404, 500, 502])
    def test_other_status(self, status: int) -> None:
        """Other statuses should map to RequestError."""
        error = classify_failure(TransportFailure(status, "boom"))
        assert type(error) is RequestError
        assert error.status_code == status

    def test_no_status(self) -> None:
        """Failures without a status should map to RequestError."""
        error = classify_failure(TransportFailure(None, "DNS failure"))
        assert type(error) is RequestError
        assert error.status_code is None
        assert "DNS failure" in str(error)
