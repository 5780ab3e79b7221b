# SPDX-License-Identifier: Apache-2.0
"""Request payload and header construction for the translateHtml endpoint."""

from __future__ import annotations

import json
from typing import Any

from google_batch_translate.core.models import TranslationRequest

# Client identifier expected in the second slot of the payload
CLIENT_ID = "wt_lib"

CONTENT_TYPE = "application/json+protobuf"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36 Edg/123.0.0.0"
)


def build_payload(request: TranslationRequest) -> list[Any]:
    """Build the nested payload ``[[texts, source, target], client_id]``.

    A fresh structure is returned on every call.
    """
    if request.texts is None:
        raise ValueError("texts must not be None")
    return [
        [list(request.texts), request.source or "auto", request.target],
        CLIENT_ID,
    ]


def encode_payload(request: TranslationRequest) -> bytes:
    """Serialize the payload as compact UTF-8 JSON."""
    return json.dumps(
        build_payload(request), ensure_ascii=False, separators=(",", ":")
    ).encode("utf-8")


def build_headers(body: bytes, token: str) -> dict[str, str]:
    """Build the request headers for ``body``.

    Args:
        body: Serialized request body.
        token: API key.

    Returns:
        Header mapping.
    """
    return {
        "Accept": "*/*",
        "Accept-Encoding": "gzip, deflate, br, zstd",
        "Content-Length": str(len(body)),
        "Content-Type": CONTENT_TYPE,
        "User-Agent": USER_AGENT,
        "X-Goog-Api-Key": token,
    }
