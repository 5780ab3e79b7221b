# SPDX-License-Identifier: Apache-2.0
"""Core translation helpers: locale validation, placeholder codec, models."""

from .locale import is_valid_locale
from .models import TranslationRequest, TranslationResult
from .parameters import (
    DEFAULT_PARAMETER_PATTERN,
    compile_pattern,
    extract_parameters,
    inject_parameters,
    mask_parameters,
)

__all__ = [
    "DEFAULT_PARAMETER_PATTERN",
    "TranslationRequest",
    "TranslationResult",
    "compile_pattern",
    "extract_parameters",
    "inject_parameters",
    "is_valid_locale",
    "mask_parameters",
]
