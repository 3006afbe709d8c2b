# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for the JSON model codec."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

__all__: list[str] = [
    "ModelCodecConfig",
]

ENV_ENSURE_ASCII: Final[str] = "DEEPFENCE_CLIENT_JSON_ENSURE_ASCII"
ENV_SORT_KEYS: Final[str] = "DEEPFENCE_CLIENT_JSON_SORT_KEYS"
ENV_ERROR_PREVIEW_LENGTH: Final[str] = "DEEPFENCE_CLIENT_ERROR_PREVIEW_LENGTH"

_DEFAULT_ERROR_PREVIEW_LENGTH: Final[int] = 120

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def _parse_int(name: str, value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e
    if parsed < 0:
        raise ValueError(f"{name} must be non-negative, got {parsed}")
    return parsed


@dataclass(frozen=True)
class ModelCodecConfig:
    """Configuration for encoding and decoding models.

    Attributes:
        ensure_ascii: Escape non-ASCII characters in encoded JSON.
        sort_keys: Emit object keys in sorted order.
        error_preview_length: Maximum length of the sanitized payload excerpt
            attached to decode errors.
    """

    ensure_ascii: bool = False
    sort_keys: bool = False
    error_preview_length: int = _DEFAULT_ERROR_PREVIEW_LENGTH

    @classmethod
    def from_env(cls) -> ModelCodecConfig:
        """Create config from environment variables.

        Reads DEEPFENCE_CLIENT_JSON_ENSURE_ASCII, DEEPFENCE_CLIENT_JSON_SORT_KEYS
        and DEEPFENCE_CLIENT_ERROR_PREVIEW_LENGTH. Unset variables keep their
        defaults.

        Returns:
            ModelCodecConfig populated from environment.

        Raises:
            ValueError: If the preview length is not a non-negative integer.
        """
        preview_length = os.environ.get(ENV_ERROR_PREVIEW_LENGTH)
        return cls(
            ensure_ascii=_parse_bool(os.environ.get(ENV_ENSURE_ASCII, "false")),
            sort_keys=_parse_bool(os.environ.get(ENV_SORT_KEYS, "false")),
            error_preview_length=(
                _DEFAULT_ERROR_PREVIEW_LENGTH
                if preview_length is None
                else _parse_int(ENV_ERROR_PREVIEW_LENGTH, preview_length)
            ),
        )
