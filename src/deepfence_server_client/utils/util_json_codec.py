# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared JSON encode/decode helpers for generated API models.

Every model in this package converts to a plain mapping (``to_map``) and
delegates the byte-level work to these helpers, so JSON options and error
translation live in one place.

Encoding always uses compact separators, matching the wire format the
server emits::

    {"node_id":"8e6f..."}

Decoding failures are translated into ``DeserializationError`` with the
original exception chained and a sanitized payload excerpt attached as
``payload_preview`` context.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Optional
from uuid import UUID

from deepfence_server_client.config import ModelCodecConfig
from deepfence_server_client.enums import EnumCodecOperation
from deepfence_server_client.errors import (
    DeserializationError,
    ModelCodecErrorContext,
    SerializationError,
)
from deepfence_server_client.utils.util_error_sanitization import (
    sanitize_payload_preview,
)

logger = logging.getLogger(__name__)

JsonPayload = bytes | bytearray | str

_COMPACT_SEPARATORS = (",", ":")


def encode_json(
    value: Optional[Mapping[str, object]],
    *,
    model_name: str,
    config: Optional[ModelCodecConfig] = None,
    correlation_id: Optional[UUID] = None,
) -> bytes:
    """Encode a model map (or None) to compact UTF-8 JSON bytes.

    Args:
        value: Canonical map produced by a model's ``to_map``, or None for
            an explicit JSON ``null``.
        model_name: Model name used in logs and error context.
        config: Codec configuration; defaults to ``ModelCodecConfig()``.
        correlation_id: Optional correlation ID propagated to errors.

    Returns:
        The encoded JSON document.

    Raises:
        SerializationError: If the encoder rejects the value (for example a
            non-serializable object, a non-finite float, or text that is not
            encodable as UTF-8).
    """
    config = config or ModelCodecConfig()
    try:
        data = json.dumps(
            value,
            ensure_ascii=config.ensure_ascii,
            sort_keys=config.sort_keys,
            separators=_COMPACT_SEPARATORS,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as e:
        context = ModelCodecErrorContext(
            operation=EnumCodecOperation.MARSHAL,
            model_name=model_name,
            correlation_id=correlation_id,
        )
        raise SerializationError(
            f"Failed to encode {model_name} as JSON: {type(e).__name__}",
            context=context,
        ) from e

    logger.debug(
        "Encoded %s",
        model_name,
        extra={
            "operation": EnumCodecOperation.MARSHAL.value,
            "model_name": model_name,
            "byte_length": len(data),
        },
    )
    return data


def decode_json(
    data: JsonPayload,
    *,
    model_name: str,
    config: Optional[ModelCodecConfig] = None,
    correlation_id: Optional[UUID] = None,
) -> object:
    """Decode a JSON document into Python values.

    Raises:
        DeserializationError: If ``data`` is not text or bytes, is not valid
            UTF-8, is not well-formed JSON, or is nested too deeply to parse.
    """
    config = config or ModelCodecConfig()
    context = ModelCodecErrorContext(
        operation=EnumCodecOperation.UNMARSHAL,
        model_name=model_name,
        correlation_id=correlation_id,
    )
    if not isinstance(data, (bytes, bytearray, str)):
        raise DeserializationError(
            f"Cannot decode {model_name} from {type(data).__name__}; "
            "expected bytes or str",
            context=context,
        )
    try:
        value = json.loads(data)
    except RecursionError as e:
        raise DeserializationError(
            f"JSON for {model_name} is nested too deeply to decode",
            context=context,
            payload_preview=sanitize_payload_preview(
                data, config.error_preview_length
            ),
        ) from e
    except ValueError as e:
        raise DeserializationError(
            f"Malformed JSON for {model_name}: {e}",
            context=context,
            payload_preview=sanitize_payload_preview(
                data, config.error_preview_length
            ),
        ) from e

    logger.debug(
        "Decoded %s",
        model_name,
        extra={
            "operation": EnumCodecOperation.UNMARSHAL.value,
            "model_name": model_name,
            "byte_length": len(data),
        },
    )
    return value


def decode_json_object(
    data: JsonPayload,
    *,
    model_name: str,
    config: Optional[ModelCodecConfig] = None,
    correlation_id: Optional[UUID] = None,
) -> dict[str, object]:
    """Decode a JSON document that must be an object.

    Raises:
        DeserializationError: If the document is malformed or its top-level
            value is not a JSON object.
    """
    config = config or ModelCodecConfig()
    value = decode_json(
        data,
        model_name=model_name,
        config=config,
        correlation_id=correlation_id,
    )
    if not isinstance(value, dict):
        context = ModelCodecErrorContext(
            operation=EnumCodecOperation.UNMARSHAL,
            model_name=model_name,
            correlation_id=correlation_id,
        )
        raise DeserializationError(
            f"Expected a JSON object for {model_name}, got {_json_type_name(value)}",
            context=context,
            payload_preview=sanitize_payload_preview(
                data, config.error_preview_length
            ),
        )
    return value


def _json_type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


__all__: list[str] = [
    "JsonPayload",
    "decode_json",
    "decode_json_object",
    "encode_json",
]
