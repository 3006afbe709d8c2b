# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Deepfence Server Client Errors Module.

Exports:
    ModelCodecErrorContext: Configuration model for bundled error context
    CodecError: Base codec error class
    SerializationError: Encoding failures
    DeserializationError: Decoding failures (malformed JSON, missing or mistyped fields)

Propagation:
    Codec errors are raised to the caller unchanged. Callers decoding a larger
    payload that embeds these models must let them propagate; nothing is
    retried or recovered at this layer.

Error Sanitization Guidelines:
    NEVER include raw payloads in error messages. Use
    ``sanitize_payload_preview`` for any payload excerpt placed in context.
"""

from deepfence_server_client.errors.codec_errors import (
    CodecError,
    DeserializationError,
    SerializationError,
)
from deepfence_server_client.errors.model_codec_error_context import (
    ModelCodecErrorContext,
)

__all__: list[str] = [
    "CodecError",
    "DeserializationError",
    "ModelCodecErrorContext",
    "SerializationError",
]
