# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the Deepfence server client models.

This package provides common utilities used by every model:
    - util_error_sanitization: Payload excerpt sanitization for error context
    - util_json_codec: Shared JSON encode/decode with error translation
    - util_nullable_fields: Parent-level omission of unset nullable fields
"""

from deepfence_server_client.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_string,
    sanitize_payload_preview,
)
from deepfence_server_client.utils.util_json_codec import (
    decode_json,
    decode_json_object,
    encode_json,
)
from deepfence_server_client.utils.util_nullable_fields import (
    dump_nullable_fields,
    marshal_nullable_fields,
)

__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "decode_json",
    "decode_json_object",
    "dump_nullable_fields",
    "encode_json",
    "marshal_nullable_fields",
    "sanitize_error_string",
    "sanitize_payload_preview",
]
