# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Deepfence Server Client - ThreatMapper API models.

Typed data-transfer models for the ThreatMapper (Deepfence) server API,
with JSON wire encoding and explicit nullability for optional fields.

Key Components:
    - ModelAgentId: Identifier of a monitored agent (``{"node_id": ...}``)
    - ModelNullableAgentId: Omitted / null / present wrapper for embedding
    - CodecError hierarchy with ModelCodecErrorContext
    - ModelCodecConfig: Environment-driven codec settings

The HTTP transport, authentication and retry policy live outside this
package; it only turns payload bytes into models and back.
"""

from deepfence_server_client.config import ModelCodecConfig
from deepfence_server_client.enums import EnumCodecOperation, EnumFieldPresence
from deepfence_server_client.errors import (
    CodecError,
    DeserializationError,
    ModelCodecErrorContext,
    SerializationError,
)
from deepfence_server_client.models import (
    ModelAgentId,
    ModelNullable,
    ModelNullableAgentId,
    new_nullable_agent_id,
)
from deepfence_server_client.protocols import (
    ProtocolCodecModel,
    ProtocolMappedNullable,
)

__all__: list[str] = [
    "CodecError",
    "DeserializationError",
    "EnumCodecOperation",
    "EnumFieldPresence",
    "ModelAgentId",
    "ModelCodecConfig",
    "ModelCodecErrorContext",
    "ModelNullable",
    "ModelNullableAgentId",
    "ProtocolCodecModel",
    "ProtocolMappedNullable",
    "SerializationError",
    "new_nullable_agent_id",
]
