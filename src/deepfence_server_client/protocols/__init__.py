# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Model protocols.

Exports:
    ProtocolMappedNullable: Models exposing ``to_map``
    ProtocolCodecModel: Models that also support ``from_map`` and ``marshal``
"""

from deepfence_server_client.protocols.protocol_mapped_nullable import (
    ProtocolCodecModel,
    ProtocolMappedNullable,
)

__all__: list[str] = [
    "ProtocolCodecModel",
    "ProtocolMappedNullable",
]
