# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the Deepfence server client models.

Exports:
    EnumCodecOperation: Codec operation (TO_MAP, MARSHAL, UNMARSHAL)
    EnumFieldPresence: Tri-state presence of an optional field (OMITTED, NULL, PRESENT)
"""

from deepfence_server_client.enums.enum_codec_operation import EnumCodecOperation
from deepfence_server_client.enums.enum_field_presence import EnumFieldPresence

__all__: list[str] = [
    "EnumCodecOperation",
    "EnumFieldPresence",
]
