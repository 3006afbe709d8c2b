# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Codec operation enumeration used in error context and debug logging."""

from enum import Enum


class EnumCodecOperation(str, Enum):
    """Operation a model codec was performing."""

    TO_MAP = "to_map"
    MARSHAL = "marshal"
    UNMARSHAL = "unmarshal"


__all__: list[str] = ["EnumCodecOperation"]
