# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Field presence enumeration for nullable wrapper models."""

from enum import Enum


class EnumFieldPresence(str, Enum):
    """Presence state of an optional field in a JSON payload.

    Attributes:
        OMITTED: The key is absent and must not be written by the parent object.
        NULL: The key is present with an explicit JSON ``null``.
        PRESENT: The key is present with a concrete value.
    """

    OMITTED = "omitted"
    NULL = "null"
    PRESENT = "present"

    def is_set(self) -> bool:
        """Return True when the key appears in the serialized parent object."""
        return self is not EnumFieldPresence.OMITTED


__all__: list[str] = ["EnumFieldPresence"]
