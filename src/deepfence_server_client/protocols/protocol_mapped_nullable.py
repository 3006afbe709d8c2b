# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for generated API models.

Every generated model converts to a canonical mapping before encoding,
which lets parent models and the nullable wrapper embed it without
knowing its concrete type.

Example:
    >>> isinstance(ModelAgentId.new("host-1"), ProtocolMappedNullable)
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from typing import Self

    from deepfence_server_client.config import ModelCodecConfig


@runtime_checkable
class ProtocolMappedNullable(Protocol):
    """Protocol for models that expose a canonical pre-serialization map."""

    def to_map(self) -> dict[str, object]:
        """Return the JSON-ready mapping for this model."""
        ...


@runtime_checkable
class ProtocolCodecModel(ProtocolMappedNullable, Protocol):
    """Protocol for models that can be encoded and rebuilt from a mapping.

    Methods:
        to_map: Canonical mapping for encoding
        from_map: Validate a decoded JSON object into a new instance
        marshal: Encode to JSON bytes
    """

    @classmethod
    def from_map(
        cls,
        data: Mapping[str, object],
        *,
        correlation_id: Optional[UUID] = None,
    ) -> Self:
        """Validate a decoded JSON object into a new instance."""
        ...

    def marshal(
        self,
        *,
        config: Optional[ModelCodecConfig] = None,
        correlation_id: Optional[UUID] = None,
    ) -> bytes:
        """Encode this model as JSON bytes."""
        ...


__all__: list[str] = [
    "ProtocolCodecModel",
    "ProtocolMappedNullable",
]
