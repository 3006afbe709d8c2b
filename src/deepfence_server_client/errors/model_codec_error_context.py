# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Codec Error Context Configuration Model.

This module defines the configuration model for codec error context,
bundling the structured fields shared by every serialization and
deserialization error.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from deepfence_server_client.enums import EnumCodecOperation


class ModelCodecErrorContext(BaseModel):
    """Configuration model for codec error context.

    Attributes:
        operation: Codec operation being performed (to_map, marshal, unmarshal)
        model_name: Name of the model being encoded or decoded
        correlation_id: Request correlation ID for distributed tracing

    Example:
        >>> context = ModelCodecErrorContext(
        ...     operation=EnumCodecOperation.UNMARSHAL,
        ...     model_name="ModelAgentId",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise DeserializationError("Invalid payload", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[EnumCodecOperation] = Field(
        default=None,
        description="Codec operation being performed (to_map, marshal, unmarshal)",
    )
    model_name: Optional[str] = Field(
        default=None,
        description="Name of the model being encoded or decoded",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelCodecErrorContext:
        """Create a context with a correlation ID, generating one if absent.

        Args:
            correlation_id: Existing correlation ID to propagate, or None.
            **kwargs: Remaining context fields (operation, model_name).

        Returns:
            A context whose correlation_id is always populated.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelCodecErrorContext"]
