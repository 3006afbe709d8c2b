# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Codec Error Classes.

This module defines the errors raised while converting models to and from
their JSON wire representation. All error classes extend from ModelOnexError
(from omnibase_core) to stay consistent with ONEX error handling patterns.

Error Hierarchy:
    ModelOnexError (from omnibase_core)
    └── CodecError (base codec error)
        ├── SerializationError
        └── DeserializationError

All errors:
    - Extend ModelOnexError from omnibase_core
    - Use EnumCoreErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for request tracking
    - Accept ModelCodecErrorContext for bundled context parameters
"""

from typing import Optional

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from deepfence_server_client.errors.model_codec_error_context import (
    ModelCodecErrorContext,
)


class CodecError(ModelOnexError):
    """Base error class for model codec errors.

    Structured Fields (via ModelCodecErrorContext):
        operation: Codec operation being performed
        model_name: Model being encoded or decoded
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelCodecErrorContext(
        ...     operation=EnumCodecOperation.MARSHAL,
        ...     model_name="ModelAgentId",
        ... )
        >>> raise CodecError("Encoding failed", context=context, field="node_id")
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumCoreErrorCode] = None,
        context: Optional[ModelCodecErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize CodecError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled codec context (operation, model_name, correlation_id)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.model_name is not None:
                structured_context["model_name"] = context.model_name
            correlation_id = context.correlation_id

        super().__init__(
            message=message,
            error_code=error_code or EnumCoreErrorCode.OPERATION_FAILED,
            correlation_id=correlation_id,
            **structured_context,
        )


class SerializationError(CodecError):
    """Raised when a model cannot be encoded to its wire representation.

    Example:
        >>> context = ModelCodecErrorContext(
        ...     operation=EnumCodecOperation.MARSHAL,
        ...     model_name="ModelAgentId",
        ... )
        >>> raise SerializationError("Encoder rejected value", context=context)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelCodecErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.OPERATION_FAILED,
            context=context,
            **extra_context,
        )


class DeserializationError(CodecError):
    """Raised when a payload cannot be decoded into a model.

    Covers malformed JSON, a payload that is not a JSON object, a missing
    required field, and a field of the wrong type.

    Example:
        >>> context = ModelCodecErrorContext(
        ...     operation=EnumCodecOperation.UNMARSHAL,
        ...     model_name="ModelAgentId",
        ... )
        >>> raise DeserializationError("Field 'node_id' is required", context=context)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelCodecErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.VALIDATION_FAILED,
            context=context,
            **extra_context,
        )


__all__ = [
    "CodecError",
    "DeserializationError",
    "SerializationError",
]
