# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for codec error classes and ModelCodecErrorContext.

All tests validate:
- Error class instantiation
- Inheritance chain
- Error chaining (raise ... from e)
- Structured context fields via ModelCodecErrorContext
"""

from uuid import UUID, uuid4

import pytest
from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError
from pydantic import ValidationError

from deepfence_server_client.enums import EnumCodecOperation
from deepfence_server_client.errors import (
    CodecError,
    DeserializationError,
    ModelCodecErrorContext,
    SerializationError,
)


class TestModelCodecErrorContextWithCorrelation:
    """Tests for ModelCodecErrorContext.with_correlation() factory method."""

    def test_with_correlation_generates_uuid_when_none(self) -> None:
        """Test that with_correlation generates a UUID4 when none is provided."""
        context = ModelCodecErrorContext.with_correlation()
        assert isinstance(context.correlation_id, UUID)
        assert context.correlation_id.version == 4

    def test_with_correlation_uses_provided_uuid(self) -> None:
        """Test that with_correlation uses the provided UUID when given."""
        provided_id = uuid4()
        context = ModelCodecErrorContext.with_correlation(correlation_id=provided_id)
        assert context.correlation_id == provided_id

    def test_with_correlation_with_other_fields(self) -> None:
        """Test that with_correlation passes through other kwargs."""
        context = ModelCodecErrorContext.with_correlation(
            operation=EnumCodecOperation.MARSHAL,
            model_name="ModelAgentId",
        )
        assert context.correlation_id is not None
        assert context.operation == EnumCodecOperation.MARSHAL
        assert context.model_name == "ModelAgentId"


class TestModelCodecErrorContext:
    """Tests for ModelCodecErrorContext configuration model."""

    def test_basic_instantiation(self) -> None:
        """Test all fields default to None."""
        context = ModelCodecErrorContext()
        assert context.operation is None
        assert context.model_name is None
        assert context.correlation_id is None

    def test_immutability(self) -> None:
        """Test that context model is immutable (frozen)."""
        context = ModelCodecErrorContext(operation=EnumCodecOperation.MARSHAL)
        with pytest.raises(ValidationError):
            context.operation = EnumCodecOperation.UNMARSHAL  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            ModelCodecErrorContext(payload="{}")  # type: ignore[call-arg]


class TestCodecError:
    """Tests for CodecError base class."""

    def test_basic_instantiation(self) -> None:
        """Test basic error instantiation."""
        error = CodecError("Test error message")
        assert "Test error message" in str(error)
        assert isinstance(error, ModelOnexError)

    def test_default_error_code(self) -> None:
        """Test the base error defaults to OPERATION_FAILED."""
        error = CodecError("Test error")
        assert error.model.error_code == EnumCoreErrorCode.OPERATION_FAILED

    def test_with_context_model(self) -> None:
        """Test context model fields land in structured context."""
        correlation_id = uuid4()
        context = ModelCodecErrorContext(
            operation=EnumCodecOperation.UNMARSHAL,
            model_name="ModelAgentId",
            correlation_id=correlation_id,
        )
        error = CodecError("Decode failed", context=context)
        assert error.model.correlation_id == correlation_id
        assert error.model.context["operation"] == EnumCodecOperation.UNMARSHAL
        assert error.model.context["model_name"] == "ModelAgentId"

    def test_with_extra_context(self) -> None:
        """Test extra keyword context is preserved alongside the context model."""
        context = ModelCodecErrorContext(operation=EnumCodecOperation.MARSHAL)
        error = CodecError("Encode failed", context=context, field="node_id", attempt=1)
        assert error.model.context["operation"] == EnumCodecOperation.MARSHAL
        assert error.model.context["field"] == "node_id"
        assert error.model.context["attempt"] == 1

    def test_error_chaining(self) -> None:
        """Test error chaining with raise ... from e."""
        original = ValueError("Expecting value")
        try:
            raise CodecError("Decode failed") from original
        except CodecError as e:
            assert e.__cause__ == original


class TestSerializationError:
    """Tests for SerializationError."""

    def test_error_code_mapping(self) -> None:
        """Test that encode failures use OPERATION_FAILED."""
        error = SerializationError("Encode failed")
        assert error.model.error_code == EnumCoreErrorCode.OPERATION_FAILED

    def test_with_context_model(self) -> None:
        """Test context model and extra context."""
        context = ModelCodecErrorContext(
            operation=EnumCodecOperation.MARSHAL,
            model_name="ModelAgentId",
        )
        error = SerializationError("Encode failed", context=context, field="node_id")
        assert error.model.context["model_name"] == "ModelAgentId"
        assert error.model.context["field"] == "node_id"


class TestDeserializationError:
    """Tests for DeserializationError."""

    def test_error_code_mapping(self) -> None:
        """Test that decode failures use VALIDATION_FAILED."""
        error = DeserializationError("Decode failed")
        assert error.model.error_code == EnumCoreErrorCode.VALIDATION_FAILED

    def test_with_context_model(self) -> None:
        """Test context model, correlation id and payload preview."""
        correlation_id = uuid4()
        context = ModelCodecErrorContext(
            operation=EnumCodecOperation.UNMARSHAL,
            model_name="ModelAgentId",
            correlation_id=correlation_id,
        )
        error = DeserializationError(
            "Decode failed", context=context, payload_preview="{}"
        )
        assert error.model.correlation_id == correlation_id
        assert error.model.context["payload_preview"] == "{}"


class TestCodecErrorHierarchy:
    """Tests for the codec error inheritance chain."""

    @pytest.mark.parametrize("error_cls", [SerializationError, DeserializationError])
    def test_inheritance_chain(self, error_cls: type[CodecError]) -> None:
        """Test both concrete errors derive from CodecError and ModelOnexError."""
        error = error_cls("failed")
        assert isinstance(error, CodecError)
        assert isinstance(error, ModelOnexError)
        assert isinstance(error, Exception)

    def test_serialization_is_not_deserialization(self) -> None:
        """Test the two concrete errors are distinct."""
        assert not issubclass(SerializationError, DeserializationError)
        assert not issubclass(DeserializationError, SerializationError)
