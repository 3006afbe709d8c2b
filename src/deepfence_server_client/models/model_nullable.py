# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Nullable wrapper for optional model fields.

A field of a generated model can be in one of three states on the wire:

    ========  =======================================
    OMITTED   key absent from the parent object
    NULL      ``"key": null``
    PRESENT   ``"key": {...}``
    ========  =======================================

``ModelNullable`` tracks that state explicitly through
``EnumFieldPresence``. The wrapper cannot remove its own key from the
parent object; parents use ``dump_nullable_fields`` (or check
``is_set()``) to skip OMITTED wrappers.

Example:
    >>> wrapper = ModelNullableAgentId()
    >>> wrapper.is_set()
    False
    >>> wrapper.set(None)
    >>> wrapper.marshal()
    b'null'
    >>> wrapper.set(ModelAgentId.new("abc"))
    >>> wrapper.marshal()
    b'{"node_id":"abc"}'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Generic, Optional, TypeVar
from uuid import UUID

from deepfence_server_client.config import ModelCodecConfig
from deepfence_server_client.enums import EnumCodecOperation, EnumFieldPresence
from deepfence_server_client.errors import (
    DeserializationError,
    ModelCodecErrorContext,
)
from deepfence_server_client.models.model_agent_id import ModelAgentId
from deepfence_server_client.utils.util_error_sanitization import (
    sanitize_payload_preview,
)
from deepfence_server_client.utils.util_json_codec import (
    JsonPayload,
    decode_json,
    encode_json,
)

if TYPE_CHECKING:
    from typing import Self

    from deepfence_server_client.protocols import ProtocolCodecModel

ModelT = TypeVar("ModelT", bound="ProtocolCodecModel")


class ModelNullable(Generic[ModelT]):
    """Tri-state container for an optional, nullable model field.

    Only subclasses that bind ``value_type`` to the wrapped model class can
    be instantiated; the class is used to rebuild values in ``unmarshal``.

    Attributes:
        value_type: Model class wrapped by this nullable type.

    Raises:
        TypeError: On instantiation when ``value_type`` is not bound.
    """

    value_type: ClassVar[type[ProtocolCodecModel]]

    __slots__ = ("_presence", "_value")

    def __init__(self) -> None:
        if getattr(type(self), "value_type", None) is None:
            raise TypeError(
                f"{type(self).__name__} does not bind value_type; "
                "instantiate a subclass such as ModelNullableAgentId"
            )
        self._value: Optional[ModelT] = None
        self._presence = EnumFieldPresence.OMITTED

    @classmethod
    def new(cls, value: Optional[ModelT]) -> Self:
        """Create a wrapper that is already set to ``value``."""
        wrapper = cls()
        wrapper.set(value)
        return wrapper

    @property
    def presence(self) -> EnumFieldPresence:
        """Current presence state of the field."""
        return self._presence

    def get(self) -> Optional[ModelT]:
        """Return the wrapped value, or None when null or omitted."""
        return self._value

    def set(self, value: Optional[ModelT]) -> None:
        """Store ``value`` and mark the field as set.

        Passing None marks the field as an explicit JSON null.
        """
        self._value = value
        self._presence = (
            EnumFieldPresence.NULL if value is None else EnumFieldPresence.PRESENT
        )

    def is_set(self) -> bool:
        """Return True once ``set``, ``new`` or ``unmarshal`` has populated the field."""
        return self._presence.is_set()

    def unset(self) -> None:
        """Clear the value and return the field to the omitted state."""
        self._value = None
        self._presence = EnumFieldPresence.OMITTED

    def to_map_value(self) -> Optional[dict[str, object]]:
        """Return the value as it appears inside the parent map (None for null)."""
        if self._value is None:
            return None
        return self._value.to_map()

    def marshal(
        self,
        *,
        config: Optional[ModelCodecConfig] = None,
        correlation_id: Optional[UUID] = None,
    ) -> bytes:
        """Encode the wrapped value, producing ``null`` when there is none.

        An omitted wrapper also encodes as ``null``; parents are responsible
        for leaving its key out.

        Raises:
            SerializationError: If the wrapped value cannot be encoded.
        """
        if self._value is None:
            return encode_json(
                None,
                model_name=self.value_type.__name__,
                config=config,
                correlation_id=correlation_id,
            )
        return self._value.marshal(config=config, correlation_id=correlation_id)

    def unmarshal(
        self,
        data: JsonPayload,
        *,
        config: Optional[ModelCodecConfig] = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Decode ``data`` into this wrapper and mark the field as set.

        The wrapper is left unchanged when decoding fails.

        Raises:
            DeserializationError: If the payload is malformed, neither null
                nor a JSON object, or rejected by the wrapped model.
        """
        config = config or ModelCodecConfig()
        model_name = self.value_type.__name__
        decoded = decode_json(
            data,
            model_name=model_name,
            config=config,
            correlation_id=correlation_id,
        )
        if decoded is None:
            self.set(None)
            return
        if not isinstance(decoded, dict):
            context = ModelCodecErrorContext(
                operation=EnumCodecOperation.UNMARSHAL,
                model_name=model_name,
                correlation_id=correlation_id,
            )
            raise DeserializationError(
                f"Expected a JSON object or null for {model_name}",
                context=context,
                payload_preview=sanitize_payload_preview(
                    data, config.error_preview_length
                ),
            )
        value = self.value_type.from_map(decoded, correlation_id=correlation_id)
        self.set(value)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelNullable):
            return NotImplemented
        return (
            self.value_type is other.value_type
            and self._presence == other._presence
            and self._value == other._value
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(presence={self._presence.value}, "
            f"value={self._value!r})"
        )


class ModelNullableAgentId(ModelNullable[ModelAgentId]):
    """Nullable wrapper for an embedded ``ModelAgentId`` field."""

    value_type = ModelAgentId

    __slots__ = ()


def new_nullable_agent_id(value: Optional[ModelAgentId]) -> ModelNullableAgentId:
    """Create a set ``ModelNullableAgentId`` holding ``value``."""
    return ModelNullableAgentId.new(value)


__all__: list[str] = [
    "ModelNullable",
    "ModelNullableAgentId",
    "new_nullable_agent_id",
]
