# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Agent identifier model for the ThreatMapper server API.

``ModelAgentId`` is the request/response payload that names a single
monitored agent (host) by its node identifier::

    {"node_id": "<string>"}

The field is required: the validating constructors reject a missing or
non-string ``node_id``. ``new_unchecked`` is the explicitly named escape
hatch for partial construction; its node identifier reads as ``""``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from deepfence_server_client.config import ModelCodecConfig
from deepfence_server_client.enums import EnumCodecOperation
from deepfence_server_client.errors import (
    DeserializationError,
    ModelCodecErrorContext,
)
from deepfence_server_client.utils.util_json_codec import (
    JsonPayload,
    decode_json_object,
    encode_json,
)

FIELD_NODE_ID = "node_id"


class ModelAgentId(BaseModel):
    """Identifier of a monitored agent.

    Attributes:
        node_id: Opaque node identifier of the agent, stored verbatim.

    Example:
        >>> agent = ModelAgentId.new("host-1")
        >>> agent.marshal()
        b'{"node_id":"host-1"}'
        >>> ModelAgentId.unmarshal(b'{"node_id":"host-1","extra":true}') == agent
        True
    """

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        validate_assignment=True,
    )

    node_id: str = Field(
        ...,
        description="Node identifier of the monitored agent or host",
    )

    @classmethod
    def new(cls, node_id: str) -> ModelAgentId:
        """Create a ModelAgentId with the required node identifier."""
        return cls(node_id=node_id)

    @classmethod
    def new_unchecked(cls) -> ModelAgentId:
        """Create a ModelAgentId without populating required fields.

        The returned instance skips validation entirely. Until ``set_node_id``
        is called the node identifier reads as the empty string, so ``to_map``
        and ``marshal`` emit ``{"node_id":""}``.
        """
        return cls.model_construct()

    def get_node_id(self) -> str:
        """Return the node identifier, or an empty string when unpopulated."""
        return self.__dict__.get(FIELD_NODE_ID, "")

    def get_node_id_ok(self) -> tuple[str, bool]:
        """Return the node identifier and whether it is available.

        The field is required, so it is always reported as available; an
        unchecked instance reports the empty string.
        """
        return self.get_node_id(), True

    def set_node_id(self, node_id: str) -> None:
        """Overwrite the node identifier.

        Raises:
            pydantic.ValidationError: If ``node_id`` is not a string.
        """
        self.node_id = node_id

    def to_map(self) -> dict[str, object]:
        """Return the canonical pre-serialization mapping."""
        return {FIELD_NODE_ID: self.get_node_id()}

    def marshal(
        self,
        *,
        config: Optional[ModelCodecConfig] = None,
        correlation_id: Optional[UUID] = None,
    ) -> bytes:
        """Encode as compact JSON bytes.

        Raises:
            SerializationError: If the JSON encoder rejects the mapping.
        """
        return encode_json(
            self.to_map(),
            model_name=type(self).__name__,
            config=config,
            correlation_id=correlation_id,
        )

    @classmethod
    def from_map(
        cls,
        data: Mapping[str, object],
        *,
        correlation_id: Optional[UUID] = None,
    ) -> ModelAgentId:
        """Validate a decoded JSON object into a new ModelAgentId.

        Unknown keys are ignored.

        Raises:
            DeserializationError: If ``node_id`` is missing or not a string.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            context = ModelCodecErrorContext(
                operation=EnumCodecOperation.UNMARSHAL,
                model_name=cls.__name__,
                correlation_id=correlation_id,
            )
            raise DeserializationError(
                f"Invalid {cls.__name__} payload: {_summarize_validation_error(e)}",
                context=context,
                error_types=",".join(err["type"] for err in e.errors()),
            ) from e

    @classmethod
    def unmarshal(
        cls,
        data: JsonPayload,
        *,
        config: Optional[ModelCodecConfig] = None,
        correlation_id: Optional[UUID] = None,
    ) -> ModelAgentId:
        """Decode JSON bytes or text into a new ModelAgentId.

        Raises:
            DeserializationError: If the payload is malformed JSON, is not a
                JSON object, or carries a missing or non-string ``node_id``.
        """
        payload = decode_json_object(
            data,
            model_name=cls.__name__,
            config=config,
            correlation_id=correlation_id,
        )
        return cls.from_map(payload, correlation_id=correlation_id)


def _summarize_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        if err["type"] == "missing":
            parts.append(f"field '{location}' is required")
        elif err["type"] == "string_type":
            parts.append(f"field '{location}' must be a string")
        else:
            parts.append(f"field '{location}': {err['msg']}")
    return "; ".join(parts)


__all__: list[str] = ["FIELD_NODE_ID", "ModelAgentId"]
