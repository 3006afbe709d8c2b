# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parent-level serialization of nullable fields.

A nullable wrapper cannot drop its own key from the enclosing object.
These helpers build the enclosing object's map from a set of named
wrappers: OMITTED wrappers contribute no key, NULL wrappers contribute
``None`` and PRESENT wrappers contribute the wrapped model's ``to_map()``.

Example:
    >>> fields = {
    ...     "agent": new_nullable_agent_id(ModelAgentId.new("abc")),
    ...     "previous_agent": ModelNullableAgentId(),
    ... }
    >>> marshal_nullable_fields(fields, base={"action": "upgrade"})
    b'{"action":"upgrade","agent":{"node_id":"abc"}}'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

from deepfence_server_client.utils.util_json_codec import encode_json

if TYPE_CHECKING:
    from deepfence_server_client.config import ModelCodecConfig
    from deepfence_server_client.models.model_nullable import ModelNullable


def dump_nullable_fields(
    fields: Mapping[str, ModelNullable[Any]],
    *,
    base: Optional[Mapping[str, object]] = None,
) -> dict[str, object]:
    """Build a parent map from named nullable fields.

    Args:
        fields: Field name to wrapper, in output order.
        base: Already-serialized fields of the parent, emitted first.

    Returns:
        A new mapping with unset wrappers left out.

    Raises:
        SerializationError: If a wrapped model cannot produce its map.
    """
    result: dict[str, object] = dict(base or {})
    for name, wrapper in fields.items():
        if not wrapper.is_set():
            continue
        result[name] = wrapper.to_map_value()
    return result


def marshal_nullable_fields(
    fields: Mapping[str, ModelNullable[Any]],
    *,
    base: Optional[Mapping[str, object]] = None,
    model_name: str = "object",
    config: Optional[ModelCodecConfig] = None,
    correlation_id: Optional[UUID] = None,
) -> bytes:
    """Encode a parent object built by ``dump_nullable_fields`` as JSON bytes."""
    return encode_json(
        dump_nullable_fields(fields, base=base),
        model_name=model_name,
        config=config,
        correlation_id=correlation_id,
    )


__all__: list[str] = [
    "dump_nullable_fields",
    "marshal_nullable_fields",
]
