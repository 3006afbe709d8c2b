# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Deepfence Server Client Models.

This module exports the generated API models and their nullable wrappers.
"""

from deepfence_server_client.models.model_agent_id import ModelAgentId
from deepfence_server_client.models.model_nullable import (
    ModelNullable,
    ModelNullableAgentId,
    new_nullable_agent_id,
)

__all__: list[str] = [
    "ModelAgentId",
    "ModelNullable",
    "ModelNullableAgentId",
    "new_nullable_agent_id",
]
