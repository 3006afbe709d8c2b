# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for deepfence_server_client tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from deepfence_server_client.config.model_codec_config import (
    ENV_ENSURE_ASCII,
    ENV_ERROR_PREVIEW_LENGTH,
    ENV_SORT_KEYS,
)
from deepfence_server_client.models import ModelAgentId

CODEC_ENV_VARS: tuple[str, ...] = (
    ENV_ENSURE_ASCII,
    ENV_SORT_KEYS,
    ENV_ERROR_PREVIEW_LENGTH,
)


@pytest.fixture
def clean_codec_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Remove every codec environment variable for the duration of a test."""
    for name in CODEC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch


@pytest.fixture
def agent_id() -> ModelAgentId:
    """A populated agent identifier with a realistic host node id."""
    return ModelAgentId.new("ip-172-31-18-5.ec2.internal;<host>")
