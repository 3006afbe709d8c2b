# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Codec configuration."""

from deepfence_server_client.config.model_codec_config import ModelCodecConfig

__all__: list[str] = ["ModelCodecConfig"]
