# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for EnumFieldPresence and EnumCodecOperation."""

import pytest

from deepfence_server_client.enums import EnumCodecOperation, EnumFieldPresence


class TestEnumFieldPresence:
    """Tests for EnumFieldPresence."""

    @pytest.mark.parametrize(
        ("presence", "expected"),
        [
            (EnumFieldPresence.OMITTED, False),
            (EnumFieldPresence.NULL, True),
            (EnumFieldPresence.PRESENT, True),
        ],
    )
    def test_is_set(self, presence: EnumFieldPresence, expected: bool) -> None:
        """Test only OMITTED reports the key as absent."""
        assert presence.is_set() is expected

    def test_string_values(self) -> None:
        """Test enum members compare equal to their string values."""
        assert EnumFieldPresence.NULL == "null"
        assert EnumFieldPresence("present") is EnumFieldPresence.PRESENT


class TestEnumCodecOperation:
    """Tests for EnumCodecOperation."""

    def test_members(self) -> None:
        """Test the full set of codec operations."""
        assert {op.value for op in EnumCodecOperation} == {
            "to_map",
            "marshal",
            "unmarshal",
        }
