# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Payload sanitization utilities for codec errors.

Decode errors carry a short excerpt of the rejected payload to help
debugging. Payloads received from the ThreatMapper API can carry API
tokens and cloud credentials, so the excerpt is redacted when it looks
sensitive and truncated otherwise.

Example:
    >>> sanitize_payload_preview(b'{"api_token": "abc"}')
    '[REDACTED - potentially sensitive data]'
    >>> sanitize_payload_preview(b'{"node_id": 7}')
    '{"node_id": 7}'
"""

from __future__ import annotations

# Checked case-insensitively against the decoded payload text.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "access_key",
    "private_key",
    "credential",
    "authorization",
    "bearer",
    "-----begin",
)

REDACTED_MARKER = "[REDACTED - potentially sensitive data]"
TRUNCATED_SUFFIX = "... [truncated]"


def sanitize_error_string(error_str: str, max_length: int = 500) -> str:
    """Sanitize a raw string for safe inclusion in error context.

    Args:
        error_str: The string to sanitize
        max_length: Maximum length of the sanitized text (default 500)

    Returns:
        The redaction marker if a sensitive pattern is found, otherwise the
        string truncated to ``max_length`` characters.
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return REDACTED_MARKER

    if len(error_str) > max_length:
        return error_str[:max_length] + TRUNCATED_SUFFIX

    return error_str


def sanitize_payload_preview(
    payload: bytes | bytearray | str | object,
    max_length: int = 120,
) -> str:
    """Build a sanitized excerpt of a payload for error context.

    Bytes are decoded as UTF-8 with replacement characters so that an
    undecodable payload still produces a preview. Non-text payloads are
    described by type only.
    """
    if isinstance(payload, (bytes, bytearray)):
        text = bytes(payload).decode("utf-8", errors="replace")
    elif isinstance(payload, str):
        text = payload
    else:
        return f"<{type(payload).__name__}>"
    return sanitize_error_string(text, max_length=max_length)


__all__: list[str] = [
    "REDACTED_MARKER",
    "SENSITIVE_PATTERNS",
    "sanitize_error_string",
    "sanitize_payload_preview",
]
