# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scrubbing of secret-bearing values from diagnostic text."""

from __future__ import annotations

import re
from collections.abc import Iterable

REDACTED = "[REDACTED]"
TRUNCATION_SUFFIX = "...[truncated]"


def _pattern_for(secret: str) -> re.Pattern[str]:
    escaped = re.escape(secret)
    # A port like "443" must not eat the middle of "14430".
    if secret.isdigit():
        return re.compile(rf"(?<!\d){escaped}(?!\d)")
    return re.compile(escaped, re.IGNORECASE)


def redact(text: str | None, secrets: Iterable[str]) -> str:
    """Replace every occurrence of each secret literal with ``[REDACTED]``."""
    if not text:
        return ""
    # Longest first so "gw.example.ts.net" wins over a shorter overlapping value.
    ordered = sorted({s for s in secrets if s}, key=len, reverse=True)
    for secret in ordered:
        text = _pattern_for(secret).sub(REDACTED, text)
    return text


def truncate_text(text: str, max_bytes: int) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    suffix_bytes = TRUNCATION_SUFFIX.encode("utf-8")
    keep = max_bytes - len(suffix_bytes)
    if keep <= 0:
        return suffix_bytes[:max_bytes].decode("utf-8", errors="ignore")
    prefix = raw[:keep].decode("utf-8", errors="ignore")
    return prefix + TRUNCATION_SUFFIX
