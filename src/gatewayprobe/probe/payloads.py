# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request bodies for the completion probe."""

from __future__ import annotations

import json
from typing import Any

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


def build_completion_payload(model: str, prompt: str, max_tokens: int) -> dict[str, Any]:
    """OpenAI-compatible chat completion request with a single user message."""
    return {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "max_tokens": max_tokens,
    }


def encode_payload(payload: dict[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def completion_headers(api_key: str | None = None) -> dict[str, str]:
    headers = dict(JSON_HEADERS)
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers
