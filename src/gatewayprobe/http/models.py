# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None

    def json_body(self) -> Any:
        """Decode the request body as JSON (used by tests and stubs)."""
        if self.body is None:
            return None
        raw = self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body
        return json.loads(raw)


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    ``ok`` reports transport success only: a 500 with a body is ``ok=True``.
    Transport failures carry ``status_code=None`` and an ``error_category``.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    meta: dict[str, Any] = field(default_factory=dict)
