# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

from collections.abc import Callable

from ..errors import ErrorCategory
from .client import HttpClient
from .models import HttpRequest, HttpResponse

Responder = Callable[[HttpRequest], HttpResponse]


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are keyed by ``(method, url)``; a value may be a fixed
    HttpResponse or a callable that builds one from the request.
    """

    def __init__(self, responses: dict[tuple[str, str], HttpResponse | Responder] | None = None):
        self._responses = dict(responses or {})
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, method: str, url: str, response: HttpResponse | Responder) -> None:
        self._responses[(method.upper(), url)] = response

    def calls_to(self, url: str) -> int:
        return sum(1 for req in self.requests if req.url == url)

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        configured = self._responses.get((request.method.upper(), request.url))
        if configured is None:
            return HttpResponse(
                ok=False,
                error_message="No stubbed response configured",
                error_category=ErrorCategory.CONNECTION_ERROR,
            )
        if callable(configured):
            return configured(request)
        return configured

    def close(self) -> None:
        self.closed = True
