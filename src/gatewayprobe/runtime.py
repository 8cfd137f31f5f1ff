# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level gatewayprobe facade."""

from __future__ import annotations

from contextlib import suppress
from typing import Any

from .config import ProbeSettings, load_probe_settings
from .http.client import HttpClient, create_default_http_client
from .models import EndpointTarget, Outcome, ProbeResult
from .probe import ReadinessProber


class GatewayProbe:
    """
    Convenience wrapper that owns the HTTP client for a readiness run.

    Settings are loaded from the environment here, at the edge, and handed
    to the prober explicitly.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        settings: ProbeSettings | None = None,
        *,
        api_key: str | None = None,
    ):
        self.settings = settings or load_probe_settings()
        self.settings.validate()
        self.http_client = http_client or create_default_http_client(self.settings)
        self.prober = ReadinessProber(self.http_client, self.settings, api_key=api_key)

    @staticmethod
    def target(host: Any, port: Any, *, sensitive: bool = True) -> EndpointTarget:
        return EndpointTarget.create(host, port, sensitive=sensitive)

    def check_health(self, host: Any, port: Any, *, sensitive: bool = True) -> ProbeResult:
        return self.prober.check_health(self.target(host, port, sensitive=sensitive))

    def check_completion(self, host: Any, port: Any, prompt: str | None = None, *, sensitive: bool = True) -> ProbeResult:
        return self.prober.check_completion(self.target(host, port, sensitive=sensitive), prompt)

    def run(self, host: Any, port: Any, prompt: str | None = None, *, sensitive: bool = True) -> Outcome:
        return self.prober.run(self.target(host, port, sensitive=sensitive), prompt)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> GatewayProbe:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
