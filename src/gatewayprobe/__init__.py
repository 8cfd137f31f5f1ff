# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
gatewayprobe package entrypoint.

This package checks that an LLM gateway reachable over a private overlay
network is healthy and serving chat completions. HTTP behavior is
abstracted behind an injectable client interface, and the target, results
and outcome are modeled with typed dataclasses.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import ConfigError, ErrorCategory, FailureKind
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import EndpointTarget, Outcome, ProbeResult, ProbeState
from .probe import ReadinessProber, build_completion_payload, has_choices
from .runtime import GatewayProbe
from .version import __version__

__all__ = [
    "ConfigError",
    "EndpointTarget",
    "ErrorCategory",
    "FailureKind",
    "GatewayProbe",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "Outcome",
    "ProbeResult",
    "ProbeSettings",
    "ProbeState",
    "ReadinessProber",
    "StubHttpClient",
    "build_completion_payload",
    "create_default_http_client",
    "has_choices",
    "load_probe_settings",
    "setup_logging",
    "__version__",
]
