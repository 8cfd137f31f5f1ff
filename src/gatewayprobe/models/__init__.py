# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for gatewayprobe."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .outcome import (
    COMPLETION_FAILED_REASON,
    EXIT_COMPLETION_FAILED,
    EXIT_HEALTH_FAILED,
    EXIT_OK,
    HEALTH_FAILED_REASON,
    Outcome,
)
from .probe import TRANSPORT_FAILURE_STATUS, ProbeResult, ProbeState
from .target import EndpointTarget

__all__ = [
    "COMPLETION_FAILED_REASON",
    "EXIT_COMPLETION_FAILED",
    "EXIT_HEALTH_FAILED",
    "EXIT_OK",
    "HEALTH_FAILED_REASON",
    "TRANSPORT_FAILURE_STATUS",
    "EndpointTarget",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "Outcome",
    "ProbeResult",
    "ProbeState",
]
