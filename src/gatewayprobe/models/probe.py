# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe result models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import ErrorCategory
from ..http.models import HttpResponse

TRANSPORT_FAILURE_STATUS = 0


class ProbeState(str, Enum):
    HEALTH_PENDING = "HEALTH_PENDING"
    COMPLETION_PENDING = "COMPLETION_PENDING"
    DONE = "DONE"


@dataclass(frozen=True)
class ProbeResult:
    """Status and body of one probe call. ``http_status`` is 0 when the transport failed."""

    http_status: int
    body: str = ""
    error_category: ErrorCategory = ErrorCategory.NONE

    @property
    def transport_failed(self) -> bool:
        return self.http_status == TRANSPORT_FAILURE_STATUS

    @classmethod
    def from_response(cls, response: HttpResponse) -> ProbeResult:
        if not response.ok or response.status_code is None:
            category = response.error_category
            if category == ErrorCategory.NONE:
                category = ErrorCategory.UNKNOWN_ERROR
            return cls(http_status=TRANSPORT_FAILURE_STATUS, body="", error_category=category)
        return cls(http_status=int(response.status_code), body=response.text or "")
