# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregate outcome of a readiness run."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Any

from ..errors import ErrorCategory, FailureKind
from .probe import ProbeState

HEALTH_FAILED_REASON = "health check failed"
COMPLETION_FAILED_REASON = "completion check failed"

EXIT_OK = 0
EXIT_HEALTH_FAILED = 3
EXIT_COMPLETION_FAILED = 4


@dataclass(frozen=True)
class Outcome:
    """
    The only unit handed back by ``ReadinessProber.run``.

    ``health_ok``, ``completion_ok`` and ``failure_reason`` are the contract;
    the remaining fields are diagnostics and contain no target or credential
    values.
    """

    health_ok: bool
    completion_ok: bool
    failure_reason: str | None = None
    failure_kind: FailureKind | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    health_status: int | None = None
    completion_status: int | None = None
    diagnostic: str | None = None

    @property
    def ok(self) -> bool:
        return self.health_ok and self.completion_ok

    @property
    def state(self) -> ProbeState:
        return ProbeState.DONE

    @property
    def exit_code(self) -> int:
        if not self.health_ok:
            return EXIT_HEALTH_FAILED
        if not self.completion_ok:
            return EXIT_COMPLETION_FAILED
        return EXIT_OK

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "health_ok": self.health_ok,
            "completion_ok": self.completion_ok,
            "failure_reason": self.failure_reason,
            "failure_kind": self.failure_kind.value if self.failure_kind else None,
            "error_category": self.error_category.value,
            "health_status": self.health_status,
            "completion_status": self.completion_status,
            "diagnostic": self.diagnostic,
        }

    def summary_line(self) -> str:
        """Single ``key=value`` line for machine consumption."""
        fields = {
            "result": "pass" if self.ok else "fail",
            "health_ok": str(self.health_ok).lower(),
            "completion_ok": str(self.completion_ok).lower(),
            "health_status": "-" if self.health_status is None else str(self.health_status),
            "completion_status": "-" if self.completion_status is None else str(self.completion_status),
            "failure_kind": self.failure_kind.value if self.failure_kind else "-",
            "failure_reason": self.failure_reason or "-",
        }
        return " ".join(f"{key}={shlex.quote(value)}" for key, value in fields.items())
