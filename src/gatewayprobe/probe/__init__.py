# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Readiness probing: health check followed by a completion check."""

from .checks import completion_passed, has_choices, health_passed
from .payloads import build_completion_payload
from .prober import ReadinessProber

__all__ = [
    "ReadinessProber",
    "build_completion_payload",
    "completion_passed",
    "has_choices",
    "health_passed",
]
