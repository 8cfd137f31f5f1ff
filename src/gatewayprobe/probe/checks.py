# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Pass/fail predicates for probe results.

The completion check is a weak schema presence check: it only asks whether
the response names a top-level ``choices`` field. Gateways in front of
different vendors return differing shapes below that field, so nothing
deeper is validated.
"""

from __future__ import annotations

import json

from ..models.probe import ProbeResult

HEALTHY_STATUS = 200
CHOICES_FIELD = "choices"
_CHOICES_MARKER = f'"{CHOICES_FIELD}"'


def has_choices(body: str | None) -> bool:
    """
    Weak schema presence check for a chat completion response.

    A body that parses as a JSON object passes iff it has a top-level
    ``choices`` key. A body that does not parse as JSON passes iff the quoted
    marker text appears anywhere in it.
    """
    if not body:
        return False
    try:
        parsed = json.loads(body)
    except ValueError:
        return _CHOICES_MARKER in body
    return isinstance(parsed, dict) and CHOICES_FIELD in parsed


def health_passed(result: ProbeResult) -> bool:
    return result.http_status == HEALTHY_STATUS


def completion_passed(result: ProbeResult) -> bool:
    if result.transport_failed:
        return False
    return has_choices(result.body)
