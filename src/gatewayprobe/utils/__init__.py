# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared helpers."""

from .redact import REDACTED, redact, truncate_text

__all__ = ["REDACTED", "redact", "truncate_text"]
