# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for gatewayprobe."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("GATEWAYPROBE_LOG_LEVEL", "WARNING").upper()
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def quiet_transport_loggers() -> None:
    """Raise httpx/httpcore to WARNING; their INFO and DEBUG records carry full request URLs."""
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    quiet_transport_loggers()


__all__ = ["quiet_transport_loggers", "setup_logging"]
