# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from enum import Enum

import httpx


class ConfigError(ValueError):
    """Invalid probe configuration, raised before any network I/O."""


class FailureKind(str, Enum):
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    UNEXPECTED_STATUS = "UNEXPECTED_STATUS"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def _caused_by(exc: BaseException, types: tuple[type[BaseException], ...]) -> bool:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, types):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps low-level failures, so the exception chain is inspected for the
    ssl/socket errors that tell TLS and DNS problems apart from plain refusals.
    """
    if isinstance(exc, httpx.TimeoutException) or _caused_by(exc, (TimeoutError, socket.timeout)):
        return ErrorCategory.TIMEOUT

    if _caused_by(exc, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if _caused_by(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string. Never includes the target."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout during probe",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.UNKNOWN_ERROR: "Network error during probe",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Probe failed due to network error")


__all__ = [
    "ConfigError",
    "ErrorCategory",
    "FailureKind",
    "categorize_exception",
    "error_category_to_reason",
]
