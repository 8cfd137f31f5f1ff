# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Remote readiness prober."""

from __future__ import annotations

import logging

from ..config import ProbeSettings
from ..errors import ConfigError, ErrorCategory, FailureKind, error_category_to_reason
from ..http.client import HttpClient
from ..http.models import HttpRequest
from ..models.outcome import COMPLETION_FAILED_REASON, HEALTH_FAILED_REASON, Outcome
from ..models.probe import ProbeResult, ProbeState
from ..models.target import EndpointTarget
from ..utils.redact import redact, truncate_text
from .checks import completion_passed, health_passed
from .payloads import build_completion_payload, completion_headers, encode_payload

logger = logging.getLogger(__name__)


class ReadinessProber:
    """
    Checks that a remote gateway is reachable and serving completions.

    A run walks HEALTH_PENDING -> COMPLETION_PENDING -> DONE, skipping the
    completion state when the health check fails. Each check is a single
    attempt bounded by its own timeout. Network failures of any kind are
    folded into the returned Outcome; only ConfigError is raised, and always
    before the first request.

    The target and the optional API key are the only secret-bearing inputs.
    Both are threaded in explicitly and scrubbed from every diagnostic.
    """

    def __init__(
        self,
        client: HttpClient,
        settings: ProbeSettings | None = None,
        *,
        api_key: str | None = None,
    ):
        self.client = client
        self.settings = settings or ProbeSettings()
        self.settings.validate()
        self._api_key = api_key or None

    def check_health(self, target: EndpointTarget) -> ProbeResult:
        target.validate()
        request = HttpRequest(
            url=target.url_for(self.settings.health_path),
            method="GET",
            timeout=self.settings.health_timeout,
        )
        result = ProbeResult.from_response(self.client.request(request))
        logger.info("Health check on %s returned status %s", target.display, result.http_status)
        return result

    def check_completion(self, target: EndpointTarget, prompt: str | None = None) -> ProbeResult:
        target.validate()
        prompt = self._resolve_prompt(prompt)
        payload = build_completion_payload(self.settings.model, prompt, self.settings.max_tokens)
        request = HttpRequest(
            url=target.url_for(self.settings.completion_path),
            method="POST",
            headers=completion_headers(self._api_key),
            body=encode_payload(payload),
            timeout=self.settings.completion_timeout,
        )
        result = ProbeResult.from_response(self.client.request(request))
        logger.info("Completion check on %s returned status %s", target.display, result.http_status)
        return result

    def run(self, target: EndpointTarget, prompt: str | None = None) -> Outcome:
        target.validate()
        prompt = self._resolve_prompt(prompt)

        state = ProbeState.HEALTH_PENDING
        health_status = 0
        outcome: Outcome | None = None
        while state is not ProbeState.DONE:
            if state is ProbeState.HEALTH_PENDING:
                health = self.check_health(target)
                if health_passed(health):
                    health_status = health.http_status
                    state = ProbeState.COMPLETION_PENDING
                else:
                    outcome = self._health_failure(target, health)
                    state = ProbeState.DONE
            elif state is ProbeState.COMPLETION_PENDING:
                completion = self.check_completion(target, prompt)
                outcome = self._completion_outcome(target, health_status, completion)
                state = ProbeState.DONE
            logger.debug("Probe state -> %s", state.value)

        if outcome is None:
            raise RuntimeError("probe reached DONE without an outcome")
        return outcome

    def _resolve_prompt(self, prompt: str | None) -> str:
        resolved = self.settings.prompt if prompt is None else prompt
        if not isinstance(resolved, str) or not resolved.strip():
            raise ConfigError("prompt must be a non-empty string")
        return resolved

    def _secrets(self, target: EndpointTarget) -> list[str]:
        secrets = target.secrets()
        if self._api_key:
            secrets.append(self._api_key)
        return secrets

    def _diagnostic(self, target: EndpointTarget, result: ProbeResult) -> str:
        if result.transport_failed:
            return error_category_to_reason(result.error_category)
        if not result.body:
            return "<empty body>"
        # Redact first: truncation can split a secret.
        scrubbed = redact(result.body, self._secrets(target))
        return truncate_text(scrubbed, self.settings.diagnostic_bytes)

    def _health_failure(self, target: EndpointTarget, health: ProbeResult) -> Outcome:
        kind = FailureKind.TRANSPORT_ERROR if health.transport_failed else FailureKind.UNEXPECTED_STATUS
        logger.warning("Health check failed (%s, status %s)", kind.value, health.http_status)
        return Outcome(
            health_ok=False,
            completion_ok=False,
            failure_reason=HEALTH_FAILED_REASON,
            failure_kind=kind,
            error_category=health.error_category,
            health_status=health.http_status,
            diagnostic=self._diagnostic(target, health),
        )

    def _completion_outcome(self, target: EndpointTarget, health_status: int, completion: ProbeResult) -> Outcome:
        if not completion_passed(completion):
            kind = FailureKind.TRANSPORT_ERROR if completion.transport_failed else FailureKind.MALFORMED_RESPONSE
            logger.warning("Completion check failed (%s, status %s)", kind.value, completion.http_status)
            return Outcome(
                health_ok=True,
                completion_ok=False,
                failure_reason=COMPLETION_FAILED_REASON,
                failure_kind=kind,
                error_category=completion.error_category,
                health_status=health_status,
                completion_status=completion.http_status,
                diagnostic=self._diagnostic(target, completion),
            )

        return Outcome(
            health_ok=True,
            completion_ok=True,
            error_category=ErrorCategory.NONE,
            health_status=health_status,
            completion_status=completion.http_status,
        )
