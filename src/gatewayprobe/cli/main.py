# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""gatewayprobe CLI."""

from __future__ import annotations

import argparse
import json
import os
import sys
from dataclasses import replace

from ..config import ProbeSettings, load_probe_settings
from ..errors import ConfigError
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import EndpointTarget, Outcome
from ..runtime import GatewayProbe

EXIT_CONFIG_ERROR = 2

HOST_ENV = "GATEWAYPROBE_HOST"
PORT_ENV = "GATEWAYPROBE_PORT"
API_KEY_ENV = "GATEWAYPROBE_API_KEY"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check that an LLM gateway on a private network is healthy and serving completions",
    )
    parser.add_argument("--host", help=f"Gateway hostname (default: ${HOST_ENV})")
    parser.add_argument("--port", help=f"Gateway HTTPS port (default: ${PORT_ENV})")
    parser.add_argument("--prompt", help="Prompt sent to the completion endpoint")
    parser.add_argument("--model", help="Model identifier named in the completion request")
    parser.add_argument("--max-tokens", type=int, help="Output size bound for the completion request")
    parser.add_argument("--health-timeout", type=float, help="Health check timeout in seconds")
    parser.add_argument("--completion-timeout", type=float, help="Completion check timeout in seconds")
    parser.add_argument("--api-key", help=f"Bearer token for the gateway (default: ${API_KEY_ENV})")
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS verification (useful for self-signed gateway certificates)",
    )
    parser.add_argument(
        "--show-target",
        action="store_true",
        help="Treat host and port as non-sensitive and include them in output",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument("--log-level", help="Logging level (default: $GATEWAYPROBE_LOG_LEVEL or WARNING)")
    return parser


def _settings_from_args(args: argparse.Namespace) -> ProbeSettings:
    settings = load_probe_settings()
    overrides = {
        "prompt": args.prompt,
        "model": args.model,
        "max_tokens": args.max_tokens,
        "health_timeout": args.health_timeout,
        "completion_timeout": args.completion_timeout,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    if args.insecure:
        settings.verify_ssl = False
    return settings


def _status_text(status: int | None) -> str:
    return "-" if status is None else str(status)


def _pretty_print(outcome: Outcome, target: EndpointTarget) -> None:
    print(f"[gatewayprobe] Target: {target.display}")
    health_line = f"Health check: {'PASS' if outcome.health_ok else 'FAIL'} (status {_status_text(outcome.health_status)})"
    if not outcome.health_ok and outcome.diagnostic:
        health_line += f": {outcome.diagnostic}"
    print(health_line)

    if not outcome.health_ok:
        print("Completion check: SKIPPED")
    else:
        completion_line = (
            f"Completion check: {'PASS' if outcome.completion_ok else 'FAIL'} "
            f"(status {_status_text(outcome.completion_status)})"
        )
        if not outcome.completion_ok and outcome.diagnostic:
            completion_line += f": {outcome.diagnostic}"
        print(completion_line)

    print(outcome.summary_line())


def _print_json(outcome: Outcome) -> None:
    json.dump(outcome.to_dict(), sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    host = args.host if args.host is not None else os.getenv(HOST_ENV)
    port = args.port if args.port is not None else os.getenv(PORT_ENV)
    api_key = args.api_key if args.api_key is not None else os.getenv(API_KEY_ENV)

    try:
        if not host:
            raise ConfigError(f"host is required (--host or ${HOST_ENV})")
        if port is None or str(port).strip() == "":
            raise ConfigError(f"port is required (--port or ${PORT_ENV})")
        target = EndpointTarget.create(host, port, sensitive=not args.show_target)
        settings = _settings_from_args(args)
        settings.validate()
        http_client = create_default_http_client(settings)
        with GatewayProbe(http_client=http_client, settings=settings, api_key=api_key) as probe:
            outcome = probe.prober.run(target)
    except ConfigError as exc:
        print(f"gatewayprobe: configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.json:
        _print_json(outcome)
    else:
        _pretty_print(outcome, target)

    return outcome.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
