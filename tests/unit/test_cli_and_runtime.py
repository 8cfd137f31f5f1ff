# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from gatewayprobe.cli import main as cli_main
from gatewayprobe.cli.main import EXIT_CONFIG_ERROR, build_parser
from gatewayprobe.config import ProbeSettings
from gatewayprobe.errors import ConfigError
from gatewayprobe.http import StubHttpClient
from gatewayprobe.http.models import HttpResponse
from gatewayprobe.models import EXIT_COMPLETION_FAILED, EXIT_HEALTH_FAILED, EXIT_OK
from gatewayprobe.runtime import GatewayProbe

HOST = "example.ts.net"
PORT = "8443"
HEALTH_URL = f"https://{HOST}:{PORT}/health"
COMPLETION_URL = f"https://{HOST}:{PORT}/v1/chat/completions"
CHOICES_BODY = '{"choices":[{"message":{"content":"hi"}}]}'


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "GATEWAYPROBE_HOST",
        "GATEWAYPROBE_PORT",
        "GATEWAYPROBE_API_KEY",
        "GATEWAYPROBE_VERIFY_SSL",
        "GATEWAYPROBE_PROMPT",
        "GATEWAYPROBE_MODEL",
    ):
        monkeypatch.delenv(name, raising=False)


def _stub(health_status=200, completion=None):
    stub = StubHttpClient()
    stub.add("GET", HEALTH_URL, HttpResponse(ok=True, status_code=health_status, text="ok"))
    stub.add("POST", COMPLETION_URL, completion or HttpResponse(ok=True, status_code=200, text=CHOICES_BODY))
    return stub


def _install(monkeypatch, stub):
    captured = {}

    def factory(settings=None):
        captured["settings"] = settings
        return stub

    monkeypatch.setattr(cli_main, "create_default_http_client", factory)
    return captured


def test_build_parser_accepts_all_options():
    args = build_parser().parse_args(
        [
            "--host",
            HOST,
            "--port",
            PORT,
            "--prompt",
            "hi",
            "--model",
            "gpt-4o",
            "--max-tokens",
            "8",
            "--health-timeout",
            "3",
            "--completion-timeout",
            "20",
            "--insecure",
            "--json",
        ]
    )
    assert args.host == HOST
    assert args.port == PORT
    assert args.max_tokens == 8
    assert args.health_timeout == 3.0
    assert args.insecure is True
    assert args.json is True
    assert args.show_target is False


def test_main_success_prints_checks_and_summary(monkeypatch, capsys):
    stub = _stub()
    _install(monkeypatch, stub)
    code = cli_main.main(["--host", HOST, "--port", PORT])
    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "Health check: PASS (status 200)" in out
    assert "Completion check: PASS (status 200)" in out
    assert out.strip().splitlines()[-1].startswith("result=pass ")
    assert HOST not in out
    assert PORT not in out
    assert stub.closed is True


def test_main_health_failure_skips_completion(monkeypatch, capsys):
    stub = _stub(health_status=503)
    _install(monkeypatch, stub)
    code = cli_main.main(["--host", HOST, "--port", PORT])
    out = capsys.readouterr().out
    assert code == EXIT_HEALTH_FAILED
    assert "Health check: FAIL (status 503)" in out
    assert "Completion check: SKIPPED" in out
    assert "failure_reason='health check failed'" in out
    assert stub.calls_to(COMPLETION_URL) == 0


def test_main_completion_failure_exit_code(monkeypatch, capsys):
    stub = _stub(completion=HttpResponse(ok=True, status_code=400, text='{"error":"bad request"}'))
    _install(monkeypatch, stub)
    code = cli_main.main(["--host", HOST, "--port", PORT])
    out = capsys.readouterr().out
    assert code == EXIT_COMPLETION_FAILED
    assert "Completion check: FAIL (status 400)" in out
    assert "bad request" in out


def test_main_missing_host_is_config_error(monkeypatch, capsys):
    stub = _stub()
    _install(monkeypatch, stub)
    code = cli_main.main(["--port", PORT])
    err = capsys.readouterr().err
    assert code == EXIT_CONFIG_ERROR
    assert "configuration error" in err
    assert stub.requests == []


def test_main_invalid_port_is_config_error(monkeypatch, capsys):
    stub = _stub()
    _install(monkeypatch, stub)
    code = cli_main.main(["--host", HOST, "--port", "99999"])
    err = capsys.readouterr().err
    assert code == EXIT_CONFIG_ERROR
    assert "99999" not in err
    assert HOST not in err
    assert stub.requests == []


def test_main_reads_target_and_key_from_env(monkeypatch, capsys):
    monkeypatch.setenv("GATEWAYPROBE_HOST", HOST)
    monkeypatch.setenv("GATEWAYPROBE_PORT", PORT)
    monkeypatch.setenv("GATEWAYPROBE_API_KEY", "sk-env-secret")
    stub = _stub()
    _install(monkeypatch, stub)
    assert cli_main.main([]) == EXIT_OK
    assert stub.requests[-1].headers["Authorization"] == "Bearer sk-env-secret"
    assert "sk-env-secret" not in capsys.readouterr().out


def test_main_applies_overrides_and_insecure(monkeypatch, capsys):
    stub = _stub()
    captured = _install(monkeypatch, stub)
    code = cli_main.main(
        ["--host", HOST, "--port", PORT, "--insecure", "--model", "gpt-4o", "--max-tokens", "4", "--prompt", "ping"]
    )
    capsys.readouterr()
    assert code == EXIT_OK
    settings = captured["settings"]
    assert settings.verify_ssl is False
    assert stub.requests[-1].json_body() == {
        "model": "gpt-4o",
        "messages": [{"role": "user", "content": "ping"}],
        "max_tokens": 4,
    }


def test_main_rejects_non_positive_max_tokens(monkeypatch, capsys):
    stub = _stub()
    _install(monkeypatch, stub)
    assert cli_main.main(["--host", HOST, "--port", PORT, "--max-tokens", "0"]) == EXIT_CONFIG_ERROR
    assert "max_tokens" in capsys.readouterr().err


def test_main_json_output(monkeypatch, capsys):
    _install(monkeypatch, _stub())
    code = cli_main.main(["--host", HOST, "--port", PORT, "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert payload["ok"] is True
    assert payload["health_status"] == 200
    assert payload["failure_reason"] is None


def test_main_show_target_prints_authority(monkeypatch, capsys):
    _install(monkeypatch, _stub())
    cli_main.main(["--host", HOST, "--port", PORT, "--show-target"])
    assert f"https://{HOST}:{PORT}" in capsys.readouterr().out


def test_gateway_probe_facade_runs_and_closes():
    stub = _stub()
    with GatewayProbe(http_client=stub, settings=ProbeSettings()) as probe:
        outcome = probe.run(HOST, PORT)
        health = probe.check_health(HOST, PORT)
        completion = probe.check_completion(HOST, PORT, "hello")
    assert outcome.ok is True
    assert health.http_status == 200
    assert completion.http_status == 200
    assert stub.closed is True


def test_gateway_probe_loads_settings_from_env(monkeypatch):
    monkeypatch.setenv("GATEWAYPROBE_MODEL", "env-model")
    probe = GatewayProbe(http_client=_stub())
    assert probe.settings.model == "env-model"
    with pytest.raises(ConfigError):
        probe.run("", PORT)


def test_gateway_probe_validates_settings_before_building_client(monkeypatch):
    from gatewayprobe import runtime

    built = []
    monkeypatch.setattr(runtime, "create_default_http_client", lambda settings=None: built.append(settings))
    monkeypatch.setenv("GATEWAYPROBE_HEALTH_TIMEOUT", "-1")
    with pytest.raises(ConfigError):
        GatewayProbe()
    assert built == []
