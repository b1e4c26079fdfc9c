"""Tests for the credify CLI."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.main import app
from tests.conftest import NOT_FOUND_HTML, PROFILE_HTML, PROFILE_URL

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user config and a local .env out of CLI runs."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("CREDIFY_BATCH_DELAY_SECONDS", "0")


# ---------------------------------------------------------------------------
# --format-only
# ---------------------------------------------------------------------------


def test_format_only_json():
    with respx.mock as mock:
        result = runner.invoke(app, ["check", "--format-only", "--json", PROFILE_URL])
        assert not mock.calls
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"url": PROFILE_URL, "format_valid": True}]


def test_format_only_invalid_exits_1():
    result = runner.invoke(
        app,
        ["check", "--format-only", "--json", PROFILE_URL, "https://linkedin.com/company/microsoft"],
    )
    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert [item["format_valid"] for item in payload] == [True, False]


def test_format_only_report():
    result = runner.invoke(app, ["check", "--format-only", "--report", "not-a-url"])
    assert result.exit_code == 1
    assert "FORMAT_VALIDATION_RESULT: INVALID" in result.stdout


# ---------------------------------------------------------------------------
# Network checks (mocked)
# ---------------------------------------------------------------------------


def test_check_json_accepts_existing_profile():
    with respx.mock:
        respx.get(PROFILE_URL).mock(return_value=httpx.Response(200, text=PROFILE_HTML))
        result = runner.invoke(app, ["check", "--json", "--delay", "0", PROFILE_URL])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload[0]["decision"] == "Accept"
    assert payload[0]["username"] == "jane-doe"


def test_check_rejects_missing_profile():
    with respx.mock:
        respx.get(PROFILE_URL).mock(return_value=httpx.Response(200, text=NOT_FOUND_HTML))
        result = runner.invoke(app, ["check", "--json", "--delay", "0", PROFILE_URL])

    assert result.exit_code == 1
    assert json.loads(result.stdout)[0]["metadata"]["error_type"] == "PROFILE_NOT_FOUND"


def test_check_report_mixed_batch():
    with respx.mock:
        route = respx.get(PROFILE_URL).mock(return_value=httpx.Response(999))
        result = runner.invoke(
            app,
            ["check", "--report", "--delay", "0", PROFILE_URL, "https://www.google.com/in/johndoe"],
        )
        assert route.call_count == 2

    assert result.exit_code == 1
    assert "ERROR_TYPE: AUTH_REQUIRED" in result.stdout
    assert "ERROR_TYPE: NOT_LINKEDIN_DOMAIN" in result.stdout


def test_check_network_failure_is_not_a_rejection():
    with respx.mock:
        respx.get(PROFILE_URL).mock(side_effect=httpx.ConnectTimeout("timed out"))
        result = runner.invoke(app, ["check", "--json", "--delay", "0", PROFILE_URL])

    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["decision"] == "Retry"


def test_check_writes_output_file(tmp_path: Path):
    target = tmp_path / "out" / "results.json"
    with respx.mock:
        respx.get(PROFILE_URL).mock(return_value=httpx.Response(200, text=PROFILE_HTML))
        result = runner.invoke(app, ["check", "--no-banner", "--delay", "0", "-o", str(target), PROFILE_URL])

    assert result.exit_code == 0
    saved = json.loads(target.read_text(encoding="utf-8"))
    assert saved[0]["is_valid"] is True


def test_bad_proxy_surfaces_client_build_error(monkeypatch):
    monkeypatch.setenv("CREDIFY_PROXY", "ftp://proxy.example:21")
    result = runner.invoke(app, ["check", "--json", PROFILE_URL])

    assert result.exit_code == 0
    item = json.loads(result.stdout)[0]
    assert item["metadata"]["error_type"] == "CLIENT_BUILD_ERROR"
    assert item["confidence"] == 0.7


# ---------------------------------------------------------------------------
# doctor
# ---------------------------------------------------------------------------


def test_doctor_reports_bot_defense():
    with respx.mock:
        respx.get("https://www.linkedin.com/").mock(return_value=httpx.Response(999))
        result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0
    assert "999" in result.stdout


def test_doctor_fails_on_broken_fingerprints(monkeypatch, tmp_path: Path):
    broken = tmp_path / "fp.json"
    broken.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("CREDIFY_FINGERPRINTS_PATH", str(broken))
    with respx.mock:
        respx.get("https://www.linkedin.com/").mock(return_value=httpx.Response(200))
        result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 1


def test_malformed_env_exits_2(monkeypatch):
    monkeypatch.setenv("CREDIFY_HTTP_TIMEOUT_SECONDS", "abc")
    result = runner.invoke(app, ["check", "--json", PROFILE_URL])

    assert result.exit_code == 2
    assert "Invalid CREDIFY_* configuration" in result.stdout


def test_broken_fingerprints_surface_client_build_error(monkeypatch, tmp_path: Path):
    broken = tmp_path / "fp.json"
    broken.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("CREDIFY_FINGERPRINTS_PATH", str(broken))
    with respx.mock as mock:
        result = runner.invoke(app, ["check", "--json", "--delay", "0", PROFILE_URL])
        assert not mock.calls

    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["metadata"]["error_type"] == "CLIENT_BUILD_ERROR"
