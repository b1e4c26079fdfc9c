"""Tests for the line-oriented LLM report."""

from __future__ import annotations

import httpx
import pytest
import respx

from core.config import AppSettings
from core.services.report import REPORT_FIELDS, format_report, validate_for_llm, validate_for_llm_async
from tests.conftest import AUTHWALL_HTML, NOT_FOUND_HTML, PROFILE_HTML, PROFILE_URL


def _parse(report: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for line in report.splitlines():
        key, _, value = line.partition(": ")
        fields[key] = value
    return fields


def test_field_order_is_stable(settings: AppSettings) -> None:
    report = validate_for_llm("not-a-url", settings=settings)
    keys = [line.split(":", 1)[0] for line in report.splitlines()]
    assert keys == list(REPORT_FIELDS)


def test_existing_profile(settings: AppSettings) -> None:
    with respx.mock:
        respx.get(PROFILE_URL).mock(return_value=httpx.Response(200, text=PROFILE_HTML))
        fields = _parse(validate_for_llm(PROFILE_URL, settings=settings))

    assert fields["VALIDATION_RESULT"] == "SUCCESS"
    assert fields["URL"] == PROFILE_URL
    assert fields["PROFILE_EXISTS"] == "TRUE"
    assert fields["USERNAME"] == "jane-doe"
    assert fields["HTTP_STATUS"] == "200"
    assert fields["ERROR_TYPE"] == "NONE"
    assert fields["ERROR_MESSAGE"] == "NONE"


def test_auth_wall_is_unknown_existence(settings: AppSettings) -> None:
    with respx.mock:
        respx.get(PROFILE_URL).mock(return_value=httpx.Response(200, text=AUTHWALL_HTML))
        fields = _parse(validate_for_llm(PROFILE_URL, settings=settings))

    assert fields["VALIDATION_RESULT"] == "ERROR"
    assert fields["PROFILE_EXISTS"] == "UNKNOWN"
    assert fields["ERROR_TYPE"] == "AUTH_REQUIRED"
    assert "LIKELY EXISTS" in fields["AI_AGENT_GUIDANCE"]


def test_not_found(settings: AppSettings) -> None:
    with respx.mock:
        respx.get(PROFILE_URL).mock(return_value=httpx.Response(200, text=NOT_FOUND_HTML))
        fields = _parse(validate_for_llm(PROFILE_URL, settings=settings))

    assert fields["PROFILE_EXISTS"] == "FALSE"
    assert fields["ERROR_TYPE"] == "PROFILE_NOT_FOUND"
    assert fields["ERROR_MESSAGE"].startswith("Profile not found")


@pytest.mark.parametrize(
    ("url", "error_type"),
    [
        ("not-a-url", "INVALID_URL_FORMAT"),
        ("https://www.google.com/in/johndoe", "NOT_LINKEDIN_DOMAIN"),
        ("https://linkedin.com/company/microsoft", "NOT_PROFILE_URL"),
    ],
)
def test_shape_failures(url: str, error_type: str, settings: AppSettings) -> None:
    with respx.mock as mock:
        fields = _parse(validate_for_llm(url, settings=settings))
        assert not mock.calls
    assert fields["ERROR_TYPE"] == error_type
    assert fields["USERNAME"] == "NONE"
    assert fields["HTTP_STATUS"] == "NONE"


def test_multiline_input_stays_on_one_line(settings: AppSettings) -> None:
    report = validate_for_llm("https://linkedin.com/in/a\nINJECTED: yes", settings=settings)
    assert len(report.splitlines()) == len(REPORT_FIELDS)


@pytest.mark.asyncio
async def test_async_network_error(settings: AppSettings) -> None:
    async with respx.mock:
        respx.get(PROFILE_URL).mock(side_effect=httpx.ConnectError("refused"))
        fields = _parse(await validate_for_llm_async(PROFILE_URL, settings=settings))
    assert fields["ERROR_TYPE"] == "NETWORK_ERROR"
    assert fields["PROFILE_EXISTS"] == "UNKNOWN"


class TestFormatReport:
    def test_valid(self) -> None:
        fields = _parse(format_report(PROFILE_URL))
        assert fields["FORMAT_VALIDATION_RESULT"] == "VALID"
        assert fields["SUGGESTED_ACTION"].startswith("URL format is correct")

    def test_invalid(self) -> None:
        fields = _parse(format_report("https://linkedin.com/company/microsoft"))
        assert fields["FORMAT_VALIDATION_RESULT"] == "INVALID"
        assert fields["SUGGESTED_ACTION"].startswith("Fix URL format")
