"""Tests for the fingerprint table and its JSON loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.classifier import classify
from core.domain.models import ProbeOutcome
from core.domain.taxonomy import AuthRequired, Exists, NotFound
from core.fingerprints import (
    APOSTROPHE_VARIANTS,
    DEFAULT_TABLE,
    FingerprintRule,
    RuleSource,
    RuleVerdict,
    load_fingerprints,
    resolve_table,
)
from tests.conftest import PROFILE_URL


def test_default_table_order() -> None:
    names = [rule.name for rule in DEFAULT_TABLE.rules]
    assert names[:4] == ["redirect_404_path", "redirect_404_root", "authwall", "session_redirect"]
    assert names[-1] == "bot_defense_status"
    assert len(names) == len(set(names))
    assert sum(name.startswith("page_doesnt_exist_") for name in names) == len(APOSTROPHE_VARIANTS)


def test_resolve_default() -> None:
    assert resolve_table(None) is DEFAULT_TABLE


def test_load_from_json(tmp_path: Path) -> None:
    path = tmp_path / "fingerprints.json"
    path.write_text(
        json.dumps(
            {
                "rules": [
                    {"name": "gone", "source": "body", "verdict": "not_found", "all_of": ["Profile removed"]},
                    {"name": "blocked", "source": "status", "verdict": "auth_required", "status_codes": [429]},
                ]
            }
        ),
        encoding="utf-8",
    )
    table = resolve_table(path)

    def outcome(body: str, status: int = 200) -> ProbeOutcome:
        return ProbeOutcome(http_status=status, final_url=PROFILE_URL, body=body)

    assert [rule.name for rule in table.rules] == ["gone", "blocked"]
    assert isinstance(classify(outcome("Profile removed"), table), NotFound)
    assert isinstance(classify(outcome("", status=429), table), AuthRequired)
    # Replaces the built-in table entirely.
    assert isinstance(classify(outcome("Page not found"), table), Exists)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_fingerprints(tmp_path / "nope.json")


def test_text_rule_without_needles_is_rejected() -> None:
    with pytest.raises(ValidationError):
        FingerprintRule(name="empty", source=RuleSource.BODY, verdict=RuleVerdict.NOT_FOUND)


def test_status_rule_without_codes_is_rejected() -> None:
    with pytest.raises(ValidationError):
        FingerprintRule(name="status", source=RuleSource.STATUS, verdict=RuleVerdict.AUTH_REQUIRED)


def test_invalid_json_rule(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"rules": [{"name": "x", "source": "headers", "verdict": "not_found"}]}', encoding="utf-8")
    with pytest.raises(ValidationError):
        load_fingerprints(path)
