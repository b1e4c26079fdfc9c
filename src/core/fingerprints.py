"""Tabla de huellas (data-driven) para clasificar respuestas de LinkedIn.

Idea:
- En vez de ramas `if` con strings incrustados, el clasificador recorre una
  lista ordenada de reglas; la primera que coincide decide.
- LinkedIn cambia su markup: actualizar la tabla (o apuntar
  `CREDIFY_FINGERPRINTS_PATH` a un JSON propio) no toca el flujo de control.

Formato JSON:
    {"rules": [{"name": "...", "source": "final_url|body|status",
                "verdict": "not_found|auth_required",
                "all_of": ["..."], "status_codes": [999]}]}
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.config import BOT_DEFENSE_STATUS
from core.domain.models import ProbeOutcome


class RuleSource(str, Enum):
    FINAL_URL = "final_url"
    BODY = "body"
    STATUS = "status"


class RuleVerdict(str, Enum):
    NOT_FOUND = "not_found"
    AUTH_REQUIRED = "auth_required"


class FingerprintRule(BaseModel):
    """Una huella: todas las subcadenas de `all_of` deben aparecer (o el status coincidir)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    source: RuleSource
    verdict: RuleVerdict
    all_of: tuple[str, ...] = Field(
        default=(),
        description="Subcadenas que deben coexistir (reglas final_url/body).",
    )
    status_codes: tuple[int, ...] = Field(
        default=(),
        description="Status que disparan la regla (reglas status).",
    )

    @model_validator(mode="after")
    def _check_payload(self) -> "FingerprintRule":
        if self.source is RuleSource.STATUS:
            if not self.status_codes:
                raise ValueError(f"rule {self.name!r}: status rules need status_codes")
        elif not self.all_of or not all(self.all_of):
            raise ValueError(f"rule {self.name!r}: text rules need non-empty all_of")
        return self

    def matches(self, outcome: ProbeOutcome) -> bool:
        if self.source is RuleSource.STATUS:
            return outcome.http_status in self.status_codes
        haystack = outcome.final_url if self.source is RuleSource.FINAL_URL else (outcome.body or "")
        return all(needle in haystack for needle in self.all_of)


class FingerprintTable(BaseModel):
    rules: tuple[FingerprintRule, ...] = Field(default_factory=tuple)


# Apóstrofes con los que LinkedIn sirve "doesn't": plano, tipográfico y entidades.
APOSTROPHE_VARIANTS: tuple[tuple[str, str], ...] = (
    ("plain", "'"),
    ("curly", "’"),
    ("html_decimal", "&#39;"),
    ("html_hex", "&#x27;"),
    ("xml", "&apos;"),
)


def _rule(name: str, source: RuleSource, verdict: RuleVerdict, *needles: str) -> FingerprintRule:
    return FingerprintRule(name=name, source=source, verdict=verdict, all_of=needles)


def _default_rules() -> tuple[FingerprintRule, ...]:
    not_found = RuleVerdict.NOT_FOUND
    auth = RuleVerdict.AUTH_REQUIRED
    body = RuleSource.BODY

    rules: list[FingerprintRule] = [
        # 1) Redirección a la página 404.
        _rule("redirect_404_path", RuleSource.FINAL_URL, not_found, "/404/"),
        _rule("redirect_404_root", RuleSource.FINAL_URL, not_found, "linkedin.com/404"),
        # 2) Muro de autenticación.
        _rule("authwall", body, auth, "/authwall"),
        _rule("session_redirect", body, auth, "sessionRedirect"),
    ]

    # 3) Páginas de error.
    for label, apos in APOSTROPHE_VARIANTS:
        rules.append(_rule(f"page_doesnt_exist_{label}", body, not_found, f"This page doesn{apos}t exist"))
    rules.extend(
        [
            _rule("page_not_found", body, not_found, "Page not found"),
            _rule("check_the_url", body, not_found, "Check the URL or return to LinkedIn home"),
            _rule("check_your_url", body, not_found, "Check your URL or return to LinkedIn home"),
            _rule("return_home", body, not_found, "return to LinkedIn home"),
        ]
    )
    for label, apos in APOSTROPHE_VARIANTS:
        rules.append(_rule(f"feed_doesnt_exist_{label}", body, not_found, "Go to your feed", f"doesn{apos}t exist"))

    # 4) Sigue bloqueado tras el reintento y ninguna huella de texto decidió.
    rules.append(
        FingerprintRule(
            name="bot_defense_status",
            source=RuleSource.STATUS,
            verdict=auth,
            status_codes=(BOT_DEFENSE_STATUS,),
        )
    )

    return tuple(rules)


DEFAULT_TABLE = FingerprintTable(rules=_default_rules())


def load_fingerprints(path: Path) -> FingerprintTable:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    return FingerprintTable.model_validate(data)


def resolve_table(path: Path | None) -> FingerprintTable:
    """Tabla configurada, o la tabla por defecto si no hay ruta."""

    if path is None:
        return DEFAULT_TABLE
    return load_fingerprints(path)
