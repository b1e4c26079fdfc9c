"""Clasificador de respuestas: resultado crudo de la sonda -> taxonomía.

LinkedIn sirve la misma página base para perfiles existentes, muros de login
y algunos perfiles inexistentes, así que la decisión no parsea la página:
recorre la tabla ordenada de `core.fingerprints`. Gana la primera regla que
coincide; sin coincidencias, el perfil existe.

Por qué función pura:
- Sin red ni estado: se prueba con fixtures de HTML y da el mismo resultado
  en el modo bloqueante y en el async.
"""

from __future__ import annotations

import logging

from core.domain.models import ProbeOutcome
from core.domain.taxonomy import AuthRequired, Exists, NotFound, ProbeVerdict
from core.fingerprints import DEFAULT_TABLE, FingerprintRule, FingerprintTable, RuleVerdict

logger = logging.getLogger(__name__)


def first_match(outcome: ProbeOutcome, table: FingerprintTable = DEFAULT_TABLE) -> FingerprintRule | None:
    for rule in table.rules:
        if rule.matches(outcome):
            return rule
    return None


def classify(outcome: ProbeOutcome, table: FingerprintTable = DEFAULT_TABLE) -> ProbeVerdict:
    rule = first_match(outcome, table)
    status = outcome.http_status

    if rule is None:
        logger.debug("no fingerprint matched %s (HTTP %s)", outcome.final_url, status)
        return Exists(http_status=status)

    logger.debug("fingerprint %r matched %s (HTTP %s)", rule.name, outcome.final_url, status)
    if rule.verdict is RuleVerdict.AUTH_REQUIRED:
        return AuthRequired(http_status=status)
    return NotFound(http_status=status)
