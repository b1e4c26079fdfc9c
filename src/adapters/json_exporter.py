"""Exportación JSON de resultados para agentes.

Por qué JSON:
- Interoperabilidad con pipelines de leads y otras herramientas.
- Permite persistir la evidencia de una validación por lotes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import AgentResult


def results_payload(results: Sequence[AgentResult]) -> list[dict]:
    return [result.model_dump(mode="json") for result in results]


def export_results_json(*, results: Sequence[AgentResult], output_path: Path) -> Path:
    """Exporta resultados a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(results_payload(results), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
