# src/atlas_settings/core/diagnostics.py
"""
Diagnósticos estruturados do Atlas Settings.

Este módulo define o `DiagnosticLog`, o coletor canônico de sinais não
fatais produzidos durante o parse, a construção de árvores de valores e
a filtragem de admissão dos modelos de configuração.

Decisões arquiteturais:
    - Logs não são strings livres, mas eventos estruturados
    - Diagnósticos nunca interrompem o processamento
    - Cada modelo possui (ou recebe injetado) o seu próprio log

Invariantes:
    - Todo evento contém `source`, `level`, `message` e `timestamp`
    - Dentro de uma passada, a coleção de eventos cresce de forma incremental
    - O dono do log decide quando descartá-lo (`clear`)
    - Eventos de nível WARNING também são agregados em `warnings`

Limites explícitos:
    - Não persiste eventos
    - Não apresenta eventos em UI
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class DiagnosticLog:
    """
    Coletor de eventos estruturados de um modelo de configuração.

    Campos:
        - source: identificação da origem (ex.: nome do arquivo de settings)
        - events: eventos na ordem em que foram emitidos
        - warnings: mensagens dos eventos WARNING, para inspeção rápida
    """
    source: str = ""

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: List[str] = field(default_factory=list, init=False)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "source": self.source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
        if level == "WARNING":
            self.warnings.append(message)

    def info(self, message: str, **extra: Any) -> None:
        self.log(level="INFO", message=message, **extra)

    def warning(self, message: str, **extra: Any) -> None:
        self.log(level="WARNING", message=message, **extra)

    def error(self, message: str, **extra: Any) -> None:
        self.log(level="ERROR", message=message, **extra)

    def of_kind(self, kind: str) -> List[Dict[str, Any]]:
        return [ev for ev in self.events if ev.get("kind") == kind]

    def clear(self) -> None:
        self.events.clear()
        self.warnings.clear()
