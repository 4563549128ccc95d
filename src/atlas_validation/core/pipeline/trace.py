# src/atlas_validation/core/pipeline/trace.py
"""
Trace estruturado de uma execução de pipeline.

Este módulo define o `RunTrace`, o registro de eventos que o executor
alimenta durante uma execução quando o chamador o anexa à configuração
(`ValidationConfig.trace`).

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio trace)
    - O trace pertence ao chamador; o executor apenas acrescenta eventos
    - Ausência de estado global ou logger compartilhado

Invariantes:
    - Eventos são apenas acrescentados, na ordem em que ocorrem
    - Todo evento inclui `run_id`, `step`, `level` e `timestamp` UTC

Limites explícitos:
    - Não executa Steps
    - Não decide políticas de interrupção
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4


@dataclass
class RunTrace:
    """
    Registro de eventos de uma execução de pipeline.

    Um mesmo `RunTrace` não deve ser compartilhado entre execuções
    concorrentes: cada chamada a `run` com trace deve receber o seu.
    """
    run_id: str = field(default_factory=lambda: uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def log(self, *, step: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step": step,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def filter(self, *, level: str | None = None, message: str | None = None) -> List[Dict[str, Any]]:
        return [
            e for e in self.events
            if (level is None or e["level"] == level)
            and (message is None or e["message"] == message)
        ]
