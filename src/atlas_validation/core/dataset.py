# src/atlas_validation/core/dataset.py
"""
Envelope canônico threaded pelo pipeline.

Este módulo define o `Dataset`, a estrutura uniforme que todo Step lê e
devolve: o valor corrente, se ele está tipado e as issues acumuladas.

Contrato de produção (todo Step):
    - `value` reflete a transformação do Step (ou o valor intacto)
    - `issues` é a sequência recebida com zero ou mais issues ao final
    - `typed` só é True quando o Step confirma a forma esperada

Invariantes:
    - `issues` é append-only durante uma execução
    - Um dataset é criado uma vez por tentativa de validação

Limites explícitos:
    - Não executa Steps
    - Não interpreta issues
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from .issues import Issue


@dataclass
class Dataset:
    value: Any
    typed: bool = False
    issues: List[Issue] = field(default_factory=list)

    @classmethod
    def from_input(cls, value: Any) -> "Dataset":
        """Cria o dataset inicial a partir do valor bruto, ainda não tipado."""
        return cls(value=value, typed=False, issues=[])

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)

    def add_issue(self, issue: Issue) -> None:
        self.issues.append(issue)
