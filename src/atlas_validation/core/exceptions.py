# src/atlas_validation/core/exceptions.py
"""
Atlas Validation — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Atlas Validation.

Objetivo:
- Sinalizar defeitos de montagem (pipeline vazio, item que não é Step)
- Expor falhas de validação apenas na borda (`parse`), nunca dentro de Steps

Regras:
- Falhas de validação esperadas são issues, não exceções.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .issues import Issue


@dataclass(frozen=True)
class AtlasException(Exception):
    """Base class para exceções internas do Atlas.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Montagem do pipeline
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineConfigurationError(AtlasException):
    """Pipeline montado com itens inválidos ou sem itens."""


# ---------------------------------------------------------------------------
# Borda (parse)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationError(AtlasException):
    """Levantada por `parse` quando a execução termina com issues."""
    issues: List[Issue] = field(default_factory=list)


def validation_error(issues: List[Issue]) -> ValidationError:
    first = issues[0].message if issues else "Validation failed"
    return ValidationError(
        message=first,
        details={"issues": [i.to_dict() for i in issues]},
        hint="Use safe_parse para inspecionar todas as issues sem exceção",
        issues=list(issues),
    )
