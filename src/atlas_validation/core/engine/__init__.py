# src/atlas_validation/core/engine/__init__.py
"""
Engine do Atlas Validation.

Componentes principais:
    - executor → `Pipeline`, `pipe` e a política de interrupção (`should_stop`)
    - parse    → entrada do chamador (`safe_parse`, `parse`, `is_valid`)

Princípios fundamentais:
    - Execução síncrona, sequencial e em passada única
    - A política de interrupção é avaliada apenas entre Steps
    - Nenhum estado compartilhado entre execuções
"""

from .executor import Pipeline, StopReason, pipe, should_stop
from .parse import ParseResult, is_valid, parse, safe_parse

__all__ = [
    "Pipeline",
    "StopReason",
    "pipe",
    "should_stop",
    "ParseResult",
    "safe_parse",
    "parse",
    "is_valid",
]
