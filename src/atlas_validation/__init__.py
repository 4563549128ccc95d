# src/atlas_validation/__init__.py
"""
Atlas Validation — motor composável de validação e transformação de dados.

Um valor é verificado e progressivamente remodelado por uma sequência
ordenada de Steps independentes, acumulando issues estruturadas ao longo
do caminho.

Arquitetura em alto nível:
    - core.dataset   → envelope Dataset (value + typed + issues)
    - core.config    → ValidationConfig e carregamento de arquivos
    - core.pipeline  → protocolo de Step, StepKind e RunTrace
    - core.engine    → Pipeline (executor) e parse/safe_parse
    - steps          → biblioteca mínima de Steps de referência

Limites explícitos:
    - Não define o que é um valor "válido" (isso vive nos Steps)
    - Não formata nem traduz mensagens
"""

from .core.config import ValidationConfig
from .core.dataset import Dataset
from .core.engine import ParseResult, Pipeline, is_valid, parse, pipe, safe_parse
from .core.exceptions import PipelineConfigurationError, ValidationError
from .core.issues import Issue
from .core.pipeline import RunTrace, Step, StepKind

__all__ = [
    "Dataset",
    "Issue",
    "Step",
    "StepKind",
    "Pipeline",
    "pipe",
    "ValidationConfig",
    "RunTrace",
    "ParseResult",
    "safe_parse",
    "parse",
    "is_valid",
    "PipelineConfigurationError",
    "ValidationError",
]
