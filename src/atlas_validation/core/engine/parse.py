# src/atlas_validation/core/engine/parse.py
"""
Pontos de entrada do lado do chamador.

Estas funções criam o dataset inicial a partir do valor bruto, executam
um Step (tipicamente um `Pipeline`) e apresentam o resultado:

    - safe_parse → `ParseResult`, sem exceções
    - parse      → valor final ou `ValidationError`
    - is_valid   → booleano

Limites explícitos:
    - Não alteram a política de interrupção do executor
    - Não formatam nem traduzem mensagens de issues
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from atlas_validation.core.config.settings import ValidationConfig
from atlas_validation.core.dataset import Dataset
from atlas_validation.core.exceptions import validation_error
from atlas_validation.core.issues import Issue
from atlas_validation.core.pipeline.step import Step


@dataclass(frozen=True)
class ParseResult:
    """Resultado imutável de `safe_parse`."""
    typed: bool
    success: bool
    output: Any
    issues: List[Issue] = field(default_factory=list)


def safe_parse(step: Step, value: Any, config: Optional[ValidationConfig] = None) -> ParseResult:
    dataset = step.run(Dataset.from_input(value), config or ValidationConfig())
    return ParseResult(
        typed=dataset.typed,
        success=not dataset.issues,
        output=dataset.value,
        issues=list(dataset.issues or ()),
    )


def parse(step: Step, value: Any, config: Optional[ValidationConfig] = None) -> Any:
    """
    Executa o Step e devolve o valor final.

    Raises:
        ValidationError: Se a execução terminar com pelo menos uma issue.
    """
    result = safe_parse(step, value, config)
    if not result.success:
        raise validation_error(result.issues)
    return result.output


def is_valid(step: Step, value: Any, config: Optional[ValidationConfig] = None) -> bool:
    return safe_parse(step, value, config).success
