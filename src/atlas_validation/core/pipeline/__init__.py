# src/atlas_validation/core/pipeline/__init__.py
"""
# Pipeline Core — Atlas Validation

Este pacote define os **contratos canônicos** consumidos pelo executor.

## Componentes

- **types**
  - `StepKind`: classificação semântica fechada de Steps

- **step**
  - `Step` (Protocol): contrato mínimo `kind` + `type` + `run(dataset, config)`

- **trace**
  - `RunTrace`: eventos estruturados de uma execução

## Princípios Fundamentais

- Steps **não conhecem** o executor
- Falhas de validação são **issues**, nunca exceções
- Nenhuma decisão implícita ou silenciosa
"""

from .step import Step
from .trace import RunTrace
from .types import SHAPE_CHANGING_KINDS, StepKind

__all__ = ["Step", "StepKind", "RunTrace", "SHAPE_CHANGING_KINDS"]
