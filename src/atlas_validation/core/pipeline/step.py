# src/atlas_validation/core/pipeline/step.py
"""
Contrato canônico de Step do Atlas Validation.

Este módulo define o protocolo formal que qualquer Step deve satisfazer
para ser executável dentro de um pipeline.

Um Step é a menor unidade executável do pipeline: recebe um `Dataset`
e a configuração da execução, e devolve um `Dataset`.

Responsabilidades de um Step:
    - validar e/ou transformar o `value` do dataset
    - registrar falhas exclusivamente como `Issue` em `dataset.issues`
    - rebaixar `typed` para False quando não puder garantir a forma

Princípios fundamentais:
    - Steps não conhecem o executor
    - Steps não controlam ordem de execução
    - Falhas de validação nunca são levantadas como exceção
    - Conformidade é garantida por duck typing (@runtime_checkable)

Limites explícitos:
    - Não decide políticas de interrupção (abort/skip)
    - Não remove nem reordena issues existentes
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .types import StepKind

if TYPE_CHECKING:
    from atlas_validation.core.config.settings import ValidationConfig
    from atlas_validation.core.dataset import Dataset


@runtime_checkable
class Step(Protocol):
    """
    Contrato canônico de um Step do Atlas Validation.

    Atributos obrigatórios:
        - kind: classificação semântica do Step (`StepKind`)
        - type: código estável do Step (ex.: "min_length"), usado em issues e trace

    O protocolo não impõe herança, apenas conformidade estrutural. Um
    `Pipeline` também satisfaz este protocolo, o que permite aninhamento.
    """
    kind: StepKind
    type: str

    def run(self, dataset: "Dataset", config: "ValidationConfig") -> "Dataset":
        """Executa o Step sobre o dataset e devolve o dataset resultante."""
        ...
