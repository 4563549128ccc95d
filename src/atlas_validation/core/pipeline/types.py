# src/atlas_validation/core/pipeline/types.py
"""
Tipos canônicos do pipeline do Atlas Validation.

Este módulo define a classificação semântica dos Steps, consumida
exclusivamente pela política de interrupção do executor.

Componentes principais:
    - StepKind → enum fechado de tipos de Step (schema, validation, transformation)

Princípios fundamentais:
    - Tipos são estáveis e serializáveis
    - Nenhuma lógica de execução vive neste módulo

Limites explícitos:
    - Não executa Steps
    - Não decide políticas de execução
"""

from __future__ import annotations

from enum import Enum


class StepKind(str, Enum):
    """
    Tipos semânticos de Steps no pipeline.

    O `kind` é uma tag fechada: o executor apenas compara o valor do
    próximo Step para decidir se a execução continua. O próprio Step
    nunca altera seu comportamento com base no `kind`.

    Tipos definidos:
        - SCHEMA: verifica (e tipa) a forma do valor, pode ser aninhado
        - VALIDATION: verificação pontual sobre um valor já tipado
        - TRANSFORMATION: altera o valor (e possivelmente sua forma)

    Invariantes:
        - Todo Step possui exatamente um `kind`
        - O valor textual do enum é estável e canônico

    Os valores são strings para facilitar serialização de issues.
    """
    SCHEMA = "schema"
    VALIDATION = "validation"
    TRANSFORMATION = "transformation"


# Kinds que não devem rodar sobre um valor que já acumulou issues.
SHAPE_CHANGING_KINDS = frozenset({StepKind.SCHEMA, StepKind.TRANSFORMATION})
