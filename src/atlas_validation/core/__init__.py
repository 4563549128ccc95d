# src/atlas_validation/core/__init__.py
"""
Core do Atlas Validation.

Este pacote contém o núcleo de execução de pipelines de validação e
transformação, independente de qualquer biblioteca concreta de Steps.

Componentes principais:
    - dataset    → envelope `Dataset` (value + typed + issues)
    - issues     → registro canônico de falhas (`Issue`)
    - config     → `ValidationConfig` e carregamento de arquivos
    - pipeline   → protocolo de Step, `StepKind` e `RunTrace`
    - engine     → `Pipeline` (executor) e pontos de entrada de parse

Limites explícitos:
    - Não define o que é um valor "válido" para nenhum formato
    - Não realiza I/O fora do loader de configuração
"""
