"""
Fixtures compartilhados para testes do Atlas Validation.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações de arquivo (YAML) determinísticas
- um diário de chamadas para observar quais Steps executaram
- uma fábrica de Steps duck-typed com comportamento controlado

O objetivo destas fixtures é permitir testes do core (dataset, config,
executor) sem depender da biblioteca de Steps de referência.

Decisões arquiteturais:
    - Steps de teste utilizam duck typing em vez de herança
    - Cada Step registra sua execução no diário compartilhado do teste
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa pipeline
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são isoladas por teste
"""

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao uso real.

    Returns:
        str: Conteúdo YAML representando configuração padrão (defaults).
    """
    return """\
validation:
  abort_early: false
  abort_pipe_early: false
  skip_pipe: false
  lang: en
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de configuração local (override) semelhante ao uso real.

    Representa apenas overrides: liga `abort_pipe_early` e adiciona
    uma opção livre repassada aos Steps.
    """
    return """\
validation:
  abort_pipe_early: true
  message: custom failure
"""


# =====================================================
# Step fixtures
# =====================================================

@pytest.fixture
def call_log() -> list:
    """Diário de execução: cada Step de teste acrescenta seu `type` ao rodar."""
    return []


@pytest.fixture
def RecordingStep(call_log):
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de Step.

    A classe retornada:
    - respeita o protocolo de Step (`kind`, `type`, `run`)
    - registra sua execução em `call_log`
    - opcionalmente acrescenta uma issue, transforma o valor e/ou
      define `typed` no dataset devolvido

    Decisões arquiteturais:
        - O Step é definido localmente para evitar acoplamento com Steps reais
        - O comportamento é deliberadamente simples e previsível

    Returns:
        type: Classe _RecordingStep que pode ser instanciada pelos testes.
    """
    from atlas_validation.core.issues import Issue
    from atlas_validation.core.pipeline.types import StepKind

    class _RecordingStep:
        def __init__(
            self,
            name: str,
            kind: StepKind = StepKind.VALIDATION,
            *,
            fail: bool = False,
            typed=None,
            operation=None,
        ):
            self.type = name
            self.kind = kind
            self.fail = fail
            self.set_typed = typed
            self.operation = operation

        def run(self, dataset, config):
            call_log.append(self.type)
            if self.operation is not None:
                dataset.value = self.operation(dataset.value)
            if self.fail:
                dataset.add_issue(
                    Issue(
                        kind=self.kind.value,
                        type=self.type,
                        input=dataset.value,
                        expected=None,
                        received="x",
                        message=f"{self.type} failed",
                    )
                )
            if self.set_typed is not None:
                dataset.typed = self.set_typed
            return dataset

    return _RecordingStep


@pytest.fixture
def initial_dataset():
    """Dataset inicial conforme produzido pelo chamador: não tipado e sem issues."""
    from atlas_validation.core.dataset import Dataset

    return Dataset.from_input("raw")
