# src/atlas_validation/core/engine/executor.py
"""
Executor de pipelines do Atlas Validation.

Um `Pipeline` é uma sequência ordenada, não vazia e imutável de Steps,
executada em uma única passada. Após cada Step o executor decide se
continua ou interrompe a execução:

    parar  ⇔  skip_pipe
              ou (há issues e (abort_early
                               ou abort_pipe_early
                               ou o próximo Step é schema/transformation))

Steps `validation` seguintes continuam rodando sobre um valor que já
acumulou issues, para que todas as verificações independentes sejam
reportadas. Steps `schema` e `transformation` nunca rodam sobre um
valor já inválido.

Invariantes:
    - Steps executam estritamente na ordem declarada
    - Issues nunca são filtradas, transformadas ou reordenadas
    - Interrupção antecipada força `typed = False`
    - Depois que um Step devolve `typed = False`, o resultado final também é False
    - Nenhum estado é mantido entre execuções (reentrante)

Limites explícitos:
    - Não levanta exceção por falha de validação
    - Não interrompe um Step já em execução
    - Não cria datasets (o inicial vem do chamador)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, Optional, Tuple

from atlas_validation.core.config.settings import ValidationConfig
from atlas_validation.core.dataset import Dataset
from atlas_validation.core.exceptions import PipelineConfigurationError
from atlas_validation.core.pipeline.step import Step
from atlas_validation.core.pipeline.types import StepKind


class StopReason(str, Enum):
    """Motivo pelo qual uma execução foi interrompida antes do fim."""
    SKIP_PIPE = "skip_pipe"
    ABORT_EARLY = "abort_early"
    ABORT_PIPE_EARLY = "abort_pipe_early"
    NEXT_SCHEMA = "next_schema"
    NEXT_TRANSFORMATION = "next_transformation"


def should_stop(
    dataset: Dataset,
    next_step: Optional[Step],
    config: ValidationConfig,
) -> Optional[StopReason]:
    """
    Decide se a execução deve parar após o Step corrente.

    Retorna o `StopReason` aplicável (na ordem de precedência abaixo) ou
    None quando a execução deve continuar.

    Precedência:
        1. skip_pipe (independe de issues)
        2. abort_early
        3. abort_pipe_early
        4. próximo Step do tipo schema
        5. próximo Step do tipo transformation
    """
    if config.skip_pipe:
        return StopReason.SKIP_PIPE
    if not dataset.issues:
        return None
    if config.abort_early:
        return StopReason.ABORT_EARLY
    if config.abort_pipe_early:
        return StopReason.ABORT_PIPE_EARLY
    if next_step is not None:
        if next_step.kind == StepKind.SCHEMA:
            return StopReason.NEXT_SCHEMA
        if next_step.kind == StepKind.TRANSFORMATION:
            return StopReason.NEXT_TRANSFORMATION
    return None


def _step_name(step: Any) -> str:
    return getattr(step, "type", None) or type(step).__name__


def _check_step(index: int, step: Any) -> None:
    if not callable(getattr(step, "run", None)):
        raise PipelineConfigurationError(
            message="Pipe item is not a step",
            details={"index": index, "received": type(step).__name__},
            hint="Every pipe item must expose run(dataset, config)",
        )
    try:
        StepKind(getattr(step, "kind", None))
    except ValueError:
        raise PipelineConfigurationError(
            message="Pipe item has an invalid kind",
            details={"index": index, "kind": repr(getattr(step, "kind", None))},
            hint="Use one of: " + ", ".join(k.value for k in StepKind),
        ) from None


class Pipeline:
    """
    Sequência imutável de Steps que também se comporta como um Step.

    O `kind` do pipeline é o `kind` do seu primeiro item, e os demais
    atributos públicos do primeiro item (ex.: `type`, `expects`) ficam
    acessíveis diretamente no pipeline. Assim, um pipeline aninhado é
    tratado pelo pipeline pai exatamente como seu primeiro item seria.

    Aceita os Steps como argumentos posicionais ou uma única sequência.
    """

    __slots__ = ("_steps",)

    def __init__(self, *steps: Any) -> None:
        if len(steps) == 1 and isinstance(steps[0], (list, tuple)):
            steps = tuple(steps[0])

        if not steps:
            raise PipelineConfigurationError(
                message="Pipeline requires at least one step",
                details={"received": 0},
            )

        for index, step in enumerate(steps):
            _check_step(index, step)

        self._steps: Tuple[Step, ...] = tuple(steps)

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    @property
    def kind(self) -> StepKind:
        return StepKind(self._steps[0].kind)

    @property
    def type(self) -> str:
        return _step_name(self._steps[0])

    def __getattr__(self, name: str) -> Any:
        # Só é chamado quando o atributo não existe no próprio pipeline.
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._steps[0], name)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __repr__(self) -> str:
        names = ", ".join(_step_name(s) for s in self._steps)
        return f"Pipeline({names})"

    def run(self, dataset: Dataset, config: Optional[ValidationConfig] = None) -> Dataset:
        """
        Executa os Steps em ordem sobre o dataset e devolve o dataset final.

        Cada chamada é independente: o mesmo pipeline pode ser executado
        concorrentemente com datasets distintos.
        """
        if config is None:
            config = ValidationConfig()
        trace = config.trace

        steps = self._steps
        last = len(steps) - 1
        untyped = False

        for index, step in enumerate(steps):
            dataset = step.run(dataset, config)

            untyped = untyped or not dataset.typed
            if untyped:
                dataset.typed = False

            if trace is not None:
                trace.log(
                    step=_step_name(step),
                    level="debug",
                    message="step executed",
                    index=index,
                    issues=len(dataset.issues or ()),
                    typed=dataset.typed,
                )

            next_step = steps[index + 1] if index < last else None
            reason = should_stop(dataset, next_step, config)
            if reason is not None:
                dataset.typed = False
                if trace is not None:
                    trace.log(
                        step=_step_name(step),
                        level="info",
                        message="pipe stopped",
                        reason=reason.value,
                        skipped=last - index,
                    )
                break

        return dataset


def pipe(*steps: Any) -> Pipeline:
    """Monta um `Pipeline` a partir dos Steps informados."""
    return Pipeline(*steps)

