# tests/core/engine/test_executor_invariants.py
"""
Testes dos invariantes do executor ao longo de uma execução.

Os testes asseguram que:
- o número de issues nunca diminui entre Steps
- issues são preservadas na ordem de ocorrência
- `typed = False` é pegajoso: nenhum Step posterior o promove
- execuções são independentes e reentrantes
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

try:
    from atlas_validation.core.config.settings import ValidationConfig
    from atlas_validation.core.dataset import Dataset
    from atlas_validation.core.engine.executor import Pipeline
    from atlas_validation.core.pipeline.types import StepKind
except Exception as e:  # noqa: BLE001
    Pipeline = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing executor modules. Import error: {_IMPORT_ERR}")


class _IssueCounter:
    """Step que apenas observa o tamanho de `issues` recebido."""
    kind = StepKind.VALIDATION
    type = "counter"

    def __init__(self, sink):
        self.sink = sink

    def run(self, dataset, config):
        self.sink.append(len(dataset.issues))
        return dataset


def test_issue_count_is_monotonic(RecordingStep, initial_dataset):
    _require_imports()
    counts = []
    pipeline = Pipeline(
        _IssueCounter(counts),
        RecordingStep("v1", fail=True),
        _IssueCounter(counts),
        RecordingStep("v2"),
        _IssueCounter(counts),
        RecordingStep("v3", fail=True),
        _IssueCounter(counts),
    )

    out = pipeline.run(initial_dataset, ValidationConfig())

    assert counts == sorted(counts)
    assert counts == [0, 1, 1, 2]
    assert [i.type for i in out.issues] == ["v1", "v3"]


def test_untyped_is_sticky(RecordingStep, initial_dataset):
    """
    Verifica que, após um Step devolver `typed = False`, nenhum Step
    posterior consegue promover o resultado final para tipado.
    """
    _require_imports()
    pipeline = Pipeline(
        RecordingStep("s0", StepKind.SCHEMA, typed=True),
        RecordingStep("v1", typed=False),
        RecordingStep("v2", typed=True),
    )

    out = pipeline.run(initial_dataset, ValidationConfig())

    assert out.issues == []
    assert out.typed is False


def test_untyped_input_does_not_block_first_schema(RecordingStep, initial_dataset):
    _require_imports()
    assert initial_dataset.typed is False

    out = Pipeline(RecordingStep("s0", StepKind.SCHEMA, typed=True)).run(initial_dataset)

    assert out.typed is True


def test_pipeline_holds_no_state_between_runs(RecordingStep, call_log):
    _require_imports()
    pipeline = Pipeline(RecordingStep("s0", StepKind.SCHEMA, typed=True), RecordingStep("v1", fail=True))

    first = pipeline.run(Dataset.from_input("a"))
    second = pipeline.run(Dataset.from_input("b"))

    assert len(first.issues) == 1
    assert len(second.issues) == 1
    assert first.issues is not second.issues
    assert call_log == ["s0", "v1", "s0", "v1"]


def test_concurrent_runs_are_independent():
    _require_imports()

    class _Double:
        kind = StepKind.TRANSFORMATION
        type = "double"

        def run(self, dataset, config):
            dataset.value = dataset.value * 2
            return dataset

    class _Typed:
        kind = StepKind.SCHEMA
        type = "int"

        def run(self, dataset, config):
            dataset.typed = True
            return dataset

    pipeline = Pipeline(_Typed(), _Double(), _Double())

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda n: pipeline.run(Dataset.from_input(n)).value, range(50)))

    assert results == [n * 4 for n in range(50)]
