# tests/core/engine/test_parse.py
"""
Testes dos pontos de entrada do chamador (`safe_parse`, `parse`, `is_valid`).
"""
import pytest

try:
    from atlas_validation.core.config.settings import ValidationConfig
    from atlas_validation.core.engine.executor import pipe
    from atlas_validation.core.engine.parse import ParseResult, is_valid, parse, safe_parse
    from atlas_validation.core.exceptions import ValidationError
    from atlas_validation.core.pipeline.types import StepKind
except Exception as e:  # noqa: BLE001
    parse = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


@pytest.fixture(autouse=True)
def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing parse modules. Import error: {_IMPORT_ERR}")


def test_safe_parse_bootstraps_untyped_dataset(RecordingStep):
    seen = {}

    class _Probe:
        kind = StepKind.SCHEMA
        type = "probe"

        def run(self, dataset, config):
            seen["typed"] = dataset.typed
            seen["issues"] = list(dataset.issues)
            dataset.typed = True
            return dataset

    result = safe_parse(pipe(_Probe(), RecordingStep("v1")), "abc")

    assert seen == {"typed": False, "issues": []}
    assert result == ParseResult(typed=True, success=True, output="abc", issues=[])


def test_safe_parse_reports_failure(RecordingStep):
    result = safe_parse(pipe(RecordingStep("v1", fail=True)), "abc")

    assert result.success is False
    assert [i.type for i in result.issues] == ["v1"]


def test_parse_returns_output(RecordingStep):
    step = pipe(RecordingStep("s", StepKind.SCHEMA, typed=True, operation=str.upper))
    assert parse(step, "abc") == "ABC"


def test_parse_raises_validation_error_with_issues(RecordingStep):
    step = pipe(RecordingStep("v1", fail=True), RecordingStep("v2", fail=True))

    with pytest.raises(ValidationError) as info:
        parse(step, "abc")

    err = info.value
    assert str(err) == "v1 failed"
    assert [i.type for i in err.issues] == ["v1", "v2"]
    assert [d["type"] for d in err.details["issues"]] == ["v1", "v2"]


def test_parse_honours_config(RecordingStep, call_log):
    step = pipe(RecordingStep("v1", fail=True), RecordingStep("v2", fail=True))

    assert is_valid(step, "abc", ValidationConfig(abort_early=True)) is False
    assert call_log == ["v1"]
