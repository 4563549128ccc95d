"""Transformação arbitrária definida pelo chamador."""

from __future__ import annotations

from typing import Any, Callable

from atlas_validation.core.config.settings import ValidationConfig
from atlas_validation.core.dataset import Dataset
from atlas_validation.core.pipeline.types import StepKind


class Transform:
    """
    Aplica `operation` ao valor corrente.

    A operação é chamada incondicionalmente: o executor já impede que
    uma transformação rode sobre um valor com issues.
    """
    kind = StepKind.TRANSFORMATION
    type = "transform"

    def __init__(self, operation: Callable[[Any], Any]):
        self.operation = operation

    def run(self, dataset: Dataset, config: ValidationConfig) -> Dataset:
        dataset.value = self.operation(dataset.value)
        return dataset


def transform(operation: Callable[[Any], Any]) -> Transform:
    return Transform(operation)
