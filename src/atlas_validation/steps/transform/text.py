"""
Transformações de texto.

Aplicadas apenas quando o valor é `str`; qualquer outro valor passa
intacto. `typed` não é alterado.
"""

from __future__ import annotations

from atlas_validation.core.config.settings import ValidationConfig
from atlas_validation.core.dataset import Dataset
from atlas_validation.core.pipeline.types import StepKind


class _TextTransformation:
    kind = StepKind.TRANSFORMATION
    type = ""

    def apply(self, value: str) -> str:
        raise NotImplementedError

    def run(self, dataset: Dataset, config: ValidationConfig) -> Dataset:
        if isinstance(dataset.value, str):
            dataset.value = self.apply(dataset.value)
        return dataset


class ToUpperCase(_TextTransformation):
    type = "to_upper_case"

    def apply(self, value: str) -> str:
        return value.upper()


class ToLowerCase(_TextTransformation):
    type = "to_lower_case"

    def apply(self, value: str) -> str:
        return value.lower()


class Trim(_TextTransformation):
    type = "trim"

    def apply(self, value: str) -> str:
        return value.strip()


def to_upper_case() -> ToUpperCase:
    return ToUpperCase()


def to_lower_case() -> ToLowerCase:
    return ToLowerCase()


def trim() -> Trim:
    return Trim()
