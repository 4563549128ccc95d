"""
Schemas primitivos: confirmam a forma do valor e o marcam como tipado.

Um schema é o único tipo de Step que promove `typed` para True.
"""

from __future__ import annotations

from typing import Optional

from atlas_validation.core.config.settings import ValidationConfig
from atlas_validation.core.dataset import Dataset
from atlas_validation.core.issues import Message, stringify
from atlas_validation.core.pipeline.types import StepKind

from ..base import is_number, report_issue


class StringSchema:
    kind = StepKind.SCHEMA
    type = "string"
    expects = "string"

    def __init__(self, message: Optional[Message] = None):
        self.message = message

    def run(self, dataset: Dataset, config: ValidationConfig) -> Dataset:
        if isinstance(dataset.value, str):
            dataset.typed = True
            return dataset
        return report_issue(self, dataset, config, label="type", received=stringify(dataset.value))


class NumberSchema:
    """Aceita int e float; rejeita bool e NaN."""
    kind = StepKind.SCHEMA
    type = "number"
    expects = "number"

    def __init__(self, message: Optional[Message] = None):
        self.message = message

    def run(self, dataset: Dataset, config: ValidationConfig) -> Dataset:
        if is_number(dataset.value):
            dataset.typed = True
            return dataset
        return report_issue(self, dataset, config, label="type", received=stringify(dataset.value))


def string(message: Optional[Message] = None) -> StringSchema:
    return StringSchema(message)


def number(message: Optional[Message] = None) -> NumberSchema:
    return NumberSchema(message)
