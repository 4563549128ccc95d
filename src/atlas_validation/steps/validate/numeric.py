"""Validações numéricas. Valores não numéricos são ignorados."""

from __future__ import annotations

from typing import Optional, Union

from atlas_validation.core.config.settings import ValidationConfig
from atlas_validation.core.dataset import Dataset
from atlas_validation.core.issues import Message, stringify
from atlas_validation.core.pipeline.types import StepKind

from ..base import is_number, report_issue

Number = Union[int, float]


class MinValue:
    kind = StepKind.VALIDATION
    type = "min_value"

    def __init__(self, requirement: Number, message: Optional[Message] = None):
        self.requirement = requirement
        self.expects = f">={requirement}"
        self.message = message

    def run(self, dataset: Dataset, config: ValidationConfig) -> Dataset:
        value = dataset.value
        if is_number(value) and value < self.requirement:
            return report_issue(self, dataset, config, label="value", received=stringify(value))
        return dataset


class Positive:
    kind = StepKind.VALIDATION
    type = "positive"
    expects = ">0"

    def __init__(self, message: Optional[Message] = None):
        self.message = message

    def run(self, dataset: Dataset, config: ValidationConfig) -> Dataset:
        value = dataset.value
        if is_number(value) and not value > 0:
            return report_issue(self, dataset, config, label="value", received=stringify(value))
        return dataset


class Integer:
    kind = StepKind.VALIDATION
    type = "integer"
    expects = None

    def __init__(self, message: Optional[Message] = None):
        self.message = message

    def run(self, dataset: Dataset, config: ValidationConfig) -> Dataset:
        value = dataset.value
        if isinstance(value, float) and is_number(value) and not value.is_integer():
            return report_issue(self, dataset, config, label="integer", received=stringify(value))
        return dataset


def min_value(requirement: Number, message: Optional[Message] = None) -> MinValue:
    return MinValue(requirement, message)


def positive(message: Optional[Message] = None) -> Positive:
    return Positive(message)


def integer(message: Optional[Message] = None) -> Integer:
    return Integer(message)
