"""
Validações de comprimento (strings, listas e demais `Sized`).

Valores sem comprimento são ignorados: a issue de forma já foi
registrada pelo schema anterior.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Optional

from atlas_validation.core.config.settings import ValidationConfig
from atlas_validation.core.dataset import Dataset
from atlas_validation.core.issues import Message
from atlas_validation.core.pipeline.types import StepKind

from ..base import report_issue


class MinLength:
    kind = StepKind.VALIDATION
    type = "min_length"

    def __init__(self, requirement: int, message: Optional[Message] = None):
        self.requirement = requirement
        self.expects = f">={requirement}"
        self.message = message

    def run(self, dataset: Dataset, config: ValidationConfig) -> Dataset:
        value = dataset.value
        if isinstance(value, Sized) and len(value) < self.requirement:
            return report_issue(self, dataset, config, label="length", received=str(len(value)))
        return dataset


class MaxLength:
    kind = StepKind.VALIDATION
    type = "max_length"

    def __init__(self, requirement: int, message: Optional[Message] = None):
        self.requirement = requirement
        self.expects = f"<={requirement}"
        self.message = message

    def run(self, dataset: Dataset, config: ValidationConfig) -> Dataset:
        value = dataset.value
        if isinstance(value, Sized) and len(value) > self.requirement:
            return report_issue(self, dataset, config, label="length", received=str(len(value)))
        return dataset


def min_length(requirement: int, message: Optional[Message] = None) -> MinLength:
    return MinLength(requirement, message)


def max_length(requirement: int, message: Optional[Message] = None) -> MaxLength:
    return MaxLength(requirement, message)
