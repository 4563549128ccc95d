"""Helpers compartilhados pelos Steps de referência."""

from __future__ import annotations

import math
from typing import Any

from atlas_validation.core.config.settings import ValidationConfig
from atlas_validation.core.dataset import Dataset
from atlas_validation.core.issues import create_issue


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def report_issue(step: Any, dataset: Dataset, config: ValidationConfig, *, label: str, received: str) -> Dataset:
    """Acrescenta a issue do Step e rebaixa o dataset para não tipado."""
    dataset.add_issue(
        create_issue(
            step,
            dataset,
            label=label,
            expected=getattr(step, "expects", None),
            received=received,
            config=config,
            message=getattr(step, "message", None),
        )
    )
    dataset.typed = False
    return dataset
