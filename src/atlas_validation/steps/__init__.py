"""
Steps de referência do Atlas Validation.

Biblioteca mínima de schemas, validações e transformações usada para
exercitar o executor de ponta a ponta. Cada Step satisfaz o protocolo
`atlas_validation.core.pipeline.Step` por duck typing.

Organização:
    - schema    → string, number
    - validate  → min_length, max_length, min_value, positive, integer
    - transform → to_upper_case, to_lower_case, trim, transform
"""

from .schema import number, string
from .transform import to_lower_case, to_upper_case, transform, trim
from .validate import integer, max_length, min_length, min_value, positive

__all__ = [
    "string",
    "number",
    "min_length",
    "max_length",
    "min_value",
    "positive",
    "integer",
    "to_upper_case",
    "to_lower_case",
    "trim",
    "transform",
]
