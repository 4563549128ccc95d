from .length import MaxLength, MinLength, max_length, min_length
from .numeric import Integer, MinValue, Positive, integer, min_value, positive

__all__ = [
    "MinLength",
    "MaxLength",
    "MinValue",
    "Positive",
    "Integer",
    "min_length",
    "max_length",
    "min_value",
    "positive",
    "integer",
]
