from .custom import Transform, transform
from .text import ToLowerCase, ToUpperCase, Trim, to_lower_case, to_upper_case, trim

__all__ = [
    "Transform",
    "ToUpperCase",
    "ToLowerCase",
    "Trim",
    "transform",
    "to_upper_case",
    "to_lower_case",
    "trim",
]
