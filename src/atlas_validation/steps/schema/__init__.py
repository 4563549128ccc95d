from .primitives import NumberSchema, StringSchema, number, string

__all__ = ["StringSchema", "NumberSchema", "string", "number"]
