"""
Pydantic models for zod-schema-compat.
"""
from .common import BasePydanticModel, Diagnostic, NativeObjectSchema

__all__ = [
    "BasePydanticModel",
    "Diagnostic",
    "NativeObjectSchema",
]
