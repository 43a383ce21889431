"""
Schema generation module for zod-schema-compat.

This module handles the conversion of Zod-style schema trees (v3 and v4
internal representations) to draft-07 JSON Schema, including the pre-flight
scan for unrepresentable kinds and the remediation messages built from it.
"""

from .manual_converter import build_json_schema_document, convert_schema
from .native_delegate import NativeSchemaDelegate, has_json_schema_object_shape
from .scanner import find_unrepresentable_types
from .schema_converter_service import SchemaConverterService, zod_json_schema_compat

__all__ = [
    "NativeSchemaDelegate",
    "SchemaConverterService",
    "build_json_schema_document",
    "convert_schema",
    "find_unrepresentable_types",
    "has_json_schema_object_shape",
    "zod_json_schema_compat",
]
