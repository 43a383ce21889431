"""zod-schema-compat - JSON Schema for Zod-style schema trees.

Converts schema trees in either the v3 or the v4 internal representation to
draft-07 JSON Schema suitable for describing tool parameters, or explains
exactly which parts of the schema have to change.
"""

__version__ = "0.1.0"

from .config import Config
from .exceptions import SchemaCompatError, UnrepresentableSchemaError
from .schema_gen import SchemaConverterService, zod_json_schema_compat

__all__ = [
    "Config",
    "SchemaCompatError",
    "SchemaConverterService",
    "UnrepresentableSchemaError",
    "zod_json_schema_compat",
]
