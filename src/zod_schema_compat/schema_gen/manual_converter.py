"""
Manual JSON Schema builder for Zod-style schema trees.

Only the structural kinds tools actually depend on are covered (objects,
optionals, unions, tuples, records, sets, ...). Anything else makes the
enclosing build return ``None`` so the caller can surface a user error
instead of emitting an invalid schema. There is no partial output: one
unsupported node anywhere aborts the whole tree.
"""
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple

import structlog

from .decorators import OPTIONAL_KINDS, unwrap_decorators
from .introspection import (
    MISSING,
    coerce_list,
    first_node,
    first_populated,
    inspect_node,
    is_populated,
    read_field,
    read_shape,
)

logger = structlog.get_logger(__name__)

JSON_SCHEMA_DRAFT_07 = "http://json-schema.org/draft-07/schema#"

JsonSchemaEntry = Dict[str, Any]

# Primitive leaf kinds map 1:1 to JSON Schema types.
SIMPLE_TYPE_MAPPING: Dict[str, JsonSchemaEntry] = {
    "string": {"type": "string"},
    "number": {"type": "number"},
    "bigint": {"type": "integer"},
    "boolean": {"type": "boolean"},
    "date": {"type": "string", "format": "date-time"},
}


def convert_schema(node: Any) -> Optional[JsonSchemaEntry]:
    """Convert a single node to a JSON Schema entry, or ``None``."""
    if node is None or node is MISSING:
        return None

    unwrapped = unwrap_decorators(node)
    info = inspect_node(unwrapped)
    if info is None:
        return None

    if info.kind in SIMPLE_TYPE_MAPPING:
        return dict(SIMPLE_TYPE_MAPPING[info.kind])

    builder = _BUILDERS.get(info.kind)
    if builder is None:
        logger.debug("Unsupported schema kind.", kind=info.kind)
        return None
    return builder(unwrapped, info.definition)


def convert_property(node: Any) -> Tuple[Optional[JsonSchemaEntry], bool]:
    """Convert an object field, reporting whether it is optional.

    Decorators are removed before classifying the node; every ``optional``
    layer crossed on the way down marks the field optional.
    """
    current = unwrap_decorators(node)
    optional = False

    while True:
        info = inspect_node(current)
        if info is None or info.kind not in OPTIONAL_KINDS:
            break
        optional = True
        inner = first_node(info.definition, ("innerType",))
        following = unwrap_decorators(inner) if inner is not None else None
        if following is None or following is current:
            break
        current = following

    return convert_schema(current), optional


def build_object_schema(node: Any, definition: Any = None) -> Optional[JsonSchemaEntry]:
    shape = read_shape(node)
    if shape is None:
        return None

    properties: Dict[str, JsonSchemaEntry] = {}
    required: List[str] = []

    for key, field in shape.items():
        schema, optional = convert_property(field)
        if schema is None:
            logger.debug("Object field could not be converted.", field=key)
            return None
        properties[key] = schema
        if not optional:
            required.append(key)

    return {
        "type": "object",
        "properties": properties,
        "required": required,
        "additionalProperties": False,
    }


def _build_array_schema(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    items = convert_schema(first_node(definition, ("element", "items", "type")))
    return {"type": "array", "items": items} if items is not None else None


def _convert_all(nodes: List[Any]) -> Optional[List[JsonSchemaEntry]]:
    """Convert every node; ``None`` if the list is empty or any node fails."""
    entries = []
    for item in nodes:
        entry = convert_schema(item)
        if entry is None:
            return None
        entries.append(entry)
    return entries or None


def _build_tuple_schema(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    items = _convert_all(coerce_list(read_field(definition, "items")))
    if items is None:
        return None
    schema: JsonSchemaEntry = {
        "type": "array",
        "items": items,
        "minItems": len(items),
    }
    if not is_populated(read_field(definition, "rest")):
        schema["maxItems"] = len(items)
    return schema


def _build_union_schema(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    options = _convert_all(coerce_list(first_populated(definition, ("options", "schemas"))))
    return {"anyOf": options} if options is not None else None


def _build_intersection_schema(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    left = convert_schema(read_field(definition, "left"))
    right = convert_schema(read_field(definition, "right"))
    return {"allOf": [left, right]} if left is not None and right is not None else None


def _value_type(definition: Any) -> Any:
    return first_node(definition, ("valueType", "values"))


def _build_record_schema(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    # JSON Schema has no way to constrain object keys here; the key type is dropped.
    value_schema = convert_schema(_value_type(definition))
    return {"type": "object", "additionalProperties": value_schema} if value_schema is not None else None


def _build_map_schema(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    # Lossy: a map becomes an array of its values and the keys are dropped.
    value_schema = convert_schema(_value_type(definition))
    return {"type": "array", "items": value_schema} if value_schema is not None else None


def _build_set_schema(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    value_schema = convert_schema(first_node(definition, ("valueType",)))
    return {"type": "array", "items": value_schema, "uniqueItems": True} if value_schema is not None else None


def _build_nullable_schema(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    inner = convert_schema(first_node(definition, ("innerType", "type")))
    return {"anyOf": [inner, {"type": "null"}]} if inner is not None else None


def json_type_of(value: Any) -> Optional[str]:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def _read_literal(definition: Any) -> Any:
    for name in ("value", "literal"):
        value = read_field(definition, name)
        if value is not MISSING:
            return value
    values = read_field(definition, "values")
    if isinstance(values, (list, tuple)) and len(values) == 1:
        return values[0]
    return MISSING


def _build_literal(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    literal = _read_literal(definition)
    if literal is MISSING:
        return None
    literal_type = json_type_of(literal)
    if literal_type is None:
        return None
    return {"const": literal, "type": literal_type}


def _read_enum_members(definition: Any) -> Optional[List[Any]]:
    values = read_field(definition, "values")
    if isinstance(values, (list, tuple)):
        return list(values)
    options = read_field(definition, "options")
    if isinstance(options, (list, tuple)):
        return list(options)
    if isinstance(values, Mapping):
        return list(values.values())
    for name in ("enum", "entries"):
        members = read_field(definition, name)
        if isinstance(members, Mapping):
            return list(members.values())
    return None


def _build_enum(node: Any, definition: Any) -> Optional[JsonSchemaEntry]:
    members = _read_enum_members(definition)
    return {"enum": members} if members else None


_BUILDERS: Dict[str, Callable[[Any, Any], Optional[JsonSchemaEntry]]] = {
    "object": build_object_schema,
    "array": _build_array_schema,
    "tuple": _build_tuple_schema,
    "union": _build_union_schema,
    "discriminatedunion": _build_union_schema,
    "intersection": _build_intersection_schema,
    "literal": _build_literal,
    "enum": _build_enum,
    "nativeenum": _build_enum,
    "record": _build_record_schema,
    "map": _build_map_schema,
    "set": _build_set_schema,
    "nullable": _build_nullable_schema,
}


def build_json_schema_document(node: Any) -> Optional[JsonSchemaEntry]:
    """Build a complete draft-07 object schema for a root node, or ``None``."""
    schema = build_object_schema(unwrap_decorators(node))
    if schema is None:
        return None
    schema["$schema"] = JSON_SCHEMA_DRAFT_07
    return schema
