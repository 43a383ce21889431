"""
Duck-typed introspection of Zod-style schema nodes.

Two internal representations are supported without knowing up front which
one is present:

- v3 nodes carry ``_def`` with a ``typeName`` such as ``"ZodString"``.
- v4 nodes carry ``_zod.def`` with a ``type`` such as ``"string"``.

Nodes and definitions may be plain objects (read by attribute) or mappings
(read by key), so trees deserialised from JSON work the same as live objects.
"""
from collections.abc import Mapping
from typing import Any, Iterable, NamedTuple, Optional

import structlog

logger = structlog.get_logger(__name__)

# Ordered probe paths for the definition bag; the first hit wins.
DEFINITION_PATHS = (("_zod", "def"), ("_def",), ("def",))
# Ordered probe fields for the kind tag inside a definition.
KIND_FIELDS = ("typeName", "type")
# Only v4 nodes expose this field.
NATIVE_MARKER_FIELD = "_zod"

_SCALARS = (str, bytes, int, float, bool)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

MISSING: Any = _Missing()


class SchemaNodeInfo(NamedTuple):
    kind: str
    definition: Any


def read_field(source: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an object; ``MISSING`` when absent."""
    if source is None or source is MISSING or isinstance(source, _SCALARS):
        return MISSING
    if isinstance(source, Mapping):
        return source.get(name, MISSING)
    return getattr(source, name, MISSING)


def is_populated(value: Any) -> bool:
    return value is not MISSING and value is not None


def read_definition(node: Any) -> Optional[Any]:
    for path in DEFINITION_PATHS:
        current = node
        for name in path:
            current = read_field(current, name)
            if not is_populated(current):
                break
        if is_populated(current) and not isinstance(current, _SCALARS):
            return current
    return None


def normalize_kind(raw: str) -> str:
    kind = raw.lower()
    return kind[3:] if kind.startswith("zod") else kind


def read_kind(node: Any) -> Optional[str]:
    definition = read_definition(node)
    if definition is None:
        return None
    for name in KIND_FIELDS:
        raw = read_field(definition, name)
        if isinstance(raw, str) and raw:
            return normalize_kind(raw)
    return None


def inspect_node(node: Any) -> Optional[SchemaNodeInfo]:
    """Return ``(kind, definition)`` for a schema node, or ``None``."""
    definition = read_definition(node)
    if definition is None:
        return None
    kind = read_kind(node)
    if kind is None:
        return None
    return SchemaNodeInfo(kind, definition)


def first_populated(definition: Any, fields: Iterable[str]) -> Any:
    """First field of ``definition`` that is present and not ``None``."""
    for name in fields:
        value = read_field(definition, name)
        if is_populated(value):
            return value
    return MISSING


def first_node(definition: Any, fields: Iterable[str]) -> Optional[Any]:
    """First field of ``definition`` whose value is itself a schema node.

    v4 definitions reuse ``type`` for the kind string, so a populated field is
    not enough; the value must introspect as a node.
    """
    for name in fields:
        value = read_field(definition, name)
        if is_populated(value) and inspect_node(value) is not None:
            return value
    return None


def coerce_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    if not is_populated(value):
        return []
    return [value]


def _resolve_shape(candidate: Any) -> Optional[Mapping]:
    if isinstance(candidate, Mapping):
        return candidate
    if callable(candidate):
        try:
            resolved = candidate()
        except Exception as e:
            logger.debug("Shape accessor raised; treating node as shapeless.", error=str(e))
            return None
        return resolved if isinstance(resolved, Mapping) else None
    return None


def read_shape(node: Any) -> Optional[Mapping]:
    """Field-name -> node mapping of an object node.

    Looks at the node's own ``shape`` first, then the definition's. Either may
    be a mapping or a zero-argument callable returning one.
    """
    shape = _resolve_shape(read_field(node, "shape"))
    if shape is not None:
        return shape
    return _resolve_shape(read_field(read_definition(node), "shape"))


def is_native_node(node: Any) -> bool:
    """True when ``node`` uses the v4 internal representation."""
    return read_field(node, NATIVE_MARKER_FIELD) is not MISSING
