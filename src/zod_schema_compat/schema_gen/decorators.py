"""Stripping of semantically transparent wrapper nodes."""
from typing import Any

from .introspection import first_node, inspect_node

# Wrappers that change runtime behaviour (branding, defaults, transforms, ...)
# without changing the JSON-representable shape.
DECORATOR_KINDS = frozenset({
    "brand",
    "branded",
    "catch",
    "default",
    "effects",
    "pipeline",
    "pipe",
    "prefault",
    "readonly",
    "refinement",
    "transform",
})

# Checked in order; v4 pipes keep their input schema under "in".
INNER_FIELDS = ("innerType", "schema", "base", "type", "wrapped", "underlying", "in")

OPTIONAL_KINDS = frozenset({"optional"})


def unwrap_decorators(node: Any) -> Any:
    """Return the innermost non-decorator node of a decorator chain.

    Stops early when a decorator has no inner node, or when the chain loops
    back to a node already visited during this call.
    """
    current = node
    visited = {id(current)}
    while True:
        info = inspect_node(current)
        if info is None or info.kind not in DECORATOR_KINDS:
            return current
        inner = first_node(info.definition, INNER_FIELDS)
        if inner is None or id(inner) in visited:
            return current
        visited.add(id(inner))
        current = inner
