"""
Pre-flight scan for schema kinds with no JSON Schema equivalent.

The v4 native converter silently turns these into empty ``{}`` schemas, so
they are found up front and reported with their exact location instead.
Every kind listed here has a JSON-compatible alternative the schema author
can switch to.
"""
from typing import Any, List, Set

from ..models.common import Diagnostic
from .decorators import DECORATOR_KINDS, INNER_FIELDS
from .introspection import coerce_list, first_node, first_populated, inspect_node, read_shape

UNREPRESENTABLE_KINDS = frozenset({
    "set",       # use z.array()
    "map",       # use z.record()
    "date",      # use z.string().datetime()
    "promise",
    "function",
    "custom",
    "nan",       # use z.number()
    "undefined", # use .optional()
    "void",
    "symbol",    # use z.string() or z.enum()
})

# Recursive schemas cannot be walked to completion; always reported.
LAZY_KIND = "lazy"


def find_unrepresentable_types(node: Any, path: str = "$") -> List[Diagnostic]:
    """Collect every unrepresentable node in the tree rooted at ``node``.

    Args:
        node: A schema node at any nesting level.
        path: Address of ``node``; children extend it with ``.field``, ``[]``,
            ``[i]``, ``[...]``, ``<union[i]>``, ``<left>``/``<right>`` and
            ``<values>``/``<keys>``.

    Returns:
        Diagnostics in depth-first, declaration order.

    Example:
        >>> [d.path for d in find_unrepresentable_types(obj_with_set_field)]
        ['$.tags']
    """
    found: List[Diagnostic] = []
    _check(node, path, found, set())
    return found


def _check(value: Any, path: str, found: List[Diagnostic], ancestors: Set[int]) -> None:
    info = inspect_node(value)
    if info is None:
        return

    kind, definition = info

    if kind in UNREPRESENTABLE_KINDS:
        found.append(Diagnostic(kind=kind, path=path))
        return

    if kind == LAZY_KIND or id(value) in ancestors:
        found.append(Diagnostic(kind=LAZY_KIND, path=path))
        return

    ancestors = ancestors | {id(value)}

    def check(child: Any, child_path: str) -> None:
        _check(child, child_path, found, ancestors)

    if kind == "object":
        shape = read_shape(value)
        if shape:
            for key, field in shape.items():
                check(field, f"{path}.{key}")

    elif kind == "array":
        items = first_node(definition, ("element", "items", "type"))
        if items is not None:
            check(items, f"{path}[]")

    elif kind == "tuple":
        items = coerce_list(first_populated(definition, ("items",)))
        for i, item in enumerate(items):
            check(item, f"{path}[{i}]")
        rest = first_node(definition, ("rest",))
        if rest is not None:
            check(rest, f"{path}[...]")

    elif kind in ("union", "discriminatedunion"):
        options = coerce_list(first_populated(definition, ("options", "schemas")))
        for i, option in enumerate(options):
            check(option, f"{path}<union[{i}]>")

    elif kind == "intersection":
        for side in ("left", "right"):
            branch = first_node(definition, (side,))
            if branch is not None:
                check(branch, f"{path}<{side}>")

    elif kind == "record":
        values = first_node(definition, ("valueType", "values"))
        if values is not None:
            check(values, f"{path}<values>")
        keys = first_node(definition, ("keyType", "keys"))
        if keys is not None:
            check(keys, f"{path}<keys>")

    elif kind in ("nullable", "optional"):
        inner = first_node(definition, ("innerType", "type"))
        if inner is not None:
            check(inner, path)

    elif kind in DECORATOR_KINDS:
        underlying = first_node(definition, INNER_FIELDS)
        if underlying is not None:
            check(underlying, path)
