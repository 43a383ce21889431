"""
Unit tests for decorator unwrapping.
"""
import itertools

import pytest

from zod_schema_compat.schema_gen.decorators import DECORATOR_KINDS, unwrap_decorators
from zod_schema_compat.schema_gen.introspection import inspect_node
from zod_fakes import ZodV3Type, ZodV4Type, v3, v4

V3_WRAPPERS = {
    "brand": v3.brand,
    "effects": v3.effects,
    "default": v3.default,
    "catch": v3.catch,
    "readonly": v3.readonly,
}


def test_non_decorator_is_returned_unchanged() -> None:
    node = v3.string()
    assert unwrap_decorators(node) is node
    optional = v3.optional(node)
    assert unwrap_decorators(optional) is optional


def test_non_node_is_returned_unchanged() -> None:
    assert unwrap_decorators(None) is None
    assert unwrap_decorators("text") == "text"


@pytest.mark.parametrize("order", list(itertools.permutations(V3_WRAPPERS, 3)))
def test_chains_reach_the_same_innermost_node(order) -> None:
    innermost = v3.number()
    node = innermost
    for name in order:
        node = V3_WRAPPERS[name](node)
    assert unwrap_decorators(node) is innermost


def test_v4_pipe_unwraps_to_its_input() -> None:
    inner = v4.string()
    piped = v4.pipe(inner, v4.transform())
    assert unwrap_decorators(v4.default(v4.readonly(piped))) is inner


def test_v3_pipeline_unwraps_to_its_input() -> None:
    inner = v3.string()
    assert unwrap_decorators(v3.pipeline(inner, v3.number())) is inner


def test_decorator_without_inner_node_stops() -> None:
    bare = v4.transform()
    assert unwrap_decorators(bare) is bare
    empty_default = ZodV3Type("ZodDefault", innerType=None)
    assert unwrap_decorators(empty_default) is empty_default


def test_self_referencing_decorator_terminates() -> None:
    node = ZodV3Type("ZodReadonly")
    node._def["innerType"] = node
    assert unwrap_decorators(node) is node


def test_decorator_cycle_terminates() -> None:
    first = ZodV4Type("readonly")
    second = ZodV4Type("catch", innerType=first)
    getattr(first._zod, "def")["innerType"] = second
    result = unwrap_decorators(first)
    assert result is first or result is second
    assert inspect_node(result).kind in DECORATOR_KINDS


def test_unwrapping_stops_at_optional() -> None:
    optional = v3.optional(v3.brand(v3.string()))
    assert unwrap_decorators(v3.readonly(optional)) is optional
