"""
Unit tests for SchemaConverterService.
"""
from typing import Any, Dict

import pytest  # type: ignore[import-not-found]

from zod_schema_compat import zod_json_schema_compat
from zod_schema_compat.config import Config, ConversionConfig
from zod_schema_compat.exceptions import UnrepresentableSchemaError
from zod_schema_compat.schema_gen.manual_converter import JSON_SCHEMA_DRAFT_07
from zod_schema_compat.schema_gen.schema_converter_service import SchemaConverterService
from zod_fakes import v3, v4

MISSING_MODULE = "zod_schema_compat_tests_missing_module"


@pytest.fixture
def app_config() -> Config:
    # Point the native probe at a module that never exists
    return Config(conversion=ConversionConfig(native_modules=[MISSING_MODULE]))

@pytest.fixture
def converter_service(app_config: Config) -> SchemaConverterService:
    return SchemaConverterService(app_config=app_config)

@pytest.fixture
def native_result() -> Dict[str, Any]:
    return {
        "$schema": JSON_SCHEMA_DRAFT_07,
        "type": "object",
        "properties": {"id": {"type": "string", "format": "uuid"}},
        "required": ["id"],
        "additionalProperties": False,
    }


def test_v3_schema_uses_manual_builder(converter_service: SchemaConverterService):
    schema = v3.object({
        "name": v3.string(),
        "age": v3.optional(v3.number()),
        "createdAt": v3.date(),
    })
    assert converter_service.to_json_schema(schema) == {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "number"},
            "createdAt": {"type": "string", "format": "date-time"},
        },
        "required": ["name", "createdAt"],
        "additionalProperties": False,
        "$schema": JSON_SCHEMA_DRAFT_07,
    }


def test_v4_schema_without_native_library_uses_manual_builder(converter_service: SchemaConverterService):
    result = converter_service.to_json_schema(v4.object({"tags": v4.array(v4.string())}))
    assert result["properties"] == {"tags": {"type": "array", "items": {"type": "string"}}}
    assert result["$schema"] == JSON_SCHEMA_DRAFT_07


def test_native_result_is_preferred(converter_service: SchemaConverterService, native_result, monkeypatch):
    monkeypatch.setattr(converter_service.native_delegate, "_load_converter", lambda: lambda node, **options: native_result)
    assert converter_service.to_json_schema(v4.object({"id": v4.string()})) == native_result


def test_native_failure_falls_back_to_manual_builder(converter_service: SchemaConverterService, monkeypatch):
    def broken(node, **options):
        raise TypeError("unexpected node")

    monkeypatch.setattr(converter_service.native_delegate, "_load_converter", lambda: broken)
    result = converter_service.to_json_schema(v4.object({"id": v4.string()}))
    assert result["properties"] == {"id": {"type": "string"}}


def test_v4_unrepresentable_schema_raises(converter_service: SchemaConverterService):
    schema = v4.object({
        "tags": v4.set(v4.string()),
        "user": v4.object({"createdAt": v4.date()}),
    })
    with pytest.raises(UnrepresentableSchemaError) as exc_info:
        converter_service.to_json_schema(schema)
    assert exc_info.value.paths == ["$.tags", "$.user.createdAt"]
    assert "Found 2 unrepresentable type(s):" in str(exc_info.value)


def test_disabled_delegate_skips_scan_and_native_converter(monkeypatch):
    config = Config(conversion=ConversionConfig(enable_native_delegate=False))
    service = SchemaConverterService(app_config=config)
    monkeypatch.setattr(service.native_delegate, "try_convert", lambda node: pytest.fail("delegate used"))

    result = service.to_json_schema(v4.object({"tags": v4.set(v4.string())}))
    assert result["properties"]["tags"] == {"type": "array", "items": {"type": "string"}, "uniqueItems": True}


@pytest.mark.parametrize("node", [
    v3.string(),
    v3.object({"fn": v3.function()}),
    None,
])
def test_unconvertible_nodes_return_none(converter_service: SchemaConverterService, node):
    assert converter_service.to_json_schema(node) is None


def test_find_unrepresentable_types(converter_service: SchemaConverterService):
    diagnostics = converter_service.find_unrepresentable_types(v3.object({"when": v3.date()}))
    assert [(d.kind, d.path) for d in diagnostics] == [("date", "$.when")]


def test_zod_json_schema_compat_entry_point(app_config: Config):
    schema = v3.object({"name": v3.string()})
    assert zod_json_schema_compat(schema, app_config)["required"] == ["name"]
    # v3 nodes never reach the native probe, so the environment-built service is safe here
    assert zod_json_schema_compat(schema)["required"] == ["name"]
