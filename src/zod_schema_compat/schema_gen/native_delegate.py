"""
Delegation to the v4 library's own JSON Schema converter.

The native converter is only trusted after the pre-flight scan comes back
clean; unrepresentable kinds raise ``UnrepresentableSchemaError`` instead of
degrading to empty schemas. Every other failure (library missing, converter
crash, unexpected output) returns ``None`` so the manual builder can run.
"""
import functools
import importlib
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Sequence

import structlog
from pydantic import ValidationError

from ..config import ConversionConfig
from ..exceptions import UnrepresentableSchemaError
from ..models.common import NativeObjectSchema
from .introspection import is_native_node
from .remediation import compose_unrepresentable_message
from .scanner import find_unrepresentable_types

logger = structlog.get_logger(__name__)

NativeConverter = Callable[..., Any]


def has_json_schema_object_shape(value: Any) -> bool:
    """True if ``value`` looks like an object schema with explicit extras policy."""
    if not isinstance(value, Mapping):
        return False
    try:
        NativeObjectSchema.model_validate(dict(value))
    except ValidationError:
        return False
    return True


@functools.lru_cache(maxsize=None)
def load_native_converter(
    module_names: Sequence[str], function_names: Sequence[str]
) -> Optional[NativeConverter]:
    """Find the native converter once per (modules, functions) combination.

    Returns the first callable named in ``function_names`` on the first module
    of ``module_names`` that imports, or ``None``.
    """
    for module_name in module_names:
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            continue
        for function_name in function_names:
            converter = getattr(module, function_name, None)
            if callable(converter):
                logger.debug("Native JSON Schema converter found.", module=module_name, function=function_name)
                return converter
        logger.debug("Module imported but exposes no converter.", module=module_name)
        return None
    return None


class NativeSchemaDelegate:
    """Runs the scan-then-delegate path for v4 schema nodes."""

    def __init__(self, conversion_config: ConversionConfig, parent_logger: Optional[structlog.BoundLogger] = None):
        self.config = conversion_config
        self.logger = (parent_logger or logger).bind(component="NativeSchemaDelegate")

    def _load_converter(self) -> Optional[NativeConverter]:
        return load_native_converter(
            tuple(self.config.native_modules), tuple(self.config.native_function_names)
        )

    def try_convert(self, node: Any) -> Optional[Dict[str, Any]]:
        """Convert a v4 node natively.

        Returns:
            The native JSON Schema document, or ``None`` when the node is not a
            v4 node or the native path cannot produce a trusted result.

        Raises:
            UnrepresentableSchemaError: the schema contains kinds that have no
                JSON Schema equivalent.
        """
        if not is_native_node(node):
            return None

        try:
            diagnostics = find_unrepresentable_types(node)
            if diagnostics:
                message = compose_unrepresentable_message(
                    diagnostics, self.config.error_namespace, self.config.docs_url
                )
                raise UnrepresentableSchemaError(message, diagnostics)

            converter = self._load_converter()
            if converter is None:
                self.logger.debug("Native converter unavailable; deferring to manual builder.")
                return None

            json_schema = converter(
                node,
                target=self.config.native_target,
                unrepresentable="any",
                cycles="ref",
                reused="inline",
            )

            if not has_json_schema_object_shape(json_schema):
                self.logger.info("Native converter output is not an object schema; deferring to manual builder.")
                return None

            return dict(json_schema)
        except UnrepresentableSchemaError:
            raise
        except Exception as e:
            self.logger.warning("Native conversion failed; deferring to manual builder.", error=str(e), exc_info=True)
            return None
