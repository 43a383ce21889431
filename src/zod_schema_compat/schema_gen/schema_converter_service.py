"""
Service responsible for converting Zod-style schema trees to JSON Schema
documents usable as tool parameter schemas.
"""
import functools
from typing import Any, Dict, List, Optional

import structlog

from ..config import Config
from ..models.common import Diagnostic
from .introspection import is_native_node
from .manual_converter import build_json_schema_document
from .native_delegate import NativeSchemaDelegate
from .scanner import find_unrepresentable_types

logger = structlog.get_logger(__name__)


class SchemaConverterService:
    """
    Picks between the native v4 converter and the manual builder.

    Two outcomes are deliberately kept apart:

    - ``None`` from ``to_json_schema``: no representable schema could be
      built. The caller decides what to tell the user.
    - ``UnrepresentableSchemaError``: a v4 schema uses kinds JSON Schema
      cannot express. The message lists one fix per offending path.
    """

    def __init__(self, app_config: Config):
        self.app_config = app_config
        self.logger = logger.bind(service="SchemaConverterService")
        self.native_delegate = NativeSchemaDelegate(app_config.conversion, self.logger)

    def to_json_schema(self, node: Any) -> Optional[Dict[str, Any]]:
        log = self.logger.bind(native_node=is_native_node(node))

        if self.app_config.conversion.enable_native_delegate:
            native_result = self.native_delegate.try_convert(node)
            if native_result is not None:
                log.debug("Schema converted by native converter.")
                return native_result

        document = build_json_schema_document(node)
        if document is None:
            log.info("Manual builder could not produce a JSON Schema for this node.")
            return None

        log.debug("Schema converted by manual builder.", property_count=len(document["properties"]))
        return document

    def find_unrepresentable_types(self, node: Any) -> List[Diagnostic]:
        return find_unrepresentable_types(node)


@functools.lru_cache(maxsize=1)
def _default_service() -> SchemaConverterService:
    return SchemaConverterService(app_config=Config())


def zod_json_schema_compat(node: Any, app_config: Optional[Config] = None) -> Optional[Dict[str, Any]]:
    """Convert ``node`` to a draft-07 object schema.

    Uses a service built from environment configuration unless ``app_config``
    is given.
    """
    service = SchemaConverterService(app_config) if app_config is not None else _default_service()
    return service.to_json_schema(node)
