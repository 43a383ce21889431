"""
Custom exceptions for zod-schema-compat.
"""
from typing import Iterable, List

from .models.common import Diagnostic


class SchemaCompatError(Exception):
    """Base class for all zod-schema-compat errors."""
    pass

class UnrepresentableSchemaError(SchemaCompatError):
    """Raised when a schema contains kinds that have no JSON Schema equivalent.

    The message is user-facing and already lists one remediation per offending
    path; ``diagnostics`` keeps the raw findings for programmatic callers.
    """
    def __init__(self, message: str, diagnostics: Iterable[Diagnostic]):
        super().__init__(message)
        self.diagnostics: List[Diagnostic] = list(diagnostics)

    @property
    def paths(self) -> List[str]:
        return [diagnostic.path for diagnostic in self.diagnostics]
