"""
User-facing remediation messages for unrepresentable schema kinds.

Each entry names the fix and shows a concrete before/after rewrite so the
schema author can apply it without knowing JSON Schema internals.
"""
from typing import Iterable, List, Optional

from ..models.common import Diagnostic

REMEDIATIONS = {
    "set": (
        "Replace z.set(T) with z.array(T)\n"
        "     Example: z.set(z.string()) → z.array(z.string())\n"
        "     If uniqueness matters, add validation: .refine(arr => new Set(arr).size === arr.length, 'Must be unique')"
    ),
    "map": (
        "Replace z.map() with z.record()\n"
        "     Example: z.map(z.string(), z.number()) → z.record(z.string(), z.number())"
    ),
    "date": (
        "Replace z.date() with z.string().datetime()\n"
        "     Example: z.date() → z.string().datetime()\n"
        "     Or use z.coerce.date() if you need automatic date parsing from strings"
    ),
    "promise": (
        "Remove z.promise() - promises cannot be serialized to JSON\n"
        "     Example: z.promise(z.string()) → z.string() (resolve the value before the tool is called)"
    ),
    "function": (
        "Remove z.function() - functions cannot be serialized to JSON\n"
        "     Example: callback: z.function() → callbackName: z.enum(['notify', 'archive'])"
    ),
    "symbol": (
        "Replace z.symbol() with z.string() or z.enum(['symbol1', 'symbol2'])\n"
        "     Example: z.symbol() → z.enum(['symbol1', 'symbol2'])"
    ),
    "undefined": (
        "Replace z.undefined() with .optional()\n"
        "     Example: field: z.undefined() → field: z.string().optional()"
    ),
    "void": (
        "Replace z.void() with z.null() or remove the field\n"
        "     Example: result: z.void() → result: z.null()"
    ),
    "nan": (
        "Replace z.nan() with z.number()\n"
        "     Example: z.nan() → z.number()"
    ),
    "custom": (
        "Replace z.custom() with a concrete type like z.string(), z.number(), or z.object({...})\n"
        "     Example: z.custom<Email>() → z.string().email()"
    ),
    "lazy": (
        "Lazy/recursive types may not be fully representable - consider flattening the structure\n"
        "     Example: children: z.lazy(() => node.array()) → childIds: z.array(z.string())"
    ),
}


def format_remediation(diagnostic: Diagnostic, index: int) -> str:
    """One numbered bullet: ``"  1. $.path: fix..."``."""
    fix = REMEDIATIONS.get(
        diagnostic.kind,
        f"{diagnostic.kind} is not representable in JSON Schema\n"
        "     Example: replace it with z.string(), z.number(), z.array(T) or z.object({...})",
    )
    return f"  {index}. {diagnostic.path}: {fix}"


def compose_unrepresentable_message(
    diagnostics: Iterable[Diagnostic],
    namespace: str,
    docs_url: Optional[str] = None,
) -> str:
    """Build the full error text for a failed pre-flight scan."""
    diagnostics = list(diagnostics)
    fixes = "\n\n".join(
        format_remediation(diagnostic, i) for i, diagnostic in enumerate(diagnostics, 1)
    )
    lines: List[str] = [
        f"{namespace} Cannot convert Zod 4 schema to JSON Schema.",
        "",
        f"Found {len(diagnostics)} unrepresentable type(s):",
        "",
        fixes,
        "",
        "All of these types have JSON-compatible alternatives. Please update your schema.",
    ]
    if docs_url:
        lines.append(f"See: {docs_url}")
    return "\n".join(lines)
