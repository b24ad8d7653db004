"""Compiler phase catalog.

IMPORTANT: keep this module import-light. Only the phase value type and its
catalog are exported here; diagnostics, options and logging live in their
own modules.
"""

from __future__ import annotations

from scalac_meta.phase import (
    ANALYZER,
    CATALOG,
    DESUGARIZER,
    END,
    ERASURE,
    EXPLICITOUTER,
    LAMBDALIFT,
    PARSER,
    REFCHECK,
    START,
    TRANSMATCH,
    UNCURRY,
    UNKNOWN,
    Phase,
)

API_VERSION = "1.0"

__all__ = [
    "API_VERSION",
    "Phase",
    "CATALOG",
    "START",
    "PARSER",
    "DESUGARIZER",
    "ANALYZER",
    "REFCHECK",
    "UNCURRY",
    "TRANSMATCH",
    "LAMBDALIFT",
    "EXPLICITOUTER",
    "ERASURE",
    "UNKNOWN",
    "END",
]
