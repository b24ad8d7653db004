"""Compiler phase value type and the canonical phase catalog.

A :class:`Phase` names one stage of the multi-pass compilation pipeline and
optionally carries a symbolic tag that drivers use as a category key when
selecting phase options or routing diagnostics. Several phases may share a
tag: ``DESUGARIZER`` and ``ANALYZER`` are both reported under ``"ANALYZER"``.

Phases compare by identity. Code asking "is this the analyzer phase" should
test ``phase is ANALYZER`` rather than rebuilding a phase from its fields.

Keep this module import-light: it is imported by drivers that do not want the
logging or pydantic layers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Phase:
    """A named compiler stage with an optional category tag."""

    name: str
    tag: str | None = None


START = Phase("start")
PARSER = Phase("parser", "PARSER")
DESUGARIZER = Phase("desugarizer", "ANALYZER")
ANALYZER = Phase("analyzer", "ANALYZER")
REFCHECK = Phase("refcheck", "REFCHECK")
UNCURRY = Phase("uncurry", "UNCURRY")
TRANSMATCH = Phase("transmatch", "TRANSMATCH")
LAMBDALIFT = Phase("lambdalift", "LAMBDALIFT")
EXPLICITOUTER = Phase("explicitouter", "EXPLICITOUTER")
ERASURE = Phase("erasure", "ERASURE")
UNKNOWN = Phase("? !!!")
END = Phase("-")

CATALOG: tuple[Phase, ...] = (
    START,
    PARSER,
    DESUGARIZER,
    ANALYZER,
    REFCHECK,
    UNCURRY,
    TRANSMATCH,
    LAMBDALIFT,
    EXPLICITOUTER,
    ERASURE,
    UNKNOWN,
    END,
)
"""Canonical phases in declaration order. Not an execution order."""

__all__ = [
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
