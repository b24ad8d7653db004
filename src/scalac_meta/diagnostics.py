"""Routes diagnostics to handlers by the category tag of their phase."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
import logging

from pydantic import Field

from scalac_meta.config.defaults import DEFAULT_CATEGORY_LABEL
from scalac_meta.enums import Severity
from scalac_meta.phase import Phase
from scalac_meta.schema.base import TypedBaseModel
from scalac_meta.utilities.logger_manager import LoggerManager


class Diagnostic(TypedBaseModel):
    """A message reported against a compiler phase."""

    phase_name: str = Field(..., description="Display name of the reporting phase")
    category: str | None = Field(
        None, description="Tag of the reporting phase; None for untagged phases"
    )
    severity: Severity = Field(Severity.ERROR, description="How serious it is")
    message: str = Field(..., min_length=1, description="Human-readable text")


DiagnosticHandler = Callable[[Diagnostic], None]


def category_for(phase: Phase) -> str | None:
    """Return the routing category of ``phase``; None means default handling."""
    return phase.tag


def diagnostic_for(
    phase: Phase, message: str, severity: Severity = Severity.ERROR
) -> Diagnostic:
    """Build a diagnostic for ``phase`` routed by its tag."""
    return Diagnostic(
        phase_name=phase.name,
        category=category_for(phase),
        severity=severity,
        message=message,
    )


class DiagnosticRouter:
    """Dispatches diagnostics to the handlers registered for their category.

    Diagnostics from untagged phases, or from categories nobody registered
    for, go to the default handlers.
    """

    def __init__(self, logger_manager: LoggerManager | None = None) -> None:
        self.logger = (
            logger_manager.get_logger()
            if logger_manager is not None
            else logging.getLogger(__name__)
        )
        self._handlers: dict[str, list[DiagnosticHandler]] = defaultdict(list)
        self._default_handlers: list[DiagnosticHandler] = []

    def register(self, category: str | None, handler: DiagnosticHandler) -> None:
        """Register ``handler`` for ``category``; None registers a default."""
        if category is None:
            self._default_handlers.append(handler)
        else:
            self._handlers[category].append(handler)

    def handlers_for(self, category: str | None) -> list[DiagnosticHandler]:
        if category is not None and self._handlers.get(category):
            return list(self._handlers[category])
        return list(self._default_handlers)

    def route(self, diagnostic: Diagnostic) -> list[DiagnosticHandler]:
        """Deliver ``diagnostic`` and return the handlers that received it."""
        handlers = self.handlers_for(diagnostic.category)
        label = diagnostic.category or DEFAULT_CATEGORY_LABEL
        if not handlers:
            self.logger.warning(
                "No handler for %s diagnostic from phase %s",
                label,
                diagnostic.phase_name,
            )
            return []
        for handler in handlers:
            self.logger.debug(
                "Routing %s diagnostic from phase %s to %s",
                label,
                diagnostic.phase_name,
                getattr(handler, "__name__", repr(handler)),
            )
            handler(diagnostic)
        return handlers

    def report(
        self, phase: Phase, message: str, severity: Severity = Severity.ERROR
    ) -> Diagnostic:
        """Build a diagnostic for ``phase`` and route it."""
        diagnostic = diagnostic_for(phase, message, severity)
        self.route(diagnostic)
        return diagnostic


__all__ = [
    "Diagnostic",
    "DiagnosticHandler",
    "DiagnosticRouter",
    "category_for",
    "diagnostic_for",
]
