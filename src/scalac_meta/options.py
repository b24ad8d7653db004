"""Resolves per-category compiler switches for a phase.

Switches are configured per tag, so every phase sharing a tag shares its
switches: enabling ``ANALYZER`` printing prints after both the desugarizer
and the analyzer. Untagged markers (start, end, unknown) never have a
switch enabled.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging

from pydantic import Field

from scalac_meta.config.defaults import DEFAULT_CATEGORY_LABEL
from scalac_meta.config.env import categories_for_switch, validate_categories
from scalac_meta.enums import PhaseSwitch
from scalac_meta.phase import Phase
from scalac_meta.schema.base import TypedBaseModel

logger = logging.getLogger(__name__)


class PhaseOptions(TypedBaseModel):
    """Switches in effect for one phase."""

    category: str | None = Field(None, description="Tag the switches were read for")
    print_trees: bool = False
    check_trees: bool = False
    log_activity: bool = False
    stop_after: bool = False


@dataclass(frozen=True)
class OptionSettings:
    """Categories each switch is enabled for."""

    print_categories: frozenset[str] = field(default_factory=frozenset)
    check_categories: frozenset[str] = field(default_factory=frozenset)
    log_categories: frozenset[str] = field(default_factory=frozenset)
    stop_categories: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_environment(
        cls, environ: Mapping[str, str] | None = None, *, strict: bool = False
    ) -> OptionSettings:
        """Read every switch from the environment.

        With ``strict`` set, categories no catalog phase carries raise
        ``ValueError``.
        """
        settings = cls(
            print_categories=categories_for_switch(PhaseSwitch.PRINT, environ),
            check_categories=categories_for_switch(PhaseSwitch.CHECK, environ),
            log_categories=categories_for_switch(PhaseSwitch.LOG, environ),
            stop_categories=categories_for_switch(PhaseSwitch.STOP, environ),
        )
        if strict:
            validate_categories(settings.all_categories())
        return settings

    def categories(self, switch: PhaseSwitch) -> frozenset[str]:
        return {
            PhaseSwitch.PRINT: self.print_categories,
            PhaseSwitch.CHECK: self.check_categories,
            PhaseSwitch.LOG: self.log_categories,
            PhaseSwitch.STOP: self.stop_categories,
        }[switch]

    def all_categories(self) -> frozenset[str]:
        return (
            self.print_categories
            | self.check_categories
            | self.log_categories
            | self.stop_categories
        )


def resolve_options(phase: Phase, settings: OptionSettings) -> PhaseOptions:
    """Return the switches enabled for ``phase`` under ``settings``."""
    tag = phase.tag
    if tag is None:
        logger.debug(
            "Phase %s has no category; using %s options",
            phase.name,
            DEFAULT_CATEGORY_LABEL,
        )
        return PhaseOptions()

    options = PhaseOptions(
        category=tag,
        print_trees=tag in settings.print_categories,
        check_trees=tag in settings.check_categories,
        log_activity=tag in settings.log_categories,
        stop_after=tag in settings.stop_categories,
    )
    logger.debug("Resolved options for phase %s: %s", phase.name, options)
    return options


__all__ = ["OptionSettings", "PhaseOptions", "resolve_options"]
