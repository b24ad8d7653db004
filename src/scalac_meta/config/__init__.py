"""Configuration layer for phase switches."""

from __future__ import annotations

from scalac_meta.config.env import (
    SWITCH_REGISTRY,
    SwitchSpec,
    categories_for_switch,
    known_categories,
    load_environment,
    spec_for_switch,
    validate_categories,
)

__all__ = [
    "SwitchSpec",
    "SWITCH_REGISTRY",
    "load_environment",
    "spec_for_switch",
    "categories_for_switch",
    "known_categories",
    "validate_categories",
]
