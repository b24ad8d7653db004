"""Loads per-category phase switches from the environment and `.env` files."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv

from scalac_meta.config.defaults import ENV_PREFIX
from scalac_meta.enums import PhaseSwitch
from scalac_meta.phase import CATALOG


@dataclass(frozen=True)
class SwitchSpec:
    """Describes how each phase switch is exposed in the environment."""

    switch: PhaseSwitch
    env_var: str
    description: str


SWITCH_REGISTRY: tuple[SwitchSpec, ...] = (
    SwitchSpec(
        PhaseSwitch.PRINT, f"{ENV_PREFIX}PRINT", "Print trees after the phase"
    ),
    SwitchSpec(
        PhaseSwitch.CHECK, f"{ENV_PREFIX}CHECK", "Type-check trees after the phase"
    ),
    SwitchSpec(PhaseSwitch.LOG, f"{ENV_PREFIX}LOG", "Log activity of the phase"),
    SwitchSpec(
        PhaseSwitch.STOP, f"{ENV_PREFIX}STOP", "Stop the pipeline after the phase"
    ),
)


def load_environment(dotenv_path: str | Path | None = None) -> None:
    """Load `.env` files when available to seed switch lookups."""
    path = Path(dotenv_path) if dotenv_path else Path(".env")
    if path.exists():
        load_dotenv(dotenv_path=path)


def spec_for_switch(switch: PhaseSwitch | str) -> SwitchSpec:
    """Return the registry entry for a switch, or raise."""
    value = switch.value if isinstance(switch, PhaseSwitch) else switch.lower()
    spec = next((spec for spec in SWITCH_REGISTRY if spec.switch.value == value), None)
    if not spec:
        raise KeyError(f"Unknown phase switch: {switch}")
    return spec


def categories_for_switch(
    switch: PhaseSwitch | str, environ: Mapping[str, str] | None = None
) -> frozenset[str]:
    """Return the categories a switch is enabled for.

    The environment value is a comma separated list of tags, e.g.
    ``SCALAC_META_PRINT=analyzer,erasure``. Entries are stripped and
    upper-cased; blanks are ignored.
    """
    env = os.environ if environ is None else environ
    raw = env.get(spec_for_switch(switch).env_var, "")
    return frozenset(
        entry.strip().upper() for entry in raw.split(",") if entry.strip()
    )


def known_categories() -> frozenset[str]:
    """List every tag carried by a catalog phase."""
    return frozenset(phase.tag for phase in CATALOG if phase.tag is not None)


def validate_categories(categories: Iterable[str]) -> None:
    """Ensure every configured category is carried by some catalog phase."""
    unknown = sorted(set(categories) - known_categories())
    if unknown:
        raise ValueError(
            f"Unknown phase categories: {', '.join(unknown)}. "
            f"Expected any of: {', '.join(sorted(known_categories()))}."
        )


__all__ = [
    "SWITCH_REGISTRY",
    "SwitchSpec",
    "load_environment",
    "spec_for_switch",
    "categories_for_switch",
    "known_categories",
    "validate_categories",
]
