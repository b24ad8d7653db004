from __future__ import annotations

import pytest

from scalac_meta.enums import PhaseSwitch
from scalac_meta.options import OptionSettings, PhaseOptions, resolve_options
from scalac_meta.phase import (
    ANALYZER,
    CATALOG,
    DESUGARIZER,
    END,
    ERASURE,
    PARSER,
    START,
)


def test_analyzer_switch_applies_to_both_analyzer_phases() -> None:
    settings = OptionSettings(print_categories=frozenset({"ANALYZER"}))
    assert resolve_options(DESUGARIZER, settings).print_trees
    assert resolve_options(ANALYZER, settings).print_trees
    assert not resolve_options(PARSER, settings).print_trees


def test_untagged_phases_get_default_options() -> None:
    settings = OptionSettings(
        print_categories=frozenset({"PARSER"}),
        stop_categories=frozenset({"ERASURE"}),
    )
    assert resolve_options(START, settings) == PhaseOptions()
    assert resolve_options(END, settings).category is None


def test_options_record_category_and_every_switch() -> None:
    settings = OptionSettings(
        print_categories=frozenset({"ERASURE"}),
        check_categories=frozenset({"ERASURE"}),
        log_categories=frozenset({"ERASURE"}),
        stop_categories=frozenset({"ERASURE"}),
    )
    assert resolve_options(ERASURE, settings) == PhaseOptions(
        category="ERASURE",
        print_trees=True,
        check_trees=True,
        log_activity=True,
        stop_after=True,
    )


def test_settings_from_environment() -> None:
    environ = {
        "SCALAC_META_PRINT": "analyzer, erasure",
        "SCALAC_META_STOP": "refcheck",
    }
    settings = OptionSettings.from_environment(environ)
    assert settings.categories(PhaseSwitch.PRINT) == {"ANALYZER", "ERASURE"}
    assert settings.categories(PhaseSwitch.STOP) == {"REFCHECK"}
    assert settings.categories(PhaseSwitch.CHECK) == frozenset()
    assert settings.all_categories() == {"ANALYZER", "ERASURE", "REFCHECK"}


def test_strict_settings_reject_unknown_categories() -> None:
    with pytest.raises(ValueError, match="TYPER"):
        OptionSettings.from_environment({"SCALAC_META_LOG": "typer"}, strict=True)


def test_strict_settings_accept_catalog_categories() -> None:
    tags = ",".join(phase.tag for phase in CATALOG if phase.tag)
    settings = OptionSettings.from_environment({"SCALAC_META_CHECK": tags}, strict=True)
    assert all(resolve_options(phase, settings).check_trees for phase in CATALOG if phase.tag)
