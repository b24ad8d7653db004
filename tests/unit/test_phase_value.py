from __future__ import annotations

from dataclasses import FrozenInstanceError

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from scalac_meta.phase import ANALYZER, CATALOG, PARSER, START, Phase


@settings(database=None)
@given(name=st.text(), tag=st.one_of(st.none(), st.text(min_size=1)))
def test_fields_keep_constructor_values(name: str, tag: str | None) -> None:
    phase = Phase(name, tag)
    assert phase.name is name
    assert phase.tag is tag


def test_tag_defaults_to_none() -> None:
    assert Phase("custom").tag is None


def test_construction_is_permissive() -> None:
    assert Phase("").name == ""
    assert Phase("x", "NOT_A_REAL_CATEGORY").tag == "NOT_A_REAL_CATEGORY"


def test_no_normalization_is_applied() -> None:
    phase = Phase("  Parser ", "parser")
    assert phase.name == "  Parser "
    assert phase.tag == "parser"


@pytest.mark.parametrize("field", ["name", "tag"])
def test_fields_are_read_only(field: str) -> None:
    with pytest.raises(FrozenInstanceError):
        setattr(ANALYZER, field, "changed")
    with pytest.raises(FrozenInstanceError):
        delattr(PARSER, field)


def test_rebuilt_phase_is_not_the_catalog_entry() -> None:
    for phase in CATALOG:
        twin = Phase(phase.name, phase.tag)
        assert twin != phase
        assert twin is not phase


def test_same_instance_compares_equal() -> None:
    custom = Phase("custom", "CUSTOM")
    assert custom == custom
    assert START == START


def test_repr_shows_fields() -> None:
    assert repr(PARSER) == "Phase(name='parser', tag='PARSER')"
    assert repr(START) == "Phase(name='start', tag=None)"
