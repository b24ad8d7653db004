"""Shared Pydantic base class with consistent configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TypedBaseModel(BaseModel):
    """Base for every model exchanged with a compiler driver.

    Models are frozen and reject unknown fields so a diagnostic or option set
    cannot drift after it has been routed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
