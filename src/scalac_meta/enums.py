"""Centralized semantic enums for the phase tooling."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """How serious a diagnostic reported against a phase is."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class PhaseSwitch(str, Enum):
    """Per-category compiler switches a driver can toggle."""

    PRINT = "print"
    CHECK = "check"
    LOG = "log"
    STOP = "stop"
