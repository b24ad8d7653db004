"""Utilities package for phase tooling.

Holds the logging helpers shared by the diagnostics router and the option
resolver.
"""

from __future__ import annotations

from .logger_manager import LoggerConfig, LoggerManager, LoggerSettings

__all__ = [
    "LoggerConfig",
    "LoggerManager",
    "LoggerSettings",
]
