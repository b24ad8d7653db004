"""Explicit default settings for phase tooling."""

from __future__ import annotations

ENV_PREFIX = "SCALAC_META_"

DEFAULT_CATEGORY_LABEL = "default"
"""Label used in logs for phases that carry no tag."""

LOGGING_DEFAULTS: dict[str, object] = {
    "log_level": "INFO",
    "log_file_name": "scalac-meta.log",
    "max_file_size_mb": 5,
    "backup_count": 3,
    "structured_logging": False,
}
