from __future__ import annotations

from pathlib import Path
import shutil

import pytest

from scalac_meta.utilities.logger_manager import LoggerConfig, LoggerManager

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ALLOWED_ARTIFACTS_ROOT = PROJECT_ROOT / "artifacts" / "test"


@pytest.fixture
def test_artifacts_dir(request) -> Path:
    safe_name = (
        request.node.nodeid.replace("::", "__").replace("/", "_").replace("\\", "_")
    )
    target = ALLOWED_ARTIFACTS_ROOT / safe_name
    if target.exists():
        shutil.rmtree(target)
    target.mkdir(parents=True, exist_ok=True)
    return target


@pytest.fixture
def tmp_path(test_artifacts_dir: Path) -> Path:
    return test_artifacts_dir


@pytest.fixture
def logger_manager(request, tmp_path: Path) -> LoggerManager:
    return LoggerManager(
        f"scalac_meta.test.{request.node.name}",
        LoggerConfig(log_dir=tmp_path / "logs", log_level="DEBUG"),
    )
