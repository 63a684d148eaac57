import shutil
import sys
from pathlib import Path

import pytest
from loguru import logger

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (the CLI binds one to the captured stdout)."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")


@pytest.fixture
def fixture_copy(tmp_path):
    """Copy a YAML fixture into tmp_path and return the copy's path."""

    def _copy(name: str, dest_name: str = None) -> Path:
        dest = tmp_path / (dest_name or name)
        shutil.copy(FIXTURES_PATH / name, dest)
        return dest

    return _copy
