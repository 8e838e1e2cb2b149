import os
from pathlib import Path
from typing import Any, Iterator

import pytest
from loguru import logger


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Drop ERROR_MESSAGE_* variables and run from an empty directory."""
    for name in list(os.environ):
        if name.startswith("ERROR_MESSAGE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def log_records() -> Iterator[list[dict[str, Any]]]:
    """Collect loguru records emitted during the test."""
    records: list[dict[str, Any]] = []
    sink_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(sink_id)
