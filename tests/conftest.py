"""
Shared fixtures isolating tests from the process configuration.
"""

from typing import Any, Callable

import pytest

from outbound.env import reset_config
from outbound.request_id import RequestId
from outbound.schema.config import OutboundConfig


class FileHandle:
    """Minimal file leaf: readable and backed by a path."""

    def __init__(self, path: str = "/tmp/notes.txt", data: bytes = b"file-bytes") -> None:
        self.path = path
        self._data = data

    def read(self, *args: Any) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"FileHandle({self.path!r})"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    for key in OutboundConfig.model_fields:
        monkeypatch.delenv(f"OUTBOUND_{key.upper()}", raising=False)
    monkeypatch.setenv("OUTBOUND_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    reset_config()
    RequestId.reset()
    yield
    reset_config()
    RequestId.reset()


@pytest.fixture
def configure(monkeypatch) -> Callable[..., None]:
    def _configure(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(f"OUTBOUND_{key.upper()}", value)
        reset_config()
        RequestId.reset()

    return _configure


@pytest.fixture
def file_handle() -> FileHandle:
    return FileHandle()
