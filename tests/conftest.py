"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from blob_namespace._host import Host
from blob_namespace._provider import BlobNamespaceProvider

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from blob_namespace._errors import BlobNamespaceError


class RecordingHost(Host):
    """Host that records commands and errors instead of talking to a shell."""

    def __init__(self, *, extract_dir: Path | None = None) -> None:
        self.commands: list[str] = []
        self.errors: list[BlobNamespaceError] = []
        self.extracted: list[str] = []
        self._extract_dir = extract_dir

    def extract_resource(self, name: str, destination: str) -> str:
        if self._extract_dir is not None:
            destination = str(self._extract_dir / name)
        path = super().extract_resource(name, destination)
        self.extracted.append(path)
        return path

    def invoke_command(self, command: str) -> object:
        self.commands.append(command)
        return None

    def write_error(self, error: BlobNamespaceError) -> None:
        self.errors.append(error)


class ExtractionFailingHost(RecordingHost):
    """Host whose resource extraction always fails."""

    def extract_resource(self, name: str, destination: str) -> str:
        raise PermissionError(f"cannot write {destination}")


@pytest.fixture(autouse=True)
def _fresh_startup() -> Iterator[None]:
    """Every test sees a provider class whose one-time startup has not run."""
    BlobNamespaceProvider.reset_startup()
    yield
    BlobNamespaceProvider.reset_startup()


@pytest.fixture
def host(tmp_path: Path) -> RecordingHost:
    return RecordingHost(extract_dir=tmp_path)


@pytest.fixture
def failing_host() -> ExtractionFailingHost:
    return ExtractionFailingHost()
