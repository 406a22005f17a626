"""
Shared fixtures for versioning engine tests.
Creates isolated export folders and in-memory directory trees.
"""
import pytest
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence
import sys

# Add src/ to sys.path so 'nextver' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from nextver.core.models import FileEntry


class FakeDir:
    """
    In-memory directory handle with a fixed listing order.
    Pass `error` to make listing fail like an unreadable folder.
    """

    def __init__(self, name: str, children: Sequence = (), error: Optional[Exception] = None):
        self.name = name
        self.path = f"/fake/{name}"
        self.is_dir = True
        self.is_file = False
        self._children = list(children)
        self._error = error
        self.list_calls = 0

    def entries(self) -> List:
        self.list_calls += 1
        if self._error is not None:
            raise self._error
        return list(self._children)


def fake_file(name: str) -> FileEntry:
    return FileEntry(path=f"/fake/{name}", name=name)


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_export_dir(temp_dir):
    """
    Factory fixture: creates an export folder holding the given (relative) filenames.
    Parent folders are created as needed.
    """
    def _make(filenames: Sequence[str], folder: str = "导出") -> Path:
        export_dir = temp_dir / folder
        export_dir.mkdir(parents=True, exist_ok=True)
        for name in filenames:
            path = export_dir / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"\x00" * 16)
        return export_dir
    return _make
