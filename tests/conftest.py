import os
import pytest
from pathlib import Path

T0 = 1_700_000_000  # 2023-11-14, fixed so mtimes are comparable across tests


@pytest.fixture
def t0() -> int:
    """Reference modification time (epoch seconds) shared by the tests."""
    return T0


@pytest.fixture
def make_file():
    """Returns a helper that writes a file of `size` bytes with a pinned mtime."""
    def _make(path: Path, mtime: int = T0, size: int = 0) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        os.utime(path, (mtime, mtime))
        return path
    return _make
