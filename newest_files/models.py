from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FileRecord:
    """
    Represents a regular file found during a subtree scan.
    """
    path: str               # as produced by the walker, not canonicalized
    base: int               # offset into path where the final component starts
    level: int              # depth below the scan root (root = 0)
    mtime: int              # whole seconds
    size_bytes: int
    blocks: int             # 512-byte units, used for quota accounting

    @property
    def name(self) -> str:
        return self.path[self.base:]

    @property
    def modified(self) -> datetime:
        """Modification time in local time."""
        return datetime.fromtimestamp(self.mtime)
