import os
import stat
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Tuple, Union


class EntryType(Enum):
    FILE = "file"                                   # Regular file
    DIRECTORY = "directory"                         # Directory, reported before its children
    DIRECTORY_UNREADABLE = "directory_unreadable"   # Directory that could not be listed
    UNSTATABLE = "unstatable"                       # lstat() failed
    SYMLINK = "symlink"                             # Symbolic link (never followed)
    SYMLINK_DANGLING = "symlink_dangling"           # Symbolic link naming a non-existent file
    DIRECTORY_POST = "directory_post"               # Directory, all children have been visited
    SPECIAL = "special"                             # FIFO, socket or device node


class Visit(NamedTuple):
    path: str
    type: EntryType
    status: Optional[os.stat_result]
    level: int
    base: int


class SubtreeWalker:
    """
    Depth-first, post-order walk of a directory tree that never follows symlinks.

    Each directory listing is read in full and its handle closed before any
    child is visited, so at most one directory handle is open at a time no
    matter how deep the tree goes. Children are visited in name order.
    """

    def walk(self, root: Union[str, os.PathLike]) -> Iterator[Visit]:
        """
        Yields one Visit per entry under (and including) root.

        Directories are reported as DIRECTORY_POST after their children.
        A missing root yields a single UNSTATABLE visit; nothing is raised.
        """
        root_path = os.fsdecode(os.fspath(root))
        stack: List[Tuple[Visit, Iterator[str]]] = []
        pending: Optional[Visit] = self._classify(root_path, 0, self._base_offset(root_path))

        while True:
            if pending is not None:
                if pending.type is EntryType.DIRECTORY:
                    names = self._list_dir(pending.path)
                    if names is None:
                        yield pending._replace(type=EntryType.DIRECTORY_UNREADABLE)
                    else:
                        stack.append((pending, iter(names)))
                else:
                    yield pending
                pending = None

            if not stack:
                return

            parent, names = stack[-1]
            name = next(names, None)
            if name is None:
                stack.pop()
                yield parent._replace(type=EntryType.DIRECTORY_POST)
            else:
                child = os.path.join(parent.path, name)
                pending = self._classify(child, parent.level + 1, len(child) - len(name))

    def _classify(self, path: str, level: int, base: int) -> Visit:
        try:
            status = os.lstat(path)
        except OSError:
            return Visit(path, EntryType.UNSTATABLE, None, level, base)

        mode = status.st_mode
        if stat.S_ISLNK(mode):
            entry_type = EntryType.SYMLINK if os.path.exists(path) else EntryType.SYMLINK_DANGLING
        elif stat.S_ISDIR(mode):
            entry_type = EntryType.DIRECTORY
        elif stat.S_ISREG(mode):
            entry_type = EntryType.FILE
        else:
            entry_type = EntryType.SPECIAL

        return Visit(path, entry_type, status, level, base)

    def _list_dir(self, path: str) -> Optional[List[str]]:
        """Returns the sorted entry names of path, or None if it cannot be read."""
        try:
            with os.scandir(path) as it:
                return sorted(entry.name for entry in it)
        except OSError:
            return None

    def _base_offset(self, path: str) -> int:
        stripped = path.rstrip(os.sep) or path
        return len(stripped) - len(os.path.basename(stripped))
