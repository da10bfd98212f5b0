from typing import Callable, Iterator, List, Optional, Tuple

from ..models import FileRecord

# compare(a, b) is True iff a must be placed strictly before b
Comparator = Callable[[FileRecord, FileRecord], bool]


def newer_than(a: FileRecord, b: FileRecord) -> bool:
    return a.mtime > b.mtime


def older_than(a: FileRecord, b: FileRecord) -> bool:
    return a.mtime < b.mtime


def larger_than(a: FileRecord, b: FileRecord) -> bool:
    return a.size_bytes > b.size_bytes


class OrderedCollector:
    """
    Keeps FileRecords sorted as they arrive, one at a time (insertion sort).

    A new record goes in front of the first element it must strictly precede,
    so records with equal keys stay in the order they were inserted.
    """

    def __init__(self, compare: Comparator = newer_than):
        self.compare = compare
        self._records: List[FileRecord] = []

    def insert(self,
               record: Optional[FileRecord],
               compare: Optional[Comparator] = None) -> Optional[FileRecord]:
        """Inserts record in order and returns it. None is ignored."""
        if record is None:
            return None

        compare = compare or self.compare
        for index, current in enumerate(self._records):
            if compare(record, current):
                self._records.insert(index, record)
                break
        else:
            # Reached the end of the list
            self._records.append(record)

        return record

    def clear(self):
        """Drops every record collected so far."""
        self._records.clear()

    @property
    def records(self) -> Tuple[FileRecord, ...]:
        return tuple(self._records)

    # --- Retention accounting ---

    def total_size(self) -> int:
        return sum(r.size_bytes for r in self._records)

    def total_blocks(self) -> int:
        return sum(r.blocks for r in self._records)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> FileRecord:
        return self._records[index]
