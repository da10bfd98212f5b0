import logging
import os
from typing import Optional

from .. import config
from ..exceptions import MetadataExtractionError
from ..models import FileRecord


class MetadataExtractor:
    """
    Builds immutable FileRecords from the stat data captured by the walker.

    The stat result is never re-read: whatever the walker saw at visit time is
    what ends up in the record.
    """

    def extract(self,
                path: str,
                level: int,
                base: int,
                status: os.stat_result) -> Optional[FileRecord]:
        """
        Returns a new FileRecord, or None if one could not be built.
        A None result means "skip this file"; the scan carries on.
        """
        try:
            return self._build_record(path, level, base, status)
        except MetadataExtractionError as e:
            logging.warning(f"Skipping {path!r}: {e}")
            return None

    def _build_record(self,
                      path: str,
                      level: int,
                      base: int,
                      status: os.stat_result) -> FileRecord:
        if not path:
            raise MetadataExtractionError("empty path")
        if not 0 <= base <= len(path):
            raise MetadataExtractionError(f"base offset {base} outside path")

        try:
            size_bytes = int(status.st_size)
            return FileRecord(
                path=str(path),
                base=int(base),
                level=int(level),
                mtime=self._mtime_seconds(status),
                size_bytes=size_bytes,
                blocks=self._block_count(status, size_bytes),
            )
        except (AttributeError, TypeError, ValueError, OverflowError, MemoryError) as e:
            raise MetadataExtractionError(str(e) or type(e).__name__) from e

    def _mtime_seconds(self, status: os.stat_result) -> int:
        # Floor to whole seconds, matching st_mtim.tv_sec for pre-1970 times too
        mtime_ns = getattr(status, "st_mtime_ns", None)
        if mtime_ns is not None:
            return mtime_ns // 1_000_000_000
        return int(status.st_mtime // 1)

    def _block_count(self, status: os.stat_result, size_bytes: int) -> int:
        blocks = getattr(status, "st_blocks", None)
        if blocks is not None:
            return int(blocks)
        # Windows has no st_blocks; assume no sparse files
        return -(-size_bytes // config.BLOCK_SIZE)
