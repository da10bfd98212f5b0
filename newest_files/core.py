import logging
import os
from typing import List, Optional, Union

from tqdm import tqdm

from .metadata.extract import MetadataExtractor
from .models import FileRecord
from .scanning.collector import Comparator, OrderedCollector, newer_than
from .scanning.walker import EntryType, SubtreeWalker


class SubtreeScanner:
    """
    Walks a subtree and collects a FileRecord for every regular file,
    kept in the order given by the comparator (newest first by default).

    The scanner owns its collector; each call to scan() starts from an
    empty collection, so rescanning never accumulates stale records.
    """

    def __init__(self, compare: Comparator = newer_than):
        self.walker = SubtreeWalker()
        self.extractor = MetadataExtractor()
        self.collector = OrderedCollector(compare)

    def scan(self,
             root: Union[str, os.PathLike],
             progress: bool = False,
             compare: Optional[Comparator] = None) -> List[FileRecord]:
        """
        Scans root and returns the ordered records.

        Unreadable directories, unstatable entries and symlinks are skipped
        silently; a root that does not exist, cannot be read or is itself a
        symlink gives an empty result and a warning.
        """
        self.collector.clear()

        visits = tqdm(self.walker.walk(root), desc="Scanning", unit=" entries", disable=not progress)
        for visit in visits:
            if visit.type is EntryType.FILE:
                record = self.extractor.extract(visit.path, visit.level, visit.base, visit.status)
                self.collector.insert(record, compare)
            elif visit.type in (EntryType.UNSTATABLE, EntryType.DIRECTORY_UNREADABLE):
                if visit.level == 0:
                    logging.warning(f"Cannot read scan root {visit.path}; nothing to report.")
                else:
                    logging.debug(f"Skipping {visit.type.value} entry: {visit.path}")
            elif visit.type in (EntryType.SYMLINK, EntryType.SYMLINK_DANGLING) and visit.level == 0:
                logging.warning(f"Scan root {visit.path} is a symbolic link and is not followed; nothing to report.")

        logging.info(f"Scan of {root} complete. Collected {len(self.collector)} files.")
        return list(self.collector)
