import csv
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

from . import config
from .models import FileRecord


class ReportGenerator:
    """Renders scanned records, in the order they were collected."""

    def render(self, records: Iterable[FileRecord], stream: Optional[TextIO] = None):
        """
        Writes one line per record to stream (stdout by default):
        local modification time, size right-aligned, path.
        """
        out = stream if stream is not None else sys.stdout
        for record in records:
            out.write(self.format_line(record))

    def format_line(self, record: FileRecord) -> str:
        stamp = record.modified.strftime(config.TIMESTAMP_FORMAT)
        return f"{stamp} {record.size_bytes:>{config.SIZE_COLUMN_WIDTH}} {record.path}\n"

    def write_csv(self, records: Iterable[FileRecord], output_csv: Union[str, Path]) -> int:
        """Writes the same report as CSV. Returns the number of rows written."""
        logging.info(f"Writing CSV report -> {output_csv}")

        rows_written = 0
        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(config.CSV_HEADERS)
            for record in records:
                writer.writerow(self._csv_row(record))
                rows_written += 1

        logging.info(f"CSV report complete. Wrote {rows_written} rows.")
        return rows_written

    def _csv_row(self, record: FileRecord) -> List:
        return [
            record.modified.strftime(config.TIMESTAMP_FORMAT),
            record.size_bytes,
            record.blocks,
            record.level,
            record.path,
        ]
