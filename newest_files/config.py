"""
Configuration constants for the newest-files scanner.
"""

# --- Report Format ---
# strftime equivalent of "%F %T"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SIZE_COLUMN_WIDTH = 12

CSV_HEADERS = ["Modified", "Size Bytes", "Blocks", "Level", "Path"]

# --- Storage Accounting ---
# st_blocks is always counted in 512-byte units, regardless of the filesystem block size
BLOCK_SIZE = 512

# --- Entry Point ---
USAGE_MESSAGE = "Say what? A root directory to scan is required."
