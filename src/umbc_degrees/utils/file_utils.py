"""
Snapshot file helpers
"""

import json
import os
import logging

logger = logging.getLogger(__name__)


def snapshot_filename(day):
    """
    Name of the snapshot file for a given date

    Month and day are not zero padded, so 2024-03-07 becomes '2024-3-7.json'.

    Args:
        day (datetime.date): Run date

    Returns:
        str: File name
    """
    return f"{day.year}-{day.month}-{day.day}.json"


def write_json(file_path, data):
    """
    Write data as JSON, overwriting the file if it already exists

    The parent directory is not created; a missing directory raises the
    usual OSError from open().

    Args:
        file_path (str): Destination path
        data: JSON-serializable object

    Returns:
        str: The path that was written
    """
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False)
    logger.info(f"Wrote {os.path.getsize(file_path)} bytes to {file_path}")
    return file_path
