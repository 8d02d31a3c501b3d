"""
Storage Engine - Whole-file reads and writes for .odt table files

Features:
- Path resolution against an optional data directory
- Fallback to the .odt suffix when a bare name is not found
- Handles scoped to a single call; OSError surfaced as StorageIOError
"""

import logging
import os
from typing import List, Optional

from ..core.errors import FormatError, NotFoundError, StorageIOError


logger = logging.getLogger(__name__)

FILE_SUFFIX = ".odt"
ENCODING = "utf-8"


def resolve_path(path: str, data_dir: Optional[str] = None) -> str:
    """Anchor a relative path in data_dir (absolute paths pass through)"""
    path = os.path.expanduser(path)
    if data_dir and not os.path.isabs(path):
        return os.path.join(data_dir, path)
    return path


def candidate_paths(path: str, data_dir: Optional[str] = None) -> List[str]:
    """Paths tried by find_table_file, in order"""
    resolved = resolve_path(path, data_dir)
    return [resolved, resolved + FILE_SUFFIX]


def find_table_file(path: str, data_dir: Optional[str] = None) -> str:
    """
    Locate a table file, trying the literal path then path + '.odt'.

    Raises:
        NotFoundError: If neither candidate is an existing file
    """
    candidates = candidate_paths(path, data_dir)
    for candidate in candidates:
        logger.debug("Looking for table file at %s", candidate)
        if os.path.isfile(candidate):
            return candidate
    raise NotFoundError(f"Cannot open file: {path} (also tried: {path}{FILE_SUFFIX})")


def read_text(path: str) -> str:
    """Read a whole file; the handle is closed before any parsing starts"""
    try:
        with open(path, 'r', encoding=ENCODING) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FormatError(f"Invalid file format: {path} is not valid {ENCODING} text") from e
    except OSError as e:
        raise StorageIOError(f"Cannot open file: {path} ({e.strerror or e})", path) from e


def write_text(path: str, text: str) -> None:
    """Write a whole file, replacing any existing one"""
    try:
        with open(path, 'w', encoding=ENCODING, newline='\n') as f:
            f.write(text)
    except OSError as e:
        raise StorageIOError(f"Cannot open file for writing: {path} ({e.strerror or e})", path) from e
    logger.debug("Wrote %d bytes to %s", len(text), path)
