"""Storage module - .odt file resolution and whole-file I/O"""

from .engine import FILE_SUFFIX, candidate_paths, find_table_file, read_text, resolve_path, write_text

__all__ = ['FILE_SUFFIX', 'candidate_paths', 'find_table_file', 'read_text', 'resolve_path', 'write_text']
