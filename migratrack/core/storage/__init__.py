"""
File storage for uploaded documents.

Exports:
- FileStore: Saves uploads under a root directory and resolves relative paths
"""

from .file_store import FileStore, StoredFile

__all__ = [
    "FileStore",
    "StoredFile",
]
