"""Disk-backed storage for uploaded files.

Only the POSIX path relative to the storage root is persisted in the
database; ``resolve()`` turns it back into an absolute path and refuses
anything that would land outside the root.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Union
from uuid import uuid4

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    """Result of saving one upload."""
    relative_path: str
    file_name: str
    size_bytes: int


class FileStore:
    """Stores files under ``<root>/<category>/<uuid>_<name>``."""

    def __init__(self, root: Union[str, Path], max_bytes: int = 0):
        self.root = Path(root).resolve()
        self.max_bytes = max_bytes

    @staticmethod
    def safe_name(file_name: str) -> str:
        """Strip directories from a client-supplied file name."""
        name = PurePosixPath((file_name or "").replace("\\", "/")).name
        name = name.strip().lstrip(".")
        return name or "upload"

    def save(self, stream: BinaryIO, file_name: str, category: str) -> StoredFile:
        """Copy ``stream`` into the store.

        Raises:
            ValueError: If the upload is empty or larger than ``max_bytes``
        """
        name = self.safe_name(file_name)
        folder = self.root / category
        folder.mkdir(parents=True, exist_ok=True)

        stored_name = f"{uuid4()}_{name}"
        target = folder / stored_name
        with open(target, "wb") as out:
            shutil.copyfileobj(stream, out)

        size = target.stat().st_size
        if size == 0:
            target.unlink()
            raise ValueError("No file uploaded.")
        if self.max_bytes and size > self.max_bytes:
            target.unlink()
            limit_mb = self.max_bytes / (1024 * 1024)
            raise ValueError(f"File too large. Maximum is {limit_mb:.0f}MB.")

        relative = PurePosixPath(category, stored_name).as_posix()
        logger.info(f"Stored file {name} as {relative} ({size} bytes)")
        return StoredFile(relative_path=relative, file_name=name, size_bytes=size)

    def resolve(self, relative_path: str) -> Path:
        """Absolute path for a stored relative path.

        Raises:
            ValueError: If the path escapes the storage root
        """
        candidate = (self.root / relative_path.lstrip("/")).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            raise ValueError(f"Path outside storage root: {relative_path}")
        return candidate

    def exists(self, relative_path: str) -> bool:
        try:
            return self.resolve(relative_path).is_file()
        except ValueError:
            return False

    def delete(self, relative_path: str) -> bool:
        """Remove a stored file; False when it is already gone."""
        path = self.resolve(relative_path)
        if not path.is_file():
            return False
        path.unlink()
        logger.info(f"Deleted stored file {relative_path}")
        return True
