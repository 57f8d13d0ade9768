"""Staging area implementation."""

import hashlib
import logging
import struct
from pathlib import Path
from typing import Dict, Optional, Set

from .errors import CorruptObjectError

logger = logging.getLogger(__name__)


class StagingArea:
    """
    Gitlet staging area.

    Records files scheduled for the next commit:
    - staged: path -> blob hash of the content to add or overwrite
    - removed: paths to drop from tracking

    A path is never in both sets. When bound to a file, every mutation
    rewrites the whole structure to disk before returning.
    """

    SIGNATURE = b'STAG'
    VERSION = 1

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize empty staging area.

        Args:
            path: File the staging area persists to, or None for in-memory use
        """
        self.path = Path(path) if path is not None else None
        self.staged: Dict[str, str] = {}
        self.removed: Set[str] = set()

    @classmethod
    def load(cls, path: Path) -> 'StagingArea':
        """Read the staging area stored at path (empty if the file is absent)."""
        stage = cls(path)
        stage.read(path)
        return stage

    def stage(self, path: str, blob_hash: str) -> None:
        """Schedule path for inclusion, clearing any pending removal."""
        self.staged[path] = blob_hash
        self.removed.discard(path)
        self._persist()

    def unstage(self, path: str) -> None:
        if path in self.staged:
            del self.staged[path]
            self._persist()

    def mark_removed(self, path: str) -> None:
        """Schedule path for removal, dropping any staged content for it."""
        self.staged.pop(path, None)
        self.removed.add(path)
        self._persist()

    def unmark_removed(self, path: str) -> None:
        if path in self.removed:
            self.removed.discard(path)
            self._persist()

    def is_staged(self, path: str) -> bool:
        return path in self.staged

    def is_removed(self, path: str) -> bool:
        return path in self.removed

    def get_staged(self, path: str) -> Optional[str]:
        """Blob hash staged for path, or None."""
        return self.staged.get(path)

    def is_empty(self) -> bool:
        return not self.staged and not self.removed

    def clear(self) -> None:
        """Drop all pending changes."""
        self.staged.clear()
        self.removed.clear()
        self._persist()

    def _persist(self) -> None:
        if self.path is not None:
            self.write(self.path)

    def write(self, stage_path) -> None:
        """
        Write staging area to disk in binary format.

        Format:
        - Header: 'STAG' + version (4 bytes) + staged count (4 bytes)
          + removed count (4 bytes)
        - Staged entries, sorted by path: 20-byte hash + path length
          (2 bytes) + path
        - Removed entries, sorted: path length (2 bytes) + path
        - Checksum: SHA-1 of everything before it

        Args:
            stage_path: Path to stage file
        """
        content = bytearray()

        content.extend(self.SIGNATURE)
        content.extend(struct.pack('>III', self.VERSION, len(self.staged), len(self.removed)))

        for path in sorted(self.staged):
            encoded = path.encode()
            content.extend(bytes.fromhex(self.staged[path]))
            content.extend(struct.pack('>H', len(encoded)))
            content.extend(encoded)

        for path in sorted(self.removed):
            encoded = path.encode()
            content.extend(struct.pack('>H', len(encoded)))
            content.extend(encoded)

        content.extend(hashlib.sha1(content).digest())

        Path(stage_path).write_bytes(content)
        logger.debug(
            "saved stage: %d staged, %d removed", len(self.staged), len(self.removed)
        )

    def read(self, stage_path) -> None:
        """
        Read staging area from disk.

        Args:
            stage_path: Path to stage file

        Raises:
            CorruptObjectError: If the signature or checksum do not match
        """
        self.staged.clear()
        self.removed.clear()

        if not Path(stage_path).exists():
            return

        data = Path(stage_path).read_bytes()

        content = data[:-20]
        checksum = data[-20:]
        if len(data) < 36 or hashlib.sha1(content).digest() != checksum:
            raise CorruptObjectError("Staging area checksum mismatch")

        if content[0:4] != self.SIGNATURE:
            raise CorruptObjectError(f"Invalid staging area signature: {content[0:4]!r}")

        _version, staged_count, removed_count = struct.unpack('>III', content[4:16])
        offset = 16

        for _ in range(staged_count):
            blob_hash = content[offset:offset + 20].hex()
            (length,) = struct.unpack('>H', content[offset + 20:offset + 22])
            offset += 22
            path = content[offset:offset + length].decode()
            offset += length
            self.staged[path] = blob_hash

        for _ in range(removed_count):
            (length,) = struct.unpack('>H', content[offset:offset + 2])
            offset += 2
            self.removed.add(content[offset:offset + length].decode())
            offset += length

    def __len__(self) -> int:
        """Number of pending changes."""
        return len(self.staged) + len(self.removed)

    def __repr__(self) -> str:
        return f"StagingArea(staged={len(self.staged)}, removed={len(self.removed)})"
