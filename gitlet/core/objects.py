"""Gitlet objects: file snapshots and commits."""

import time
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Dict, List, Optional
from .hash import hash_object


class GitletObject(ABC):
    """Base class for all objects kept in the object store."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Canonical object payload
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Canonical object payload
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        The id is the hash of the canonical payload alone, so a blob's id
        is the hash of the file content it holds.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


class Blob(GitletObject):
    """
    Represents file content.

    A blob stores the raw content of a file without its name. Two files
    with identical bytes share one blob.
    """

    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            data: File content as bytes
        """
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def __repr__(self) -> str:
        size = len(self.data)
        return f"Blob(hash={self.hash[:7]}, size={size})"


def local_timezone() -> str:
    """Return the local UTC offset formatted as +HHMM."""
    return datetime.now().astimezone().strftime('%z') or '+0000'


def parse_timezone(offset: str) -> dt_timezone:
    """Convert a +HHMM / -HHMM offset string to a tzinfo."""
    sign = -1 if offset.startswith('-') else 1
    digits = offset.lstrip('+-')
    hours, minutes = int(digits[:2]), int(digits[2:4])
    return dt_timezone(sign * timedelta(hours=hours, minutes=minutes))


class Commit(GitletObject):
    """
    Represents a commit with metadata.

    A commit captures:
    - The complete snapshot of tracked files (path -> blob id)
    - Parent commit(s) for history, first parent being the mainline
    - Timestamp and timezone
    - Commit message
    """

    INITIAL_MESSAGE = 'initial commit'

    def __init__(self):
        """Initialize empty commit."""
        super().__init__()
        self.message: str = ''
        self.timestamp: int = 0
        self.timezone: str = '+0000'
        self.parents: List[str] = []
        self.tracked: Dict[str, str] = {}

    def serialize(self) -> bytes:
        """
        Serialize commit to Gitlet format.

        Format:
        timestamp <seconds> <timezone>
        parent <parent-hash>  (zero or more)
        file <blob-hash> <path>  (sorted by path)

        <commit message>

        Returns:
            bytes: Serialized commit data
        """
        lines = [f'timestamp {self.timestamp} {self.timezone}']

        for parent in self.parents:
            lines.append(f'parent {parent}')

        for path in sorted(self.tracked):
            lines.append(f'file {self.tracked[path]} {path}')

        lines.append('')
        lines.append(self.message)

        return '\n'.join(lines).encode()

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from Gitlet format.

        Args:
            data: Serialized commit data
        """
        lines = data.decode().split('\n')

        self.parents = []
        self.tracked = {}
        message_start = len(lines)
        for i, line in enumerate(lines):
            if not line:
                message_start = i + 1
                break

            if line.startswith('timestamp '):
                seconds, self.timezone = line[10:].split(' ', 1)
                self.timestamp = int(seconds)

            elif line.startswith('parent '):
                self.parents.append(line[7:])

            elif line.startswith('file '):
                blob_hash, path = line[5:].split(' ', 1)
                self.tracked[path] = blob_hash

        self.message = '\n'.join(lines[message_start:])
        self._hash = None

    @classmethod
    def create(
        cls,
        message: str,
        parents: List[str],
        tracked: Dict[str, str],
        timestamp: Optional[int] = None,
        timezone: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            message: Commit message
            parents: Parent commit hashes, mainline parent first
            tracked: Full snapshot mapping file paths to blob hashes
            timestamp: Unix timestamp (defaults to current time)
            timezone: Timezone offset (defaults to the local offset)

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.parents = list(parents)
        commit.tracked = dict(tracked)
        commit.timestamp = int(time.time()) if timestamp is None else timestamp
        commit.timezone = timezone or local_timezone()
        return commit

    @classmethod
    def initial(cls) -> 'Commit':
        """The root commit shared by every repository."""
        return cls.create(cls.INITIAL_MESSAGE, [], {}, timestamp=0, timezone='+0000')

    def blob_for(self, path: str) -> Optional[str]:
        """Blob id tracked for path, or None if the path is untracked."""
        return self.tracked.get(path)

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1

    @property
    def date(self) -> datetime:
        """Commit time in the timezone it was recorded in."""
        return datetime.fromtimestamp(self.timestamp, tz=parse_timezone(self.timezone))

    def __repr__(self) -> str:
        parent_info = f", parents={len(self.parents)}" if self.parents else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
