"""Repository management for Gitlet."""

import logging
import shutil
import zlib
from pathlib import Path
from typing import Optional
from .config import get_config
from .errors import (
    CorruptObjectError,
    NotInitializedError,
    ObjectNotFoundError,
    PreconditionError,
    RepositoryExistsError,
)
from .objects import GitletObject, Blob, Commit

logger = logging.getLogger(__name__)

OBJECT_TYPES = {
    'blob': Blob,
    'commit': Commit,
}


class Repository:
    """
    Represents a Gitlet repository.

    A repository manages the .gitlet directory structure and provides
    methods for reading and writing objects. Each command builds one
    Repository and reaches every other component through it.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.gitlet_dir = self.work_tree / '.gitlet'
        self.blobs_dir = self.gitlet_dir / 'blobs'
        self.commits_dir = self.gitlet_dir / 'commits'
        self.refs_dir = self.gitlet_dir / 'refs'
        self.heads_dir = self.refs_dir / 'heads'
        self.remote_refs_dir = self.refs_dir / 'remotes'
        self.remotes_dir = self.gitlet_dir / 'remotes'
        self.head_file = self.gitlet_dir / 'HEAD'
        self.stage_file = self.gitlet_dir / 'stage'
        self.config_file = self.gitlet_dir / 'config'

        # Initialize managers (lazy loading to avoid circular import)
        self._ref_manager = None
        self._commit_graph = None
        self._staging_area = None
        self._snapshot_engine = None
        self._work_tree = None
        self._merge_engine = None
        self._remote_manager = None

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    @property
    def graph(self):
        """Get CommitGraph instance."""
        if self._commit_graph is None:
            from .graph import CommitGraph
            self._commit_graph = CommitGraph(self)
        return self._commit_graph

    @property
    def stage(self):
        """Get the StagingArea, loaded from disk on first use."""
        if self._staging_area is None:
            from .stage import StagingArea
            self._staging_area = StagingArea.load(self.stage_file)
        return self._staging_area

    @property
    def snapshot(self):
        """Get SnapshotEngine instance."""
        if self._snapshot_engine is None:
            from gitlet.operations.snapshot import SnapshotEngine
            self._snapshot_engine = SnapshotEngine(self)
        return self._snapshot_engine

    @property
    def worktree(self):
        """Get WorkTree instance."""
        if self._work_tree is None:
            from gitlet.operations.worktree import WorkTree
            self._work_tree = WorkTree(self)
        return self._work_tree

    @property
    def merge(self):
        """Get MergeEngine instance."""
        if self._merge_engine is None:
            from gitlet.operations.merge import MergeEngine
            self._merge_engine = MergeEngine(self)
        return self._merge_engine

    @property
    def remote(self):
        """Get RemoteManager instance."""
        if self._remote_manager is None:
            from gitlet.remote.remote import RemoteManager
            self._remote_manager = RemoteManager(self)
        return self._remote_manager

    def is_initialized(self) -> bool:
        return self.gitlet_dir.is_dir()

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .gitlet directory structure:
        .gitlet/
        ├── blobs/         # File snapshots, keyed by full hash
        ├── commits/       # Commits, keyed by 2-char prefix + remainder
        ├── refs/
        │   ├── heads/     # Branch references
        │   └── remotes/   # Remote-tracking references
        ├── remotes/       # Remote repository locations
        ├── HEAD           # Current branch
        ├── stage          # Staging area
        └── config         # Repository configuration

        The initial commit is written and the default branch points to it.

        Returns:
            Repository: self for method chaining

        Raises:
            RepositoryExistsError: If repository already exists
        """
        if self.gitlet_dir.exists():
            raise RepositoryExistsError()

        self.gitlet_dir.mkdir(parents=True)
        self.blobs_dir.mkdir()
        self.commits_dir.mkdir()
        self.refs_dir.mkdir()
        self.heads_dir.mkdir()
        self.remote_refs_dir.mkdir()
        self.remotes_dir.mkdir()

        get_config(self).set('core', 'repositoryformatversion', '0')

        branch = get_config(self).default_branch
        initial = Commit.initial()
        commit_hash = self.write_object(initial)
        self.refs.advance(branch, commit_hash)
        self.head_file.write_text(branch + '\n')
        self.stage.clear()

        logger.debug("initialized repository at %s on branch %s", self.gitlet_dir, branch)
        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .gitlet directory
        or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / '.gitlet').is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    @classmethod
    def open(cls, path: str = '.') -> 'Repository':
        """
        Find the enclosing repository or fail.

        Raises:
            NotInitializedError: If no .gitlet directory encloses path
        """
        repo = cls.find_repository(path)
        if repo is None:
            raise NotInitializedError()
        return repo

    def relative_path(self, filepath) -> str:
        """
        Convert a path given on the command line to a repository path.

        Args:
            filepath: Absolute path, or path relative to the current directory

        Returns:
            str: POSIX-style path relative to the work tree
        """
        path = Path(filepath)
        if not path.is_absolute():
            path = Path.cwd() / path
        try:
            return path.resolve().relative_to(self.work_tree).as_posix()
        except ValueError:
            raise PreconditionError(f"{filepath} is outside the repository.")

    def head_commit(self) -> Commit:
        """The commit the checked-out branch points to."""
        return self.graph.get(self.refs.resolve_head())

    def object_path(self, obj_type: str, hash: str) -> Path:
        """
        Get filesystem path for an object.

        Blobs live directly under blobs/ keyed by their full hash. Commits
        are stored in subdirectories named by the first 2 characters of the
        hash, with the remaining 38 characters as the filename, so that
        abbreviated commit ids only need one directory scan.

        Args:
            obj_type: 'blob' or 'commit'
            hash: 40-character SHA-1 hash

        Returns:
            Path: Full path to object file
        """
        if obj_type == 'blob':
            return self.blobs_dir / hash
        if obj_type == 'commit':
            return self.commits_dir / hash[:2] / hash[2:]
        raise ValueError(f"Unknown object type: {obj_type}")

    def write_object(self, obj: GitletObject) -> str:
        """
        Write object to repository.

        Objects are stored compressed with zlib. The format is:
        <type> <size>\\0<content>

        Writing an object that already exists is a no-op.

        Args:
            obj: Object to write

        Returns:
            str: SHA-1 hash of the object
        """
        hash = obj.hash
        path = self.object_path(obj.type, hash)

        if path.exists():
            return hash

        data = obj.serialize()
        header = f"{obj.type} {len(data)}\0".encode()

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(zlib.compress(header + data))

        logger.debug("wrote %s %s (%d bytes)", obj.type, hash, len(data))
        return hash

    def read_object(self, obj_type: str, hash: str) -> GitletObject:
        """
        Read object from repository.

        Args:
            obj_type: Expected object type ('blob' or 'commit')
            hash: 40-character SHA-1 hash

        Returns:
            GitletObject: Deserialized Blob or Commit

        Raises:
            ObjectNotFoundError: If the object is not stored
            CorruptObjectError: If the stored data has an invalid format
        """
        path = self.object_path(obj_type, hash)

        if not path.is_file():
            raise ObjectNotFoundError(obj_type, hash)

        try:
            content = zlib.decompress(path.read_bytes())
        except zlib.error as e:
            raise CorruptObjectError(f"Object {hash} is corrupt: {e}") from e

        # Parse header: <type> <size>\0
        try:
            null_idx = content.index(b'\0')
            stored_type, size_str = content[:null_idx].decode().split(' ', 1)
            size = int(size_str)
        except ValueError as e:
            raise CorruptObjectError(f"Invalid object header in {hash}") from e

        data = content[null_idx + 1:]

        if stored_type != obj_type:
            raise CorruptObjectError(f"Object {hash} is a {stored_type}, not a {obj_type}")

        if len(data) != size:
            raise CorruptObjectError(
                f"Object size mismatch: expected {size}, got {len(data)}"
            )

        obj = OBJECT_TYPES[obj_type]()
        obj.deserialize(data)
        return obj

    def read_blob(self, hash: str) -> Blob:
        return self.read_object('blob', hash)

    def object_exists(self, obj_type: str, hash: str) -> bool:
        """
        Check if object exists in repository.

        Args:
            obj_type: 'blob' or 'commit'
            hash: 40-character SHA-1 hash

        Returns:
            bool: True if object exists
        """
        return self.object_path(obj_type, hash).exists()

    def copy_object_to(self, other: 'Repository', obj_type: str, hash: str) -> bool:
        """
        Copy a stored object into another repository unchanged.

        Args:
            other: Destination repository
            obj_type: 'blob' or 'commit'
            hash: Object hash

        Returns:
            bool: True if copied, False if the destination already had it
        """
        dest = other.object_path(obj_type, hash)
        if dest.exists():
            return False

        source = self.object_path(obj_type, hash)
        if not source.is_file():
            raise ObjectNotFoundError(obj_type, hash)

        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, dest)
        return True

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
