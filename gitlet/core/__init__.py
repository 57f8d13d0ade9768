"""Core functionality for Gitlet.

This module contains the core data structures:
- Gitlet objects (Blob, Commit)
- Repository and object store
- Staging area
- Reference management
- Commit graph queries
- Configuration management
- Hashing utilities
- Error types

For operations like add/commit, checkout and merge, see gitlet.operations
For remote operations, see gitlet.remote
"""

from gitlet.core.objects import GitletObject, Blob, Commit
from gitlet.core.repository import Repository
from gitlet.core.hash import hash_object, hash_file
from gitlet.core.stage import StagingArea
from gitlet.core.refs import RefManager
from gitlet.core.graph import CommitGraph
from gitlet.core.config import Config, get_config
from gitlet.core.errors import (
    GitletError,
    PreconditionError,
    NotInitializedError,
    RepositoryExistsError,
    UntrackedFileError,
    CommitLookupError,
    CommitNotFoundError,
    AmbiguousCommitError,
    ObjectNotFoundError,
    CorruptObjectError,
    RemoteError,
)

__all__ = [
    'GitletObject',
    'Blob',
    'Commit',
    'Repository',
    'StagingArea',
    'RefManager',
    'CommitGraph',
    'Config',
    'get_config',
    'hash_object',
    'hash_file',
    'GitletError',
    'PreconditionError',
    'NotInitializedError',
    'RepositoryExistsError',
    'UntrackedFileError',
    'CommitLookupError',
    'CommitNotFoundError',
    'AmbiguousCommitError',
    'ObjectNotFoundError',
    'CorruptObjectError',
    'RemoteError',
]
