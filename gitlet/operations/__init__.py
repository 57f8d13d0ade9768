"""Operations module for high-level Gitlet operations.

This module contains the business logic for Gitlet operations like:
- Staging and committing
- Checkout, reset and status
- Merge algorithms
"""

from gitlet.operations.snapshot import SnapshotEngine
from gitlet.operations.worktree import WorkTree, StatusReport
from gitlet.operations.merge import MergeEngine, MergeResult, MergeKind, FileAction

__all__ = [
    'SnapshotEngine',
    'WorkTree', 'StatusReport',
    'MergeEngine', 'MergeResult', 'MergeKind', 'FileAction',
]
