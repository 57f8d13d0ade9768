"""Merge operations for Gitlet."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from gitlet.core.errors import PreconditionError
from gitlet.core.objects import Blob, Commit

logger = logging.getLogger(__name__)


class MergeKind(Enum):
    """How a merge ended."""
    UP_TO_DATE = 'up-to-date'
    FAST_FORWARD = 'fast-forward'
    MERGED = 'merged'


class FileAction(Enum):
    """What a three-way merge does with one path."""
    KEEP = 'keep'
    TAKE_TARGET = 'take-target'
    DELETE = 'delete'
    CONFLICT = 'conflict'


@dataclass
class MergeResult:
    """Result of a merge operation."""
    kind: MergeKind
    commit_hash: Optional[str] = None
    conflicts: List[str] = field(default_factory=list)
    message: str = ""

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def __repr__(self) -> str:
        return f"MergeResult({self.kind.value}, conflicts={len(self.conflicts)})"


def classify(
    split_hash: Optional[str],
    current_hash: Optional[str],
    target_hash: Optional[str]
) -> FileAction:
    """
    Decide the fate of one path from its blob hash on each side.

    None means the path is absent on that side, which counts as a
    distinct version rather than as unchanged.

    Args:
        split_hash: Version at the split point
        current_hash: Version on the current branch
        target_hash: Version on the branch being merged

    Returns:
        FileAction for the path
    """
    # Same on both sides (unchanged, or converged)
    if current_hash == target_hash:
        return FileAction.KEEP

    # Only the target changed it
    if current_hash == split_hash:
        return FileAction.DELETE if target_hash is None else FileAction.TAKE_TARGET

    # Only the current branch changed it
    if target_hash == split_hash:
        return FileAction.KEEP

    return FileAction.CONFLICT


def generate_conflict_markers(
    ours_content: Optional[bytes],
    theirs_content: Optional[bytes]
) -> bytes:
    """
    Generate conflicted file content.

    Each side is followed by a newline unless it already ends in one;
    an absent side contributes nothing.

    Args:
        ours_content: Content from the current branch
        theirs_content: Content from the branch being merged

    Returns:
        File content with conflict markers
    """
    result = [b"<<<<<<< HEAD\n"]

    if ours_content:
        result.append(ours_content)
        if not ours_content.endswith(b'\n'):
            result.append(b'\n')

    result.append(b"=======\n")

    if theirs_content:
        result.append(theirs_content)
        if not theirs_content.endswith(b'\n'):
            result.append(b'\n')

    result.append(b">>>>>>>\n")

    return b''.join(result)


class MergeEngine:
    """
    Handles merge operations for Gitlet.

    Supports:
    - Fast-forward merges
    - Three-way merges against the split point
    - Conflict markers, committed as file content
    """

    def __init__(self, repo):
        """
        Initialize merge engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def plan(self, split: Commit, current: Commit, target: Commit) -> Dict[str, FileAction]:
        """
        Classify every path tracked by any of the three commits.

        Returns:
            Dict mapping paths to actions, KEEP entries omitted
        """
        all_paths = set(split.tracked) | set(current.tracked) | set(target.tracked)
        actions = {}
        for path in sorted(all_paths):
            action = classify(
                split.blob_for(path), current.blob_for(path), target.blob_for(path)
            )
            if action is not FileAction.KEEP:
                actions[path] = action
        return actions

    def _blob_content(self, blob_hash: Optional[str]) -> Optional[bytes]:
        if blob_hash is None:
            return None
        return self.repo.read_blob(blob_hash).data

    def _write_conflict(self, path: str, current: Commit, target: Commit) -> str:
        content = generate_conflict_markers(
            self._blob_content(current.blob_for(path)),
            self._blob_content(target.blob_for(path)),
        )
        blob_hash = self.repo.write_object(Blob(content))
        self.repo.worktree.write_file(path, blob_hash)
        return blob_hash

    def merge(self, branch: str) -> MergeResult:
        """
        Merge a branch into the current branch.

        Args:
            branch: Local or remote-tracking branch name

        Returns:
            MergeResult describing the outcome

        Raises:
            PreconditionError: If the stage is dirty, the branch is missing
                or current, or the histories are disjoint
            UntrackedFileError: If an untracked file would be overwritten
        """
        refs = self.repo.refs
        stage = self.repo.stage

        if not stage.is_empty():
            raise PreconditionError("You have uncommitted changes.")
        if not refs.branch_exists(branch):
            raise PreconditionError("A branch with that name does not exist.")
        current_branch = refs.current_branch()
        if branch == current_branch:
            raise PreconditionError("Cannot merge a branch with itself.")

        current = self.repo.head_commit()
        target = self.repo.graph.get(refs.read_ref(branch))

        split_hash = self.repo.graph.split_point(current.hash, target.hash)
        if split_hash is None:
            raise PreconditionError(
                "Given branch has no common ancestor with the current branch."
            )

        if split_hash == target.hash:
            return MergeResult(
                kind=MergeKind.UP_TO_DATE,
                message="Given branch is an ancestor of the current branch."
            )

        if split_hash == current.hash:
            self.repo.worktree.restore(target)
            refs.advance(current_branch, target.hash)
            logger.debug("fast-forwarded %s to %s", current_branch, target.hash[:7])
            return MergeResult(
                kind=MergeKind.FAST_FORWARD,
                commit_hash=target.hash,
                message="Current branch fast-forwarded."
            )

        self.repo.worktree.check_untracked(target)

        split = self.repo.graph.get(split_hash)
        conflicts = []
        for path, action in self.plan(split, current, target).items():
            logger.debug("merge %s: %s", path, action.value)
            if action is FileAction.TAKE_TARGET:
                self.repo.worktree.write_file(path, target.blob_for(path))
                stage.stage(path, target.blob_for(path))
            elif action is FileAction.DELETE:
                self.repo.worktree.delete_file(path)
                stage.mark_removed(path)
            elif action is FileAction.CONFLICT:
                stage.stage(path, self._write_conflict(path, current, target))
                conflicts.append(path)

        commit = self.repo.snapshot.commit(
            f"Merged {branch} into {current_branch}.",
            merge_parent=target.hash
        )

        return MergeResult(
            kind=MergeKind.MERGED,
            commit_hash=commit.hash,
            conflicts=conflicts,
            message="Encountered a merge conflict." if conflicts else ""
        )
