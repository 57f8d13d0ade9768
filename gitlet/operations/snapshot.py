"""Staging files and recording commits."""

import logging
from typing import Optional

from gitlet.core.errors import PreconditionError
from gitlet.core.objects import Blob, Commit

logger = logging.getLogger(__name__)


class SnapshotEngine:
    """
    Builds new commits from the head commit plus the staging area.

    Supports:
    - add: stage a file's current content
    - remove: stage a file for removal and delete it
    - commit: record the staged snapshot on the current branch
    """

    def __init__(self, repo):
        """
        Initialize snapshot engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def add(self, path: str) -> Optional[str]:
        """
        Stage a file for the next commit.

        If the content equals the version tracked by the head commit, the
        file is unstaged instead and any pending removal is cancelled.

        Args:
            path: Repository-relative file path

        Returns:
            Blob hash of the staged content, or None if nothing was staged

        Raises:
            PreconditionError: If the file does not exist
        """
        file_path = self.repo.work_tree / path
        if not file_path.is_file():
            raise PreconditionError("File does not exist.")

        stage = self.repo.stage
        blob = Blob.from_file(file_path)

        if self.repo.head_commit().blob_for(path) == blob.hash:
            stage.unstage(path)
            stage.unmark_removed(path)
            logger.debug("%s matches head; nothing staged", path)
            return None

        self.repo.write_object(blob)
        stage.stage(path, blob.hash)
        return blob.hash

    def remove(self, path: str) -> None:
        """
        Unstage a file and, if it is tracked, schedule its removal.

        A tracked file is also deleted from the working directory.

        Args:
            path: Repository-relative file path

        Raises:
            PreconditionError: If the file is neither staged nor tracked
        """
        stage = self.repo.stage
        tracked = self.repo.head_commit().blob_for(path) is not None

        if not stage.is_staged(path) and not tracked:
            raise PreconditionError("No reason to remove the file.")

        stage.unstage(path)
        if tracked:
            stage.mark_removed(path)
            self.repo.worktree.delete_file(path)

    def commit(self, message: str, merge_parent: Optional[str] = None) -> Commit:
        """
        Record the staged snapshot as a new commit on the current branch.

        Args:
            message: Commit message
            merge_parent: Second parent hash when completing a merge

        Returns:
            Commit: The new commit

        Raises:
            PreconditionError: If the message is blank or nothing changed
        """
        if not message or not message.strip():
            raise PreconditionError("Please enter a commit message.")

        stage = self.repo.stage
        head = self.repo.head_commit()

        tracked = dict(head.tracked)
        tracked.update(stage.staged)
        for path in stage.removed:
            tracked.pop(path, None)

        if stage.is_empty() or (merge_parent is None and tracked == head.tracked):
            raise PreconditionError("No changes added to the commit.")

        parents = [head.hash]
        if merge_parent is not None:
            parents.append(merge_parent)

        commit = Commit.create(message, parents, tracked)
        commit_hash = self.repo.write_object(commit)

        self.repo.refs.advance(self.repo.refs.current_branch(), commit_hash)
        stage.clear()

        logger.debug("committed %s with %d tracked files", commit_hash[:7], len(tracked))
        return commit
