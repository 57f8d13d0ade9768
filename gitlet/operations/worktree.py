"""Working directory operations: checkout, reset and status."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from gitlet.core.errors import PreconditionError, UntrackedFileError
from gitlet.core.hash import hash_file
from gitlet.core.objects import Commit

logger = logging.getLogger(__name__)


@dataclass
class StatusReport:
    """Snapshot of repository state as shown by the status command."""
    current_branch: str
    branches: List[str] = field(default_factory=list)
    staged: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    modified: List[Tuple[str, str]] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.removed or self.modified or self.untracked)


class WorkTree:
    """
    Moves files between commits and the working directory.

    Every operation that overwrites or deletes working files checks for
    untracked files in the way before touching anything.
    """

    def __init__(self, repo):
        """
        Initialize work tree.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.root = repo.work_tree

    def files(self) -> Dict[str, Path]:
        """
        Get all files in the working directory.

        Hidden files and directories (including .gitlet) are skipped.

        Returns:
            Dict mapping repository-relative paths to absolute paths
        """
        files = {}
        for path in self.root.rglob('*'):
            rel_path = path.relative_to(self.root)
            if any(part.startswith('.') for part in rel_path.parts):
                continue
            if path.is_file():
                files[rel_path.as_posix()] = path
        return files

    def content_hash(self, path: str) -> Optional[str]:
        """Blob hash of the working copy of path, or None if it is absent."""
        file_path = self.root / path
        if not file_path.is_file():
            return None
        return hash_file(file_path)

    def write_file(self, path: str, blob_hash: str) -> None:
        """Overwrite the working copy of path with a stored blob."""
        file_path = self.root / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(self.repo.read_blob(blob_hash).data)

    def delete_file(self, path: str) -> None:
        """Delete the working copy of path if present."""
        file_path = self.root / path
        if file_path.is_file():
            file_path.unlink()

    def check_untracked(self, target: Commit) -> None:
        """
        Refuse to continue if target would clobber an untracked file.

        A file is in the way when target tracks it, the head commit does
        not, and its content differs from target's. Staged but uncommitted
        files count as untracked.

        Args:
            target: Commit about to be written to the working directory

        Raises:
            UntrackedFileError: For the first offending path
        """
        head = self.repo.head_commit()

        for path in sorted(target.tracked):
            if head.blob_for(path) is not None:
                continue
            current = self.content_hash(path)
            if current is not None and current != target.blob_for(path):
                raise UntrackedFileError(path)

    def restore(self, target: Commit) -> None:
        """
        Make the working directory match target and clear the stage.

        Files tracked by the head commit but not by target are deleted;
        every file target tracks is written.

        Args:
            target: Commit to restore
        """
        self.check_untracked(target)
        head = self.repo.head_commit()

        for path in head.tracked:
            if target.blob_for(path) is None:
                self.delete_file(path)

        for path, blob_hash in target.tracked.items():
            self.write_file(path, blob_hash)

        self.repo.stage.clear()
        logger.debug("restored working tree to %s", target.hash[:7])

    def checkout_file(self, commit: Commit, path: str) -> None:
        """
        Overwrite one working file with its version in commit.

        The file is not staged.

        Raises:
            PreconditionError: If commit does not track path
        """
        blob_hash = commit.blob_for(path)
        if blob_hash is None:
            raise PreconditionError("File does not exist in that commit.")
        self.write_file(path, blob_hash)

    def checkout_branch(self, name: str) -> None:
        """
        Switch to another branch.

        Args:
            name: Local or remote-tracking branch name

        Raises:
            PreconditionError: If the branch is missing or already checked out
            UntrackedFileError: If an untracked file would be overwritten
        """
        refs = self.repo.refs
        if not refs.branch_exists(name):
            raise PreconditionError("No such branch exists.")
        if name == refs.current_branch():
            raise PreconditionError("No need to checkout the current branch.")

        self.restore(self.repo.graph.get(refs.read_ref(name)))
        refs.set_head(name)

    def reset(self, prefix: str) -> Commit:
        """
        Check out a commit and move the current branch to it.

        Args:
            prefix: Full or abbreviated commit hash

        Returns:
            Commit: The commit reset to
        """
        commit = self.repo.graph.resolve(prefix)
        self.restore(commit)
        self.repo.refs.advance(self.repo.refs.current_branch(), commit.hash)
        return commit

    def status(self) -> StatusReport:
        """
        Compare head commit, staging area and working directory.

        Returns:
            StatusReport with every section sorted
        """
        refs = self.repo.refs
        stage = self.repo.stage
        head = self.repo.head_commit()
        working = {path: hash_file(full) for path, full in self.files().items()}

        modified = {}
        for path, blob_hash in head.tracked.items():
            if stage.is_staged(path) or stage.is_removed(path):
                continue
            if path not in working:
                modified[path] = 'deleted'
            elif working[path] != blob_hash:
                modified[path] = 'modified'

        for path, blob_hash in stage.staged.items():
            if path not in working:
                modified[path] = 'deleted'
            elif working[path] != blob_hash:
                modified[path] = 'modified'

        untracked = [
            path for path in working
            if (head.blob_for(path) is None and not stage.is_staged(path))
            or stage.is_removed(path)
        ]

        return StatusReport(
            current_branch=refs.current_branch(),
            branches=refs.list_branches(),
            staged=sorted(stage.staged),
            removed=sorted(stage.removed),
            modified=sorted(modified.items()),
            untracked=sorted(untracked),
        )
