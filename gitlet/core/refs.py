"""Reference management for Gitlet."""

import logging
from pathlib import Path
from typing import List, Optional

from gitlet.core.errors import PreconditionError

logger = logging.getLogger(__name__)


class RefManager:
    """
    Manages branch references and HEAD.

    Handles:
    - Local branches (refs/heads/<branch>)
    - Remote-tracking branches (refs/remotes/<remote>/<branch>),
      addressed as '<remote>/<branch>'
    - HEAD, which names the checked-out branch
    """

    def __init__(self, repo):
        """
        Initialize reference manager.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.heads_dir = repo.heads_dir
        self.remote_refs_dir = repo.remote_refs_dir
        self.head_file = repo.head_file

    def _ref_path(self, name: str) -> Path:
        """
        Map a branch name to its ref file.

        Local branches shadow remote-tracking ones; a name containing '/'
        that is not a local branch is read as '<remote>/<branch>'.
        """
        local = self.heads_dir / name
        if '/' not in name or local.is_file():
            return local
        remote, branch = name.split('/', 1)
        return self.remote_refs_dir / remote / branch

    def read_ref(self, name: str) -> Optional[str]:
        """
        Read a branch and return its commit hash.

        Args:
            name: Branch name ('master') or remote-tracking name ('origin/master')

        Returns:
            Commit hash or None if the branch doesn't exist
        """
        ref_path = self._ref_path(name)
        if ref_path.is_file():
            return ref_path.read_text().strip()
        return None

    def branch_exists(self, name: str) -> bool:
        return self._ref_path(name).is_file()

    def current_branch(self) -> str:
        """
        Get the checked-out branch name.

        Returns:
            Branch name stored in HEAD
        """
        return self.head_file.read_text().strip()

    def resolve_head(self) -> str:
        """
        Resolve HEAD to a commit hash.

        Returns:
            Commit hash of the checked-out branch
        """
        commit_hash = self.read_ref(self.current_branch())
        if commit_hash is None:
            raise PreconditionError(f"HEAD points to missing branch {self.current_branch()}.")
        return commit_hash

    def set_head(self, name: str) -> None:
        """
        Point HEAD at a branch.

        Args:
            name: Existing branch name
        """
        if not self.branch_exists(name):
            raise PreconditionError("No such branch exists.")
        self.head_file.write_text(name + '\n')
        logger.debug("HEAD -> %s", name)

    def advance(self, name: str, commit_hash: str) -> None:
        """
        Move a branch to a commit, creating the ref file if needed.

        Args:
            name: Branch name
            commit_hash: Commit hash to point to
        """
        ref_path = self._ref_path(name)
        ref_path.parent.mkdir(parents=True, exist_ok=True)
        ref_path.write_text(commit_hash + '\n')
        logger.debug("branch %s -> %s", name, commit_hash)

    def create_branch(self, name: str, commit_hash: str) -> None:
        """
        Create a new local branch.

        Args:
            name: Branch name
            commit_hash: Commit hash to point to

        Raises:
            PreconditionError: If the branch exists or the name is invalid
        """
        if self.branch_exists(name) or (self.heads_dir / name).exists():
            raise PreconditionError("A branch with that name already exists.")
        if not name or '/' in name or name.startswith('.'):
            raise PreconditionError(f"Invalid branch name: {name}")
        self.advance(name, commit_hash)

    def delete_branch(self, name: str) -> None:
        """
        Delete a branch pointer (commits are kept).

        Args:
            name: Branch name

        Raises:
            PreconditionError: If the branch is missing or checked out
        """
        # Only local branches; remote-tracking refs are left to fetch
        ref_path = self.heads_dir / name
        if '/' in name or not ref_path.is_file():
            raise PreconditionError("A branch with that name does not exist.")
        if name == self.current_branch():
            raise PreconditionError("Cannot remove the current branch.")
        ref_path.unlink()
        logger.debug("deleted branch %s", name)

    def update_remote_branch(self, remote: str, branch: str, commit_hash: str) -> None:
        """
        Create or move the remote-tracking ref '<remote>/<branch>'.

        Args:
            remote: Remote name
            branch: Branch name on the remote
            commit_hash: Commit the remote branch points to
        """
        ref_path = self.remote_refs_dir / remote / branch
        ref_path.parent.mkdir(parents=True, exist_ok=True)
        ref_path.write_text(commit_hash + '\n')
        logger.debug("remote-tracking %s/%s -> %s", remote, branch, commit_hash)

    def list_local_branches(self) -> List[str]:
        if not self.heads_dir.exists():
            return []
        return sorted(p.name for p in self.heads_dir.iterdir() if p.is_file())

    def list_remote_branches(self) -> List[str]:
        """Remote-tracking branches as '<remote>/<branch>' names."""
        if not self.remote_refs_dir.exists():
            return []

        branches = []
        for remote_dir in self.remote_refs_dir.iterdir():
            if remote_dir.is_dir():
                for branch_file in remote_dir.iterdir():
                    if branch_file.is_file():
                        branches.append(f"{remote_dir.name}/{branch_file.name}")
        return sorted(branches)

    def list_branches(self) -> List[str]:
        """
        List all branches.

        Returns:
            Local branch names followed by remote-tracking names, each sorted
        """
        return self.list_local_branches() + self.list_remote_branches()
