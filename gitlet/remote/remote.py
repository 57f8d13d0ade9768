"""Remote repository operations for Gitlet."""

import logging
from pathlib import Path
from typing import Dict, Optional

from gitlet.core.errors import RemoteError
from gitlet.core.repository import Repository

logger = logging.getLogger(__name__)


class RemoteManager:
    """
    Manages remote repository operations.

    A remote is another Gitlet repository on the local filesystem.
    Objects move by copying their stored files, so hashes are preserved.
    """

    def __init__(self, repo: Repository):
        """Initialize remote manager."""
        self.repo = repo
        self.remotes_dir = repo.remotes_dir

    def add_remote(self, name: str, path: str) -> None:
        """
        Add a remote repository.

        Args:
            name: Remote name (e.g., 'origin')
            path: Path to the remote's .gitlet directory or its parent

        Raises:
            RemoteError: If a remote with that name exists
        """
        remote_file = self.remotes_dir / name
        if remote_file.exists():
            raise RemoteError("A remote with that name already exists.")
        if not name or '/' in name:
            raise RemoteError(f"Invalid remote name: {name}")

        self.remotes_dir.mkdir(parents=True, exist_ok=True)
        remote_file.write_text(path + '\n')
        logger.debug("added remote %s at %s", name, path)

    def remove_remote(self, name: str) -> None:
        """
        Remove a remote.

        Remote-tracking branches already fetched are kept.

        Raises:
            RemoteError: If no remote has that name
        """
        remote_file = self.remotes_dir / name
        if not remote_file.is_file():
            raise RemoteError("A remote with that name does not exist.")
        remote_file.unlink()
        logger.debug("removed remote %s", name)

    def list_remotes(self) -> Dict[str, str]:
        """
        List all configured remotes.

        Returns:
            Dict mapping remote names to paths
        """
        if not self.remotes_dir.exists():
            return {}
        return {
            remote_file.name: remote_file.read_text().strip()
            for remote_file in sorted(self.remotes_dir.iterdir())
            if remote_file.is_file()
        }

    def get_remote_path(self, name: str) -> Optional[str]:
        """Get the configured path for a remote."""
        return self.list_remotes().get(name)

    def open_remote(self, name: str) -> Repository:
        """
        Open the repository a remote points to.

        Relative paths resolve against the local repository root.

        Raises:
            RemoteError: If the remote is unknown or its directory is missing
        """
        path = self.get_remote_path(name)
        if path is None:
            raise RemoteError("A remote with that name does not exist.")

        location = Path(path)
        if not location.is_absolute():
            location = self.repo.work_tree / location
        location = location.resolve()

        if location.name == '.gitlet':
            location = location.parent

        remote_repo = Repository(str(location))
        if not remote_repo.is_initialized():
            raise RemoteError("Remote directory not found.")
        return remote_repo

    def _transfer(self, source: Repository, dest: Repository, tip: str) -> int:
        """
        Copy every commit reachable from tip, and its blobs, into dest.

        Blobs are copied before the commit that references them.

        Returns:
            Number of commits copied
        """
        copied = 0
        for commit_hash in source.graph.ancestors_of(tip):
            if dest.object_exists('commit', commit_hash):
                continue
            commit = source.graph.get(commit_hash)
            for blob_hash in set(commit.tracked.values()):
                source.copy_object_to(dest, 'blob', blob_hash)
            source.copy_object_to(dest, 'commit', commit_hash)
            copied += 1

        logger.debug("copied %d commit(s) from %s to %s", copied, source, dest)
        return copied

    def push(self, remote_name: str, branch: str) -> str:
        """
        Push the current head commit to a remote branch.

        The remote branch must be an ancestor of the local head (or absent).
        Missing objects are copied, then the remote branch is advanced.

        Args:
            remote_name: Name of remote to push to
            branch: Branch on the remote to update

        Returns:
            str: Commit hash the remote branch now points to

        Raises:
            RemoteError: If the remote is missing or the push is not a
                fast-forward
        """
        if not branch or '/' in branch:
            raise RemoteError(f"Invalid branch name: {branch}")

        remote_repo = self.open_remote(remote_name)
        local_head = self.repo.refs.resolve_head()

        remote_tip = remote_repo.refs.read_ref(branch)
        if remote_tip is not None and remote_tip not in self.repo.graph.ancestors_of(local_head):
            raise RemoteError("Please pull down remote changes before pushing.")

        self._transfer(self.repo, remote_repo, local_head)
        remote_repo.refs.advance(branch, local_head)
        return local_head

    def fetch(self, remote_name: str, branch: str) -> str:
        """
        Fetch a remote branch into its remote-tracking branch.

        Does NOT modify the working directory, the stage or local branches.

        Args:
            remote_name: Name of remote to fetch from
            branch: Branch on the remote

        Returns:
            str: Commit hash of the remote branch

        Raises:
            RemoteError: If the remote or the branch is missing
        """
        remote_repo = self.open_remote(remote_name)

        remote_tip = remote_repo.refs.read_ref(branch)
        if remote_tip is None or '/' in branch:
            raise RemoteError("That remote does not have that branch.")

        self._transfer(remote_repo, self.repo, remote_tip)
        self.repo.refs.update_remote_branch(remote_name, branch, remote_tip)
        return remote_tip

    def pull(self, remote_name: str, branch: str):
        """
        Fetch a remote branch and merge it into the current branch.

        Returns:
            MergeResult from merging '<remote>/<branch>'
        """
        self.fetch(remote_name, branch)
        return self.repo.merge.merge(f"{remote_name}/{branch}")
