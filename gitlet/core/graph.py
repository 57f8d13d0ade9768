"""Commit graph queries: lookup, ancestry and split points."""

import logging
from typing import Iterator, List, Optional, Set

from gitlet.core.errors import AmbiguousCommitError, CommitNotFoundError
from gitlet.core.hash import HASH_LENGTH
from gitlet.core.objects import Commit

logger = logging.getLogger(__name__)

HEX_DIGITS = set('0123456789abcdef')


class CommitGraph:
    """
    The history DAG formed by stored commits and their parent links.

    All traversals are iterative and visit each commit once, so shared
    ancestors of merge commits are not walked twice.
    """

    MIN_PREFIX_LENGTH = 6

    def __init__(self, repo):
        """
        Initialize commit graph.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def get(self, commit_hash: str) -> Commit:
        """
        Load a commit by full hash.

        Raises:
            CommitNotFoundError: If no such commit is stored
        """
        if len(commit_hash) != HASH_LENGTH or not self.repo.object_exists('commit', commit_hash):
            raise CommitNotFoundError()
        return self.repo.read_object('commit', commit_hash)

    def all_commit_ids(self) -> Iterator[str]:
        """Yield the hash of every stored commit."""
        if not self.repo.commits_dir.exists():
            return
        for subdir in sorted(self.repo.commits_dir.iterdir()):
            if subdir.is_dir() and len(subdir.name) == 2:
                for commit_file in sorted(subdir.iterdir()):
                    yield subdir.name + commit_file.name

    def all_commits(self) -> Iterator[Commit]:
        for commit_hash in self.all_commit_ids():
            yield self.repo.read_object('commit', commit_hash)

    def resolve(self, prefix: str) -> Commit:
        """
        Find the commit whose hash starts with prefix.

        Args:
            prefix: Full hash or abbreviation of at least 6 characters

        Returns:
            Commit: The single matching commit

        Raises:
            CommitNotFoundError: If nothing matches
            AmbiguousCommitError: If the prefix is too short or matches
                several commits
        """
        prefix = prefix.lower()
        if not prefix or not set(prefix) <= HEX_DIGITS:
            raise CommitNotFoundError()
        if len(prefix) < self.MIN_PREFIX_LENGTH:
            raise AmbiguousCommitError(prefix, message="Commit id is too short.")

        subdir = self.repo.commits_dir / prefix[:2]
        matches = []
        if subdir.is_dir():
            for commit_file in subdir.iterdir():
                commit_hash = prefix[:2] + commit_file.name
                if commit_hash.startswith(prefix):
                    matches.append(commit_hash)

        if not matches:
            raise CommitNotFoundError()
        if len(matches) > 1:
            raise AmbiguousCommitError(prefix, matches)
        return self.repo.read_object('commit', matches[0])

    def ancestors_of(self, commit_hash: str) -> Set[str]:
        """
        Get all ancestors of a commit, following every parent edge.

        Args:
            commit_hash: Starting commit hash

        Returns:
            Set of ancestor commit hashes (including the commit itself)
        """
        ancestors = set()
        to_visit = [commit_hash]

        while to_visit:
            current = to_visit.pop()
            if current in ancestors:
                continue
            ancestors.add(current)
            to_visit.extend(self.get(current).parents)

        return ancestors

    def ancestor_order(self, commit_hash: str) -> List[str]:
        """
        Ancestors in first-parent-priority depth-first preorder.

        Args:
            commit_hash: Starting commit hash

        Returns:
            List of hashes starting with commit_hash itself
        """
        order = []
        visited = set()
        stack = [commit_hash]

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            order.append(current)
            # Reversed so the first parent is popped next
            stack.extend(reversed(self.get(current).parents))

        return order

    def first_parent_chain(self, commit_hash: str) -> Iterator[Commit]:
        """
        Walk history following only the first parent, ending at the root.

        Args:
            commit_hash: Starting commit hash

        Yields:
            Commit objects, newest first
        """
        current: Optional[str] = commit_hash
        while current is not None:
            commit = self.get(current)
            yield commit
            current = commit.parents[0] if commit.parents else None

    def is_ancestor(self, ancestor_hash: str, descendant_hash: str) -> bool:
        """True if ancestor_hash is descendant_hash or one of its ancestors."""
        return ancestor_hash in self.ancestors_of(descendant_hash)

    def split_point(self, current_hash: str, target_hash: str) -> Optional[str]:
        """
        Find the lowest common ancestor of two commits.

        Common ancestors that are themselves ancestors of another common
        ancestor are discarded. If several lowest ones remain, the first in
        first-parent-priority depth-first order from current wins.

        Args:
            current_hash: Tip of the checked-out branch
            target_hash: Tip of the branch being merged

        Returns:
            Hash of the split point, or None for disjoint histories
        """
        common = self.ancestors_of(current_hash) & self.ancestors_of(target_hash)
        if not common:
            return None

        # Everything strictly above some common ancestor is not lowest
        dominated = set()
        to_visit = [parent for c in common for parent in self.get(c).parents]
        while to_visit:
            current = to_visit.pop()
            if current in dominated:
                continue
            dominated.add(current)
            to_visit.extend(self.get(current).parents)

        for candidate in self.ancestor_order(current_hash):
            if candidate in common and candidate not in dominated:
                logger.debug(
                    "split point of %s and %s is %s",
                    current_hash[:7], target_hash[:7], candidate[:7],
                )
                return candidate

        return None
