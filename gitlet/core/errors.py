"""Gitlet error types.

Every failure a user can trigger is a ``GitletError`` whose message is the
exact text printed by the command line.
"""


class GitletError(Exception):
    """Base class for all user-facing Gitlet failures."""

    default_message = "Gitlet operation failed."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class PreconditionError(GitletError):
    """A command cannot run in the current repository state."""


class NotInitializedError(PreconditionError):
    default_message = "Not in an initialized Gitlet directory."


class RepositoryExistsError(PreconditionError):
    default_message = "A Gitlet version-control system already exists in the current directory."


class UntrackedFileError(GitletError):
    """An untracked working file would be overwritten.

    Raised before any file is touched, so the caller can recover by
    deleting or committing the file.
    """

    default_message = (
        "There is an untracked file in the way; delete it, or add and commit it first."
    )

    def __init__(self, path: str = None):
        self.path = path
        super().__init__()


class CommitLookupError(GitletError):
    """A commit id or abbreviation could not be resolved to one commit."""


class CommitNotFoundError(CommitLookupError):
    default_message = "No commit with that id exists."


class AmbiguousCommitError(CommitLookupError):
    """The abbreviation matches more than one commit, or is too short."""

    default_message = "Ambiguous commit id."

    def __init__(self, prefix: str, matches=None, message: str = None):
        self.prefix = prefix
        self.matches = sorted(matches or [])
        super().__init__(message)


class ObjectNotFoundError(GitletError):
    """Raised when an object is missing from the object store."""

    def __init__(self, obj_type: str, obj_hash: str):
        self.obj_type = obj_type
        self.obj_hash = obj_hash
        super().__init__(f"No {obj_type} with id {obj_hash} exists.")


class CorruptObjectError(GitletError):
    """Raised when stored data fails its header, size or checksum check."""


class RemoteError(PreconditionError):
    """A remote is missing, unreachable, or refuses the update."""
