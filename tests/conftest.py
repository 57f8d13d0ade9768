"""Shared pytest fixtures for Gitlet tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from gitlet.core.repository import Repository
from gitlet.core.objects import Blob, Commit


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def make_repo():
    """Factory for extra repositories outside the main one (for remote tests)."""
    root = Path(tempfile.mkdtemp()).resolve()

    def _make(name):
        path = root / name
        path.mkdir()
        return Repository(str(path)).init()

    yield _make
    shutil.rmtree(root, ignore_errors=True)


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob(b"Hello, World!\n")


@pytest.fixture
def sample_commit(repo, sample_blob):
    """Commit tracking one file, child of the initial commit."""
    blob_hash = repo.write_object(sample_blob)
    return Commit.create(
        message="Test commit",
        parents=[repo.refs.resolve_head()],
        tracked={'test.txt': blob_hash},
        timestamp=1700000000,
        timezone='+0000'
    )


@pytest.fixture
def repo_with_commits(repo):
    """Repository with two commits on master after the initial one."""
    write_file(repo, 'file1.txt', 'Hello, World!\n')
    make_commit(repo, 'First commit', 'file1.txt')

    write_file(repo, 'file2.txt', 'Second file\n')
    make_commit(repo, 'Second commit', 'file2.txt')
    return repo


def write_file(repo, path, content):
    """Write text content to a working file, creating directories."""
    full_path = repo.work_tree / path
    full_path.parent.mkdir(parents=True, exist_ok=True)
    full_path.write_text(content)
    return full_path


def make_commit(repo, message="Test commit", *paths):
    """
    Helper function to stage the given paths and commit.

    Args:
        repo: Repository instance
        message: Commit message
        paths: Repository-relative paths to add first

    Returns:
        Commit: The new commit
    """
    for path in paths:
        repo.snapshot.add(path)
    return repo.snapshot.commit(message)
