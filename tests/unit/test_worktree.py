"""Unit tests for checkout, reset and status."""

import pytest
from gitlet.core.errors import (
    CommitNotFoundError,
    PreconditionError,
    UntrackedFileError,
)
from tests.conftest import make_commit, write_file


def read(repo, path):
    return (repo.work_tree / path).read_text()


def test_files_skips_hidden(repo):
    write_file(repo, 'a.txt', 'a')
    write_file(repo, 'dir/b.txt', 'b')
    write_file(repo, '.hidden/c.txt', 'c')
    assert set(repo.worktree.files()) == {'a.txt', 'dir/b.txt'}


def test_checkout_file_from_head(repo_with_commits):
    repo = repo_with_commits
    write_file(repo, 'file1.txt', 'scribbled\n')
    repo.worktree.checkout_file(repo.head_commit(), 'file1.txt')

    assert read(repo, 'file1.txt') == 'Hello, World!\n'
    # Checking out a file does not stage it
    assert repo.stage.is_empty()


def test_checkout_file_from_older_commit(repo_with_commits):
    repo = repo_with_commits
    first = repo.head_commit()
    write_file(repo, 'file1.txt', 'v2\n')
    make_commit(repo, 'v2', 'file1.txt')

    repo.worktree.checkout_file(first, 'file1.txt')
    assert read(repo, 'file1.txt') == 'Hello, World!\n'


def test_checkout_file_not_in_commit(repo):
    with pytest.raises(PreconditionError) as exc:
        repo.worktree.checkout_file(repo.head_commit(), 'nope.txt')
    assert exc.value.message == "File does not exist in that commit."


def test_checkout_branch_swaps_files(repo_with_commits):
    repo = repo_with_commits
    repo.refs.create_branch('feature', repo.refs.resolve_head())
    repo.worktree.checkout_branch('feature')

    write_file(repo, 'feature.txt', 'feature\n')
    repo.snapshot.remove('file1.txt')
    make_commit(repo, 'Feature work', 'feature.txt')

    repo.worktree.checkout_branch('master')
    assert repo.refs.current_branch() == 'master'
    assert read(repo, 'file1.txt') == 'Hello, World!\n'
    assert not (repo.work_tree / 'feature.txt').exists()

    repo.worktree.checkout_branch('feature')
    assert read(repo, 'feature.txt') == 'feature\n'
    assert not (repo.work_tree / 'file1.txt').exists()


def test_checkout_branch_errors(repo):
    with pytest.raises(PreconditionError, match="No such branch exists."):
        repo.worktree.checkout_branch('ghost')
    with pytest.raises(PreconditionError, match="No need to checkout the current branch."):
        repo.worktree.checkout_branch('master')


def test_checkout_branch_clears_stage(repo_with_commits):
    repo = repo_with_commits
    repo.refs.create_branch('feature', repo.refs.resolve_head())
    write_file(repo, 'file2.txt', 'staged\n')
    repo.snapshot.add('file2.txt')

    repo.worktree.checkout_branch('feature')
    assert repo.stage.is_empty()


def test_untracked_file_blocks_checkout(repo):
    base = repo.refs.resolve_head()
    repo.refs.create_branch('other', base)
    repo.worktree.checkout_branch('other')
    write_file(repo, 'shared.txt', 'committed\n')
    make_commit(repo, 'Add shared', 'shared.txt')
    repo.worktree.checkout_branch('master')

    write_file(repo, 'shared.txt', 'local scribbles\n')
    with pytest.raises(UntrackedFileError) as exc:
        repo.worktree.checkout_branch('other')

    assert exc.value.path == 'shared.txt'
    assert repo.refs.current_branch() == 'master'
    assert read(repo, 'shared.txt') == 'local scribbles\n'


def test_identical_untracked_file_does_not_block(repo):
    repo.refs.create_branch('other', repo.refs.resolve_head())
    repo.worktree.checkout_branch('other')
    write_file(repo, 'shared.txt', 'same\n')
    make_commit(repo, 'Add shared', 'shared.txt')
    repo.worktree.checkout_branch('master')

    write_file(repo, 'shared.txt', 'same\n')
    repo.worktree.checkout_branch('other')
    assert repo.refs.current_branch() == 'other'


def test_reset(repo_with_commits):
    repo = repo_with_commits
    second = repo.head_commit()
    first = repo.graph.get(second.parents[0])

    commit = repo.worktree.reset(first.hash[:8])

    assert commit.hash == first.hash
    assert repo.refs.resolve_head() == first.hash
    assert repo.refs.current_branch() == 'master'
    assert not (repo.work_tree / 'file2.txt').exists()
    # The later commit is still reachable by id
    assert repo.graph.resolve(second.hash).hash == second.hash


def test_reset_unknown_commit(repo):
    with pytest.raises(CommitNotFoundError):
        repo.worktree.reset('abcdef0123')


def test_status_clean(repo_with_commits):
    report = repo_with_commits.worktree.status()
    assert report.current_branch == 'master'
    assert report.branches == ['master']
    assert report.is_clean


def test_status_sections(repo_with_commits):
    repo = repo_with_commits
    repo.refs.create_branch('feature', repo.refs.resolve_head())

    write_file(repo, 'staged.txt', 'new\n')
    repo.snapshot.add('staged.txt')
    repo.snapshot.remove('file2.txt')
    write_file(repo, 'file1.txt', 'edited\n')
    write_file(repo, 'loose.txt', 'untracked\n')

    report = repo.worktree.status()
    assert report.branches == ['feature', 'master']
    assert report.staged == ['staged.txt']
    assert report.removed == ['file2.txt']
    assert report.modified == [('file1.txt', 'modified')]
    assert report.untracked == ['loose.txt']


def test_status_deleted_and_staged_modified(repo_with_commits):
    repo = repo_with_commits
    (repo.work_tree / 'file1.txt').unlink()
    write_file(repo, 'file2.txt', 'staged version\n')
    repo.snapshot.add('file2.txt')
    write_file(repo, 'file2.txt', 'changed again\n')

    report = repo.worktree.status()
    assert report.modified == [('file1.txt', 'deleted'), ('file2.txt', 'modified')]


def test_status_removed_file_recreated_is_untracked(repo_with_commits):
    repo = repo_with_commits
    repo.snapshot.remove('file1.txt')
    write_file(repo, 'file1.txt', 'back again\n')

    report = repo.worktree.status()
    assert report.removed == ['file1.txt']
    assert report.untracked == ['file1.txt']


def test_staged_new_file_blocks_checkout(repo):
    """A staged file the head commit doesn't track is still untracked."""
    repo.refs.create_branch('other', repo.refs.resolve_head())
    repo.worktree.checkout_branch('other')
    write_file(repo, 'f.txt', 'theirs\n')
    make_commit(repo, 'Add f', 'f.txt')
    repo.worktree.checkout_branch('master')

    write_file(repo, 'f.txt', 'my staged work\n')
    repo.snapshot.add('f.txt')

    with pytest.raises(UntrackedFileError) as exc:
        repo.worktree.checkout_branch('other')

    assert exc.value.path == 'f.txt'
    assert read(repo, 'f.txt') == 'my staged work\n'
    assert repo.stage.is_staged('f.txt')
    assert repo.refs.current_branch() == 'master'


def test_staged_new_file_blocks_reset(repo):
    repo.refs.create_branch('other', repo.refs.resolve_head())
    repo.worktree.checkout_branch('other')
    write_file(repo, 'f.txt', 'theirs\n')
    target = make_commit(repo, 'Add f', 'f.txt')
    repo.worktree.checkout_branch('master')
    master_tip = repo.refs.resolve_head()

    write_file(repo, 'f.txt', 'my staged work\n')
    repo.snapshot.add('f.txt')

    with pytest.raises(UntrackedFileError):
        repo.worktree.reset(target.hash)

    assert read(repo, 'f.txt') == 'my staged work\n'
    assert repo.refs.resolve_head() == master_tip
