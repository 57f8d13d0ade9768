"""Unit tests for merge operations."""

import pytest
from gitlet.core.errors import PreconditionError, UntrackedFileError
from gitlet.core.objects import Commit
from gitlet.operations.merge import (
    FileAction,
    MergeEngine,
    MergeKind,
    classify,
    generate_conflict_markers,
)
from tests.conftest import make_commit, write_file

S, C, T = 's' * 40, 'c' * 40, 't' * 40


def test_merge_engine_initialization(repo):
    """Test MergeEngine initialization."""
    engine = repo.merge
    assert isinstance(engine, MergeEngine)
    assert engine.repo == repo


@pytest.mark.parametrize('split, current, target, expected', [
    (S, S, S, FileAction.KEEP),
    (S, S, T, FileAction.TAKE_TARGET),
    (S, C, S, FileAction.KEEP),
    (S, C, C, FileAction.KEEP),
    (S, C, T, FileAction.CONFLICT),
    (None, None, T, FileAction.TAKE_TARGET),
    (None, C, None, FileAction.KEEP),
    (None, C, T, FileAction.CONFLICT),
    (S, S, None, FileAction.DELETE),
    (S, None, S, FileAction.KEEP),
    (S, None, None, FileAction.KEEP),
    (S, C, None, FileAction.CONFLICT),
    (S, None, T, FileAction.CONFLICT),
])
def test_classify(split, current, target, expected):
    assert classify(split, current, target) is expected


def test_conflict_markers_both_sides():
    content = generate_conflict_markers(b'ours\n', b'theirs\n')
    assert content == b'<<<<<<< HEAD\nours\n=======\ntheirs\n>>>>>>>\n'


def test_conflict_markers_missing_newline():
    content = generate_conflict_markers(b'ours', b'theirs')
    assert content == b'<<<<<<< HEAD\nours\n=======\ntheirs\n>>>>>>>\n'


def test_conflict_markers_deleted_side():
    content = generate_conflict_markers(None, b'theirs\n')
    assert content == b'<<<<<<< HEAD\n=======\ntheirs\n>>>>>>>\n'


@pytest.fixture
def diverged(repo):
    """
    master and feature diverged from a commit tracking a.txt, b.txt and c.txt.

    master: edits a.txt, removes c.txt
    feature: edits b.txt, adds d.txt
    """
    write_file(repo, 'a.txt', 'a\n')
    write_file(repo, 'b.txt', 'b\n')
    write_file(repo, 'c.txt', 'c\n')
    make_commit(repo, 'Base', 'a.txt', 'b.txt', 'c.txt')
    repo.refs.create_branch('feature', repo.refs.resolve_head())

    write_file(repo, 'a.txt', 'a on master\n')
    repo.snapshot.add('a.txt')
    repo.snapshot.remove('c.txt')
    repo.snapshot.commit('Master work')

    repo.worktree.checkout_branch('feature')
    write_file(repo, 'b.txt', 'b on feature\n')
    write_file(repo, 'd.txt', 'd\n')
    make_commit(repo, 'Feature work', 'b.txt', 'd.txt')

    repo.worktree.checkout_branch('master')
    return repo


def read(repo, path):
    return (repo.work_tree / path).read_text()


def test_three_way_merge(diverged):
    repo = diverged
    master_tip = repo.refs.resolve_head()
    feature_tip = repo.refs.read_ref('feature')

    result = repo.merge.merge('feature')

    assert result.kind is MergeKind.MERGED
    assert not result.has_conflicts
    assert read(repo, 'a.txt') == 'a on master\n'
    assert read(repo, 'b.txt') == 'b on feature\n'
    assert read(repo, 'd.txt') == 'd\n'
    assert not (repo.work_tree / 'c.txt').exists()

    commit = repo.head_commit()
    assert commit.hash == result.commit_hash
    assert commit.parents == [master_tip, feature_tip]
    assert commit.message == 'Merged feature into master.'
    assert set(commit.tracked) == {'a.txt', 'b.txt', 'd.txt'}
    assert repo.stage.is_empty()


def test_merge_conflict(diverged):
    repo = diverged
    repo.worktree.checkout_branch('feature')
    write_file(repo, 'a.txt', 'a on feature\n')
    make_commit(repo, 'Conflicting edit', 'a.txt')
    repo.worktree.checkout_branch('master')

    result = repo.merge.merge('feature')

    assert result.kind is MergeKind.MERGED
    assert result.conflicts == ['a.txt']
    assert result.message == "Encountered a merge conflict."
    expected = '<<<<<<< HEAD\na on master\n=======\na on feature\n>>>>>>>\n'
    assert read(repo, 'a.txt') == expected
    # The conflicted content is committed as-is
    head = repo.head_commit()
    assert head.is_merge
    assert repo.read_blob(head.tracked['a.txt']).data == expected.encode()


def test_merge_conflict_modified_vs_deleted(diverged):
    repo = diverged
    repo.worktree.checkout_branch('feature')
    write_file(repo, 'c.txt', 'c on feature\n')
    make_commit(repo, 'Edit c', 'c.txt')
    repo.worktree.checkout_branch('master')

    result = repo.merge.merge('feature')
    assert result.conflicts == ['c.txt']
    assert read(repo, 'c.txt') == '<<<<<<< HEAD\n=======\nc on feature\n>>>>>>>\n'


def test_merge_fast_forward(repo_with_commits):
    repo = repo_with_commits
    repo.refs.create_branch('feature', repo.refs.resolve_head())
    repo.worktree.checkout_branch('feature')
    write_file(repo, 'new.txt', 'new\n')
    tip = make_commit(repo, 'Ahead', 'new.txt')
    repo.worktree.checkout_branch('master')

    result = repo.merge.merge('feature')

    assert result.kind is MergeKind.FAST_FORWARD
    assert result.message == "Current branch fast-forwarded."
    assert repo.refs.resolve_head() == tip.hash
    assert read(repo, 'new.txt') == 'new\n'


def test_merge_ancestor(repo_with_commits):
    repo = repo_with_commits
    second = repo.head_commit()
    repo.refs.create_branch('old', second.parents[0])

    result = repo.merge.merge('old')

    assert result.kind is MergeKind.UP_TO_DATE
    assert result.message == "Given branch is an ancestor of the current branch."
    assert repo.refs.resolve_head() == second.hash


def test_merge_preconditions(repo_with_commits):
    repo = repo_with_commits
    with pytest.raises(PreconditionError, match="A branch with that name does not exist."):
        repo.merge.merge('ghost')
    with pytest.raises(PreconditionError, match="Cannot merge a branch with itself."):
        repo.merge.merge('master')

    repo.refs.create_branch('feature', repo.refs.resolve_head())
    write_file(repo, 'file1.txt', 'dirty\n')
    repo.snapshot.add('file1.txt')
    with pytest.raises(PreconditionError, match="You have uncommitted changes."):
        repo.merge.merge('feature')


def test_merge_untracked_in_the_way(diverged):
    repo = diverged
    write_file(repo, 'd.txt', 'mine\n')
    before = repo.refs.resolve_head()

    with pytest.raises(UntrackedFileError):
        repo.merge.merge('feature')

    assert repo.refs.resolve_head() == before
    assert read(repo, 'd.txt') == 'mine\n'
    assert read(repo, 'b.txt') == 'b\n'


def test_merge_disjoint_histories(repo):
    """Branches with no shared commit cannot be merged."""
    orphan = Commit.create('orphan root', [], {}, timestamp=5, timezone='+0000')
    repo.refs.create_branch('orphan', repo.write_object(orphan))

    with pytest.raises(PreconditionError, match="no common ancestor"):
        repo.merge.merge('orphan')


def test_merge_takes_target_removal(diverged):
    """A file removed on the target and untouched here is removed by the merge."""
    repo = diverged
    repo.worktree.checkout_branch('feature')
    repo.snapshot.remove('b.txt')
    repo.snapshot.commit('Drop b')
    repo.worktree.checkout_branch('master')
    assert read(repo, 'b.txt') == 'b\n'

    result = repo.merge.merge('feature')

    assert result.kind is MergeKind.MERGED
    assert not result.has_conflicts
    assert not (repo.work_tree / 'b.txt').exists()
    head = repo.head_commit()
    assert head.blob_for('b.txt') is None
    assert set(head.tracked) == {'a.txt', 'd.txt'}
    assert repo.stage.is_empty()
