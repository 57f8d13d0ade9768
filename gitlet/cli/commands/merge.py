"""Merge command - join another branch into the current one."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.operations.merge import MergeKind
from gitlet.cli.output import success, error, info, warning


def report_merge(result):
    """Print the outcome of a merge or pull."""
    if result.kind is MergeKind.UP_TO_DATE:
        click.echo(info(result.message))
    elif result.kind is MergeKind.FAST_FORWARD:
        click.echo(success(result.message))
    elif result.has_conflicts:
        for path in result.conflicts:
            click.echo(warning(f"CONFLICT in {path}"))
        click.echo(warning(result.message))
    else:
        click.echo(success(f"Merge commit {result.commit_hash[:7]} created"))


@click.command('merge')
@click.argument('branch')
def merge_cmd(branch):
    """
    Merge a branch into the current branch.

    Files are combined against the latest common ancestor. Conflicting
    files are written with conflict markers and committed as they are.

    Examples:
        gitlet merge feature
        gitlet merge origin/master
    """
    try:
        repo = Repository.open()
        result = repo.merge.merge(branch)
    except GitletError as e:
        click.echo(error(e.message))
        return

    report_merge(result)
