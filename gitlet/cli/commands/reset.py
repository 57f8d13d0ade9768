"""Reset command - move the current branch to a commit."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error


@click.command('reset')
@click.argument('commit_id')
def reset_cmd(commit_id):
    """
    Check out every file of a commit and move the current branch to it.

    Files tracked now but not by the commit are deleted and the staging
    area is cleared. Abbreviated ids are accepted.

    Examples:
        gitlet reset a1b2c3
    """
    try:
        repo = Repository.open()
        commit = repo.worktree.reset(commit_id)
    except GitletError as e:
        click.echo(error(e.message))
        return

    click.echo(success(f"HEAD is now at {commit.hash[:7]} {commit.message}"))
