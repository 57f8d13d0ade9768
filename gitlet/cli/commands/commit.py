"""Commit command - create a commit from staged changes."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error


@click.command('commit')
@click.argument('message')
def commit_cmd(message):
    """
    Record the staged changes as a new commit.

    The commit tracks the previous snapshot plus staged additions, minus
    staged removals. The staging area is cleared afterwards.

    Examples:
        gitlet commit "Add greeting"
    """
    try:
        repo = Repository.open()
        commit = repo.snapshot.commit(message)
    except GitletError as e:
        click.echo(error(e.message))
        return

    click.echo(success(f"[{repo.refs.current_branch()} {commit.hash[:7]}] {message}"))
