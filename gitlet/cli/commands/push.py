"""Push command - update a remote branch with local history."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error


@click.command('push')
@click.argument('remote')
@click.argument('branch')
def push_cmd(remote, branch):
    """
    Copy the head commit's history to a remote and move its branch.

    Only fast-forwards are allowed: the remote branch must already be
    in the local history.

    Examples:
        gitlet push origin master
    """
    try:
        repo = Repository.open()
        commit_hash = repo.remote.push(remote, branch)
    except GitletError as e:
        click.echo(error(e.message))
        return

    click.echo(success(f"{remote}/{branch} -> {commit_hash[:7]}"))
