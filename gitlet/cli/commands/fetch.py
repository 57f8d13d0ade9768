"""Fetch command - download a remote branch."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error


@click.command('fetch')
@click.argument('remote')
@click.argument('branch')
def fetch_cmd(remote, branch):
    """
    Copy a remote branch's history into REMOTE/BRANCH.

    Local branches, the staging area and the working directory are
    left alone.

    Examples:
        gitlet fetch origin master
    """
    try:
        repo = Repository.open()
        commit_hash = repo.remote.fetch(remote, branch)
    except GitletError as e:
        click.echo(error(e.message))
        return

    click.echo(success(f"{remote}/{branch} is at {commit_hash[:7]}"))
