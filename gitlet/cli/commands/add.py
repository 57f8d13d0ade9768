"""Add command - stage files for commit."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import error, info


@click.command('add')
@click.argument('file')
def add_cmd(file):
    """
    Add a file's current content to the staging area.

    Adding a file identical to its committed version unstages it and
    cancels a pending removal.

    Examples:
        gitlet add hello.txt
    """
    try:
        repo = Repository.open()
        path = repo.relative_path(file)
        blob_hash = repo.snapshot.add(path)
    except GitletError as e:
        click.echo(error(e.message))
        return

    if blob_hash is None:
        click.echo(info(f"{path} is unchanged since the last commit"))
