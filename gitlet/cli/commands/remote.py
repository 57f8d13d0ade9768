"""Remote commands - record and forget remote repositories."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error


@click.command('add-remote')
@click.argument('name')
@click.argument('path')
def add_remote_cmd(name, path):
    """
    Remember another repository under a name.

    PATH may point at the other repository's root or its .gitlet
    directory; relative paths are taken from this repository's root.

    Examples:
        gitlet add-remote origin ../shared/.gitlet
    """
    try:
        repo = Repository.open()
        repo.remote.add_remote(name, path)
    except GitletError as e:
        click.echo(error(e.message))
        return

    click.echo(success(f"Added remote '{name}' -> {path}"))


@click.command('rm-remote')
@click.argument('name')
def rm_remote_cmd(name):
    """Forget a remote. Fetched remote-tracking branches stay."""
    try:
        repo = Repository.open()
        repo.remote.remove_remote(name)
    except GitletError as e:
        click.echo(error(e.message))
        return

    click.echo(success(f"Removed remote '{name}'"))
