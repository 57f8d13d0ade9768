"""Rm command - unstage a file or schedule it for removal."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import error


@click.command('rm')
@click.argument('file')
def rm_cmd(file):
    """
    Unstage a file, and if it is tracked, remove it from the next commit.

    A tracked file is also deleted from the working directory.

    Examples:
        gitlet rm hello.txt
    """
    try:
        repo = Repository.open()
        repo.snapshot.remove(repo.relative_path(file))
    except GitletError as e:
        click.echo(error(e.message))
