"""Initialize a new Gitlet repository."""

import click
from pathlib import Path
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error


@click.command('init')
def init_cmd():
    """
    Create a new Gitlet repository in the current directory.

    Starts with one commit ("initial commit") on the default branch.

    Examples:
        gitlet init
    """
    try:
        repo = Repository(str(Path.cwd())).init()
    except GitletError as e:
        click.echo(error(e.message))
        return
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository in {Path.cwd()}"))
        return

    click.echo(success(f"Initialized empty Gitlet repository in {repo.gitlet_dir}"))
