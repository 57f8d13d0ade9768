"""Branch commands - create and delete branch pointers."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error


@click.command('branch')
@click.argument('name')
def branch_cmd(name):
    """
    Create a branch pointing at the head commit.

    The new branch is not checked out.

    Examples:
        gitlet branch feature
    """
    try:
        repo = Repository.open()
        head = repo.refs.resolve_head()
        repo.refs.create_branch(name, head)
    except GitletError as e:
        click.echo(error(e.message))
        return

    click.echo(success(f"Created branch '{name}' at {head[:7]}"))


@click.command('rm-branch')
@click.argument('name')
def rm_branch_cmd(name):
    """Delete a branch pointer. Its commits are kept."""
    try:
        repo = Repository.open()
        repo.refs.delete_branch(name)
    except GitletError as e:
        click.echo(error(e.message))
        return

    click.echo(success(f"Deleted branch '{name}'"))
