"""Log commands - show commit history and search it."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import error, format_commit


@click.command('log')
def log_cmd():
    """
    Show history from the head commit back to the initial commit.

    Only first parents are followed, so commits merged in from other
    branches are not listed.
    """
    try:
        repo = Repository.open()
        for commit in repo.graph.first_parent_chain(repo.refs.resolve_head()):
            click.echo(format_commit(commit))
    except GitletError as e:
        click.echo(error(e.message))


@click.command('global-log')
def global_log_cmd():
    """Show every commit ever made, in no particular order."""
    try:
        repo = Repository.open()
        for commit in repo.graph.all_commits():
            click.echo(format_commit(commit))
    except GitletError as e:
        click.echo(error(e.message))


@click.command('find')
@click.argument('message')
def find_cmd(message):
    """
    Print the ids of all commits with exactly the given message.

    Examples:
        gitlet find "initial commit"
    """
    try:
        repo = Repository.open()
        matches = [c.hash for c in repo.graph.all_commits() if c.message == message]
    except GitletError as e:
        click.echo(error(e.message))
        return

    if not matches:
        click.echo(error("Found no commit with that message."))
        return

    for commit_hash in matches:
        click.echo(commit_hash)
