"""Pull command - fetch and merge a remote branch."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import error
from gitlet.cli.commands.merge import report_merge


@click.command('pull')
@click.argument('remote')
@click.argument('branch')
def pull_cmd(remote, branch):
    """
    Fetch REMOTE/BRANCH and merge it into the current branch.

    Examples:
        gitlet pull origin master
    """
    try:
        repo = Repository.open()
        result = repo.remote.pull(remote, branch)
    except GitletError as e:
        click.echo(error(e.message))
        return

    report_merge(result)
