"""Status command - show branches, staged changes and working tree state."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import error, format_section


@click.command('status')
def status_cmd():
    """
    Show the working tree status.

    Sections, each sorted:
      - Branches (the current one marked with *)
      - Staged Files
      - Removed Files
      - Modifications Not Staged For Commit
      - Untracked Files
    """
    try:
        repo = Repository.open()
        report = repo.worktree.status()
    except GitletError as e:
        click.echo(error(e.message))
        return

    branches = [
        f"*{name}" if name == report.current_branch else name
        for name in report.branches
    ]
    click.echo(format_section('Branches', branches))
    click.echo(format_section('Staged Files', report.staged))
    click.echo(format_section('Removed Files', report.removed))
    click.echo(format_section(
        'Modifications Not Staged For Commit',
        [f"{path} ({kind})" for path, kind in report.modified]
    ))
    click.echo(format_section('Untracked Files', report.untracked))
