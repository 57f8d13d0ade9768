"""Main CLI entry point for Gitlet."""

import logging

import click
from colorama import init

from gitlet import __version__
from gitlet.core.config import get_config
from gitlet.core.repository import Repository
from gitlet.cli.output import BANNER, error
from gitlet.cli.commands import (init_cmd, add_cmd, commit_cmd, rm_cmd, log_cmd,
                                 global_log_cmd, find_cmd, status_cmd, checkout_cmd,
                                 branch_cmd, rm_branch_cmd, reset_cmd, merge_cmd,
                                 add_remote_cmd, rm_remote_cmd, push_cmd, fetch_cmd,
                                 pull_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


class GitletGroup(click.Group):
    """
    Command group with a banner on help and gitlet-style usage errors.

    Usage errors are reported as plain messages and exit with status 0.
    """

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError:
            click.echo(error("No command with that name exists."))
            ctx.exit(0)

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError:
            click.echo(error("Incorrect operands."))
            ctx.exit(0)


def configure_logging(verbose: bool) -> None:
    """Set the root log level from --verbose or the core.loglevel setting."""
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(get_config(Repository.find_repository()).log_level)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


@click.group(cls=GitletGroup, invoke_without_command=True)
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
@click.version_option(version=__version__, prog_name='gitlet')
@click.pass_context
def cli(ctx, verbose):
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(error("Please enter a command."))


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(rm_cmd)
cli.add_command(log_cmd)
cli.add_command(global_log_cmd)
cli.add_command(find_cmd)
cli.add_command(status_cmd)
cli.add_command(checkout_cmd)
cli.add_command(branch_cmd)
cli.add_command(rm_branch_cmd)
cli.add_command(reset_cmd)
cli.add_command(merge_cmd)
cli.add_command(add_remote_cmd)
cli.add_command(rm_remote_cmd)
cli.add_command(push_cmd)
cli.add_command(fetch_cmd)
cli.add_command(pull_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
