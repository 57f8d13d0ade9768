"""Checkout command - switch branches or restore files."""

import click
from gitlet.core.errors import GitletError
from gitlet.core.repository import Repository
from gitlet.cli.output import success, error

SEPARATOR_KEY = 'checkout.separator'


class CheckoutCommand(click.Command):
    """Command that records whether '--' appeared among its arguments."""

    def parse_args(self, ctx, args):
        ctx.meta[SEPARATOR_KEY] = '--' in args
        return super().parse_args(ctx, args)


@click.command('checkout', cls=CheckoutCommand)
@click.argument('operands', nargs=-1)
@click.pass_context
def checkout_cmd(ctx, operands):
    """
    Switch branches or restore working tree files.

    Examples:
        gitlet checkout -- hello.txt           # File from the head commit
        gitlet checkout a1b2c3 -- hello.txt    # File from another commit
        gitlet checkout feature                # Switch to 'feature'
    """
    separator = ctx.meta.get(SEPARATOR_KEY, False)

    try:
        repo = Repository.open()

        if len(operands) == 1 and separator:
            path = repo.relative_path(operands[0])
            repo.worktree.checkout_file(repo.head_commit(), path)
        elif len(operands) == 2 and separator:
            commit = repo.graph.resolve(operands[0])
            path = repo.relative_path(operands[1])
            repo.worktree.checkout_file(commit, path)
        elif len(operands) == 1:
            repo.worktree.checkout_branch(operands[0])
            click.echo(success(f"Switched to branch '{operands[0]}'"))
        else:
            click.echo(error("Incorrect operands."))
    except GitletError as e:
        click.echo(error(e.message))
