"""CLI commands for Gitlet."""

from gitlet.cli.commands.init import init_cmd
from gitlet.cli.commands.add import add_cmd
from gitlet.cli.commands.commit import commit_cmd
from gitlet.cli.commands.rm import rm_cmd
from gitlet.cli.commands.log import log_cmd, global_log_cmd, find_cmd
from gitlet.cli.commands.status import status_cmd
from gitlet.cli.commands.checkout import checkout_cmd
from gitlet.cli.commands.branch import branch_cmd, rm_branch_cmd
from gitlet.cli.commands.reset import reset_cmd
from gitlet.cli.commands.merge import merge_cmd
from gitlet.cli.commands.remote import add_remote_cmd, rm_remote_cmd
from gitlet.cli.commands.push import push_cmd
from gitlet.cli.commands.fetch import fetch_cmd
from gitlet.cli.commands.pull import pull_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'rm_cmd', 'log_cmd', 'global_log_cmd',
           'find_cmd', 'status_cmd', 'checkout_cmd', 'branch_cmd', 'rm_branch_cmd',
           'reset_cmd', 'merge_cmd', 'add_remote_cmd', 'rm_remote_cmd', 'push_cmd',
           'fetch_cmd', 'pull_cmd']
