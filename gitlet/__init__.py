"""Gitlet - a small content-addressed version control system."""

__version__ = '0.1.0'

from gitlet.core.repository import Repository
from gitlet.core.objects import GitletObject, Blob, Commit
from gitlet.core.errors import GitletError

__all__ = [
    'Repository',
    'GitletObject',
    'Blob',
    'Commit',
    'GitletError',
]
