"""Remote module for synchronizing repositories.

This module handles all remote-related functionality:
- Remote management (add, remove, list)
- Fetch operations
- Push operations
- Pull (fetch + merge)
"""

from gitlet.remote.remote import RemoteManager

__all__ = [
    'RemoteManager',
]
