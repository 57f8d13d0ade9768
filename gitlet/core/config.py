"""Layered settings for Gitlet.

Values come from, highest priority first:

1. Environment variables named GITLET_<SECTION>_<KEY>
2. The repository file .gitlet/config
3. The user file ~/.gitletconfig

All files use configparser's INI syntax.
"""

import os
import configparser
from pathlib import Path
from typing import List, Optional


DEFAULT_BRANCH = 'master'
DEFAULT_LOG_LEVEL = 'WARNING'


class Config:
    """
    Read-mostly view over the user and repository settings files.

    Files are parsed once, on first lookup. Writes only ever go to the
    repository file.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.gitletconfig'

    def __init__(self, repo_config_path: Optional[Path] = None):
        self.repo_config_path = Path(repo_config_path) if repo_config_path else None
        self._merged: Optional[configparser.ConfigParser] = None

    def sources(self) -> List[Path]:
        """Settings files in increasing priority order."""
        paths = [self.GLOBAL_CONFIG_PATH]
        if self.repo_config_path is not None:
            paths.append(self.repo_config_path)
        return paths

    def _load(self) -> configparser.ConfigParser:
        if self._merged is None:
            self._merged = configparser.ConfigParser()
            # Later files override earlier ones; missing files are skipped
            self._merged.read([str(p) for p in self.sources()])
        return self._merged

    @staticmethod
    def env_name(section: str, key: str) -> str:
        return f"GITLET_{section.upper()}_{key.upper()}"

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Look up section.key.

        Args:
            section: INI section, e.g. 'init'
            key: Option name, e.g. 'defaultbranch'
            fallback: Returned when no source defines the option
        """
        value = os.environ.get(self.env_name(section, key))
        if value is not None:
            return value
        return self._load().get(section, key, fallback=fallback)

    def set(self, section: str, key: str, value: str) -> None:
        """
        Store section.key in the repository settings file.

        Raises:
            ValueError: If this Config is not bound to a repository
        """
        if self.repo_config_path is None:
            raise ValueError("Settings can only be written inside a repository")

        repo_file = configparser.ConfigParser()
        repo_file.read(str(self.repo_config_path))
        if not repo_file.has_section(section):
            repo_file.add_section(section)
        repo_file.set(section, key, value)

        with open(self.repo_config_path, 'w') as f:
            repo_file.write(f)
        self._merged = None

    @property
    def default_branch(self) -> str:
        """Name of the branch created by init."""
        return self.get('init', 'defaultbranch', DEFAULT_BRANCH)

    @property
    def log_level(self) -> str:
        """Logging level name for command-line runs."""
        return self.get('core', 'loglevel', DEFAULT_LOG_LEVEL).upper()


def get_config(repo=None) -> Config:
    """Settings for repo, or user-level settings only when repo is None."""
    if repo is not None:
        return Config(repo.config_file)
    return Config()
