"""
Git settings licenselint relies on: repository location, the global excludes file and the
configured user identity.
"""
from __future__ import annotations
from typing import Optional, Tuple
from dataclasses import dataclass
from pathlib import Path
import configparser
import logging
import os

import git
from git.config import get_config_path
from git.exc import InvalidGitRepositoryError, NoSuchPathError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repository:
    work_tree: Path
    git_dir: Path

    @property
    def exclude_file(self) -> Path:
        return self.git_dir / "info" / "exclude"


def find_repository(path: Path) -> Optional[Repository]:
    """
    Returns the repository containing `path`, or None when `path` is not inside a work tree.
    """
    try:
        repo = git.Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return None

    try:
        if repo.working_tree_dir is None:
            return None
        return Repository(Path(repo.working_tree_dir).absolute(), Path(repo.git_dir).absolute())
    finally:
        repo.close()


def xdg_config_home() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def _global_config_reader() -> git.GitConfigParser:
    return git.GitConfigParser([get_config_path("user"), get_config_path("global")], read_only=True)


def _get_option(reader: git.GitConfigParser, section: str, option: str) -> Optional[str]:
    # Option names are case insensitive in git but GitPython keeps them as written
    if not reader.has_section(section):
        return None
    for name, value in reader.items(section):
        if name.lower() == option.lower():
            return str(value) if value != "" else None
    return None


def global_excludes_file() -> Path:
    """
    Path of the global excludes file: core.excludesFile, else $XDG_CONFIG_HOME/git/ignore.
    """
    value = None
    try:
        with _global_config_reader() as reader:
            value = _get_option(reader, "core", "excludesFile")
    except (OSError, configparser.Error) as e:
        logger.warning(f"Could not read global git config: {e}")

    if value:
        return Path(os.path.expanduser(value))
    return xdg_config_home() / "git" / "ignore"


def get_git_user(path: Path) -> Tuple[Optional[str], Optional[str]]:
    """
    Returns the (user.name, user.email) git would use in `path`.
    """
    try:
        repo = git.Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        repo = None

    try:
        reader = repo.config_reader() if repo is not None else _global_config_reader()
        with reader:
            return _get_option(reader, "user", "name"), _get_option(reader, "user", "email")
    except (OSError, configparser.Error) as e:
        logger.warning(f"Could not read git config: {e}")
        return None, None
    finally:
        if repo is not None:
            repo.close()
