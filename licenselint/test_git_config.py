import importlib
import os

import git
import pytest

import licenselint.git_config
from licenselint.git_config import find_repository, get_git_user, global_excludes_file


@pytest.fixture
def home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    return home


def test_import_leaves_environment_alone(monkeypatch):
    monkeypatch.delenv("GIT_PYTHON_REFRESH", raising=False)
    importlib.reload(licenselint.git_config)
    assert "GIT_PYTHON_REFRESH" not in os.environ


def test_global_excludes_default(home):
    assert global_excludes_file() == home / ".config" / "git" / "ignore"


def test_global_excludes_from_config(home):
    (home / ".gitconfig").write_text("[core]\n\texcludesfile = ~/my-ignore\n")
    assert global_excludes_file() == home / "my-ignore"


def test_find_repository(tmp_path, home):
    git.Repo.init(tmp_path / "repo").close()
    (tmp_path / "repo" / "sub").mkdir()

    repository = find_repository(tmp_path / "repo" / "sub")
    assert repository is not None
    assert repository.work_tree.resolve() == (tmp_path / "repo").resolve()
    assert repository.exclude_file.resolve() == (tmp_path / "repo" / ".git" / "info" / "exclude").resolve()

    assert find_repository(tmp_path / "elsewhere") is None


def test_git_user_from_repository(tmp_path, home):
    repo = git.Repo.init(tmp_path / "repo")
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Jane Doe")
        writer.set_value("user", "email", "jane@example.com")
    repo.close()

    assert get_git_user(tmp_path / "repo") == ("Jane Doe", "jane@example.com")
