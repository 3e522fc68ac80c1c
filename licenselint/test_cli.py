import pytest

from licenselint.cli import EXIT_ERRORS, EXIT_ISSUES, EXIT_OK, build_config, build_parser, main
from licenselint.license import License


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.setattr("licenselint.walker.global_excludes_file", lambda: tmp_path / "no-global-ignore")
    monkeypatch.setattr("licenselint.cli.get_git_user", lambda path: (None, None))


def test_check_reports_issues(tmp_path, capsys):
    (tmp_path / "main.go").write_text("package main\n")
    code = main(["-C", str(tmp_path), "-a", "Jane Doe", "--year", "2023", "check"])
    assert code == EXIT_ISSUES
    assert f"Issue found in '{tmp_path / 'main.go'}'" in capsys.readouterr().out


def test_format_then_check(tmp_path, capsys):
    (tmp_path / "main.go").write_text("package main\n")
    assert main(["-C", str(tmp_path), "-a", "Jane Doe", "-e", "jane@example.com", "--year", "2023", "format"]) == EXIT_OK

    content = (tmp_path / "main.go").read_text()
    assert content.startswith("// Copyright 2023 Jane Doe <jane@example.com>\n")

    assert main(["-C", str(tmp_path), "-a", "Jane Doe", "-e", "jane@example.com", "check"]) == EXIT_OK
    assert "No issues found." in capsys.readouterr().out


def test_default_command_is_check(tmp_path, capsys):
    (tmp_path / "a.toml").write_text("[x]\n")
    assert main(["-C", str(tmp_path)]) == EXIT_ISSUES
    assert "defaulting to 'check'" in capsys.readouterr().out


def test_allowed_author(tmp_path):
    (tmp_path / "a.py").write_text("print(1)\n")
    assert main(["-C", str(tmp_path), "-a", "Old Owner", "--year", "2020", "format"]) == EXIT_OK
    assert main(["-C", str(tmp_path), "-a", "New Owner", "check"]) == EXIT_ISSUES
    assert main(["-C", str(tmp_path), "-a", "New Owner", "--allow-author", "Old Owner", "check"]) == EXIT_OK


def test_invalid_options(tmp_path):
    assert main(["-C", str(tmp_path), "--license", "GPL-3.0"]) == EXIT_ERRORS
    assert main(["-C", str(tmp_path), "--year", "20"]) == EXIT_ERRORS
    assert main(["-C", str(tmp_path / "missing")]) == EXIT_ERRORS


def test_default_author_from_git(tmp_path, monkeypatch):
    args = build_parser().parse_args([])
    assert build_config(args, tmp_path).formatted_author == "Unknown Author"

    monkeypatch.setattr("licenselint.cli.get_git_user", lambda path: ("Git User", "git@example.com"))
    config = build_config(args, tmp_path)
    assert config.formatted_author == "Git User <git@example.com>"
    assert config.license is License.APACHE_20
