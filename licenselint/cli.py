from typing import List, Optional
from pathlib import Path
import argparse
import logging
import os
import sys

from licenselint.config import Config, DEFAULT_AUTHOR, current_year, format_author
from licenselint.git_config import get_git_user
from licenselint.license import License
from licenselint.linter import Linter
from licenselint.messages import error, info, plain, success, warning

VERSION = "0.1.0"

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_ISSUES = 2

##################################################################################################
# Commands
##################################################################################################

def check(current_dir: Path, linter: Linter) -> int:
    report = linter.check_files_in_dir(current_dir)

    for e in report.errors:
        error(f"Error checking files: {e}")

    if report.issues:
        for issue in sorted(report.issues, key=lambda i: i.filename):
            plain(str(issue))
        return EXIT_ISSUES

    success("No issues found.")
    return EXIT_ERRORS if report.errors else EXIT_OK


def format(current_dir: Path, linter: Linter) -> int:
    report = linter.format_files_in_dir(current_dir)

    if report.errors:
        for e in report.errors:
            error(f"Error formatting files: {e}")
        return EXIT_ERRORS

    success("Files formatted successfully.")
    return EXIT_OK

##################################################################################################
# Main
##################################################################################################

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="licenselint",
        description="A command-line tool for linting and fixing license formatting issues")
    parser.add_argument('--version', action='version', version=f"%(prog)s {VERSION}")
    parser.add_argument('-a', '--author', type=str, help='The author name to include in the license')
    parser.add_argument('-e', '--email', type=str, help='The author email to include in the license')
    parser.add_argument('--allow-author', type=str, action='append', default=[], metavar='AUTHOR',
                        help='Another author accepted in existing headers (repeatable)')
    parser.add_argument('--year', type=str, help='Copyright year for new headers (default: current year)')
    parser.add_argument('--license', type=str, default=str(License.APACHE_20), help='License of the headers')
    parser.add_argument('-C', '--directory', type=str, default='.', help='Directory to lint (default: current directory)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log skipped files and other details')

    subparsers = parser.add_subparsers(dest='command')
    subparsers.add_parser('check', help='Check files for lint issues')
    subparsers.add_parser('format', help='Automatically format files to fix lint issues')
    return parser


def build_config(args: argparse.Namespace, current_dir: Path) -> Config:
    name = args.author
    email = args.email
    if name is None:
        git_name, git_email = get_git_user(current_dir)
        name = git_name
        if name is None:
            warning(f"No author given and no git user.name configured, using '{DEFAULT_AUTHOR}'")
            name = DEFAULT_AUTHOR
        if email is None and git_name is not None:
            email = git_email

    config = Config.from_author(
        License.parse(args.license),
        format_author(name, email),
        args.year if args.year is not None else current_year())

    for author in args.allow_author:
        config = config.with_allowed_author(author)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    if sys.platform.lower() == "win32":
        os.system('color')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(message)s')

    current_dir = Path(args.directory)
    if not current_dir.is_dir():
        error(f"Not a directory: {current_dir}")
        return EXIT_ERRORS

    try:
        config = build_config(args, current_dir)
    except ValueError as e:
        error(str(e))
        return EXIT_ERRORS

    linter = Linter(config)

    match args.command:
        case None:
            info("No subcommand provided, defaulting to 'check'...")
            return check(current_dir, linter)
        case 'check':
            return check(current_dir, linter)
        case 'format':
            return format(current_dir, linter)
        case _:
            raise ValueError(f"Unknown command: {args.command}")
