"""
Directory traversal.

Files are enumerated under a root directory while honoring, from lowest to highest precedence:

  * the `.licenselintignore` file at the root (consulted even outside a git repository),
  * the global git excludes file,
  * `.git/info/exclude` of the enclosing repository,
  * `.gitignore` files between the repository top and the root,
  * `.gitignore` files of every visited directory, deeper ones winning.

git ignore rules apply whether or not the tree is a repository. Hidden entries are visited and
symbolic links are followed; a link back to an enclosing directory is reported as a loop.
After that, `.git` paths, `.gitmodules`, documentation and image formats and anything that is
not UTF-8 text are skipped.

Failures never stop the walk; they are collected as FileError entries.
"""
from __future__ import annotations
from typing import Callable, FrozenSet, Generator, List, Optional, Tuple, TypeAlias
from dataclasses import dataclass
from pathlib import Path
import errno
import logging
import os

import pathspec

from licenselint.git_config import find_repository, global_excludes_file
from licenselint.io import is_utf8, read_ignore_spec
from licenselint.issues import FileError

logger = logging.getLogger(__name__)

IGNORE_FILENAME = ".licenselintignore"
GITIGNORE_FILENAME = ".gitignore"
VCS_DIRECTORY = ".git"

SKIPPED_FILENAMES = frozenset({".gitmodules"})
IGNORED_EXTENSIONS = frozenset({"md", "png", "xlsx", "xlss"})

FileCallback: TypeAlias = Callable[[Path], None]

##################################################################################################
# Ignore rules
##################################################################################################

@dataclass(frozen=True)
class IgnoreLayer:
    """
    Patterns from one ignore file, relative to `base`.
    """
    base: Path
    spec: pathspec.PathSpec
    source: Path

    def check(self, path: Path, is_dir: bool) -> Optional[bool]:
        """
        True if the path is ignored, False if re-included, None if no pattern applies.
        """
        try:
            rel_path = path.relative_to(self.base).as_posix()
        except ValueError:
            return None
        if is_dir:
            rel_path += '/'
        return self.spec.check_file(rel_path).include


def is_ignored(layers: Tuple[IgnoreLayer, ...], path: Path, is_dir: bool) -> bool:
    for layer in reversed(layers):
        result = layer.check(path, is_dir)
        if result is not None:
            return result
    return False


def _load_layer(base: Path, source: Path, errors: List[FileError]) -> Optional[IgnoreLayer]:
    try:
        spec = read_ignore_spec(source)
    except OSError as e:
        errors.append(FileError(source, e))
        return None
    if not spec.patterns:
        return None
    logger.debug(f"Using ignore file {source}")
    return IgnoreLayer(base, spec, source)


def root_ignore_layers(root: Path, errors: List[FileError]) -> Tuple[IgnoreLayer, ...]:
    """
    Ignore layers in effect at `root` (absolute) before any of its own .gitignore files.
    """
    repository = find_repository(root)
    top = repository.work_tree if repository is not None else root

    candidates = [
        (root, root / IGNORE_FILENAME),
        (top, global_excludes_file()),
    ]

    if repository is not None:
        candidates.append((top, repository.exclude_file))

        parents = []
        directory = root.parent
        while directory != top and top in directory.parents:
            parents.append(directory)
            directory = directory.parent
        if root != top:
            parents.append(top)
        for directory in reversed(parents):
            candidates.append((directory, directory / GITIGNORE_FILENAME))

    layers = []
    for base, source in candidates:
        layer = _load_layer(base, source, errors)
        if layer is not None:
            layers.append(layer)
    return tuple(layers)

##################################################################################################
# Walking
##################################################################################################

def is_excluded(path: Path) -> bool:
    """
    Hard exclusions applied to every file, regardless of ignore files.
    """
    if VCS_DIRECTORY in path.parts:
        return True
    if path.name in SKIPPED_FILENAMES:
        return True
    return path.suffix[1:] in IGNORED_EXTENSIONS


def walk(root: Path, errors: List[FileError]) -> Generator[Path, None, None]:
    """
    Yields the regular files under `root` that survive the ignore rules.

    Enumeration failures, including symbolic link loops, are appended to `errors` against `root`.
    """
    assert isinstance(root, Path), f"Expected Path, got {type(root)}"
    root_abs = root.absolute()
    layers = root_ignore_layers(root_abs, errors)

    def go(path: Path, path_abs: Path, layers: Tuple[IgnoreLayer, ...],
           ancestors: FrozenSet[Tuple[int, int]]) -> Generator[Path, None, None]:
        try:
            st = os.stat(path)
        except OSError as e:
            errors.append(FileError(root, e))
            return

        # A directory that is also one of its own ancestors can only be reached through a link
        key = (st.st_dev, st.st_ino)
        if key in ancestors:
            errors.append(FileError(root, OSError(errno.ELOOP, "File system loop", str(path))))
            return
        ancestors = ancestors | {key}

        try:
            listing = sorted(os.scandir(path), key=lambda entry: entry.name)
        except OSError as e:
            errors.append(FileError(root, e))
            return

        layer = _load_layer(path_abs, path_abs / GITIGNORE_FILENAME, errors)
        if layer is not None:
            layers = layers + (layer,)

        for entry in listing:
            if entry.name == VCS_DIRECTORY:
                continue

            child = path / entry.name
            child_abs = path_abs / entry.name

            try:
                is_dir = entry.is_dir()
                is_file = not is_dir and entry.is_file()
            except OSError as e:
                errors.append(FileError(child, e))
                continue

            if is_ignored(layers, child_abs, is_dir):
                logger.debug(f"Skipping {child}: ignored")
                continue

            if is_dir:
                yield from go(child, child_abs, layers, ancestors)
            elif is_file:
                yield child

    yield from go(root, root_abs, layers, frozenset())


def for_each_file(root: Path, callback: FileCallback) -> List[FileError]:
    """
    Calls `callback` for every candidate text file under `root`.

    OSError and UnicodeError raised by the callback are recorded per file; the walk continues.
    """
    errors: List[FileError] = []

    for path in walk(root, errors):
        if is_excluded(path):
            logger.debug(f"Skipping {path}: excluded")
            continue

        try:
            data = path.read_bytes()
        except OSError as e:
            errors.append(FileError(path, e))
            continue

        if not is_utf8(data):
            logger.debug(f"Skipping {path}: not UTF-8 text")
            continue

        try:
            callback(path)
        except (OSError, UnicodeError) as e:
            errors.append(FileError(path, e))

    return errors
