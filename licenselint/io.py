from typing import List
from difflib import unified_diff
from pathlib import Path
import hashlib
import logging

import pathspec

logger = logging.getLogger(__name__)

##################################################################################################
# File Reading/Writing
##################################################################################################

def is_utf8(data: bytes) -> bool:
    try:
        data.decode('utf-8')
    except UnicodeDecodeError:
        return False
    return True


def read_text_file(path: Path) -> str:
    """
    Reads a UTF-8 file without newline translation, so that writing it back is byte-exact.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    return path.read_bytes().decode('utf-8')


def write_text_file(path: Path, content: str) -> bool:
    """
    Writes `content` to `path` if it differs from what is on disk. Returns True if written.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"

    content_bytes = content.encode('utf-8')

    if path.exists():
        old_bytes = path.read_bytes()
        if len(old_bytes) == len(content_bytes) and \
           hashlib.sha256(old_bytes).digest() == hashlib.sha256(content_bytes).digest():
            return False

        old_content = old_bytes.decode('utf-8', errors='replace')
        total_added = 0
        total_removed = 0
        for line in unified_diff(old_content.splitlines(), content.splitlines(), lineterm=''):
            if line.startswith('+++') or line.startswith('---'):
                continue
            if line.startswith('+'):
                total_added += 1
            elif line.startswith('-'):
                total_removed += 1

        logger.info(f'Modifying {path}: {total_removed} lines removed, {total_added} lines added')
    else:
        logger.info(f'Writing to {path}')

    with open(path, 'wb') as f:
        f.write(content_bytes)
    return True

##################################################################################################
# Ignore files
##################################################################################################

def read_ignore_lines(path: Path) -> List[str]:
    """
    Reads a gitignore-style file. Returns no patterns if the file does not exist.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"

    if not path.is_file():
        return []

    with open(path, 'rt', encoding='utf-8', errors='replace') as f:
        return f.read().splitlines()


def read_ignore_spec(path: Path) -> pathspec.GitIgnoreSpec:
    return pathspec.GitIgnoreSpec.from_lines(read_ignore_lines(path))
