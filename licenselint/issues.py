from typing import List
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Issue:
    """
    A file whose header does not match the expected license header.
    """
    filename: str

    def __str__(self) -> str:
        return f"Issue found in '{self.filename}'"


@dataclass(frozen=True)
class FileError:
    """
    An I/O or enumeration failure recorded while walking a tree.
    """
    path: Path
    error: Exception

    def __str__(self) -> str:
        return f"{self.path}: {self.error}"


@dataclass
class LintReport:
    """
    Aggregate outcome of running check or format over a directory.
    """
    issues: List[Issue]
    errors: List[FileError]
    formatted: List[Path]
