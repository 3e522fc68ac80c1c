from typing import Tuple
from dataclasses import dataclass, field
import datetime
import re

from licenselint.license import License

DEFAULT_AUTHOR = "Unknown Author"

YEAR_PATTERN = re.compile(r'[0-9]{4}')

################################################################################
# Config
################################################################################

@dataclass(frozen=True)
class Config:
    """
    Settings for one licenselint run. Built once at startup and only read afterwards.

    `formatted_author` is written into new headers; any of `allowed_authors` is accepted
    when checking existing ones.
    """
    license: License
    formatted_author: str
    formatted_year: str
    allowed_authors: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        if not isinstance(self.license, License):
            raise ValueError(f"Invalid license: {self.license!r}")
        if not self.formatted_author:
            raise ValueError("Author must not be empty")
        if not YEAR_PATTERN.fullmatch(self.formatted_year):
            raise ValueError(f"Invalid year: {self.formatted_year!r} (expected four digits)")

        allowed_authors = tuple(self.allowed_authors)
        if self.formatted_author not in allowed_authors:
            allowed_authors = (self.formatted_author,) + allowed_authors
        object.__setattr__(self, 'allowed_authors', allowed_authors)

    @classmethod
    def from_author(cls, license: License, author: str, formatted_year: str) -> 'Config':
        return cls(license, author, formatted_year, (author,))

    def with_allowed_author(self, author: str) -> 'Config':
        if not author:
            raise ValueError("Author must not be empty")
        if author in self.allowed_authors:
            return self
        return Config(self.license, self.formatted_author, self.formatted_year, self.allowed_authors + (author,))


def format_author(name: str, email: str | None = None) -> str:
    if email:
        return f"{name} <{email}>"
    return name


def current_year() -> str:
    return str(datetime.date.today().year)
