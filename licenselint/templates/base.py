"""
Header templates.

A template owns the literal boilerplate for one comment syntax. The boilerplate carries
exactly one `{year}` and one `{author}` placeholder. Checking turns the boilerplate into a
regular expression (any four-digit year, any allowed author) that must start at the beginning
of some line; formatting renders it with the configured year and primary author and prepends
it when no accepted header exists.
"""
import abc
import functools
import re
from typing import ClassVar, List, Optional, Pattern, Tuple

from licenselint.config import Config
from licenselint.issues import Issue

PLACEHOLDER = re.compile(r'\{(year|author)\}')
YEAR_REGEX = r'[0-9]{4}'


def header_regex(template: str, authors: Tuple[str, ...]) -> str:
    """
    Regular expression source for `template`; everything outside the placeholders is literal.
    """
    author_regex = '(?:' + '|'.join(re.escape(author) for author in authors) + ')'

    parts = []
    pos = 0
    for match in PLACEHOLDER.finditer(template):
        parts.append(re.escape(template[pos:match.start()]))
        parts.append(YEAR_REGEX if match.group(1) == 'year' else author_regex)
        pos = match.end()
    parts.append(re.escape(template[pos:]))
    return ''.join(parts)


@functools.lru_cache(maxsize=None)
def compile_header_pattern(template: str, authors: Tuple[str, ...]) -> Pattern[str]:
    """
    Compiles `template` into a pattern finding the header at the start of any line.
    """
    return re.compile('^' + header_regex(template, authors), re.MULTILINE)


@functools.lru_cache(maxsize=None)
def compile_declared_header_pattern(declaration: str, template: str, authors: Tuple[str, ...]) -> Pattern[str]:
    """
    Like compile_header_pattern, but the header must directly follow the `declaration` line.
    """
    return re.compile('^' + re.escape(declaration) + r'\r?\n' + header_regex(template, authors), re.MULTILINE)


def render_header(template: str, config: Config) -> str:
    return template.replace('{year}', config.formatted_year).replace('{author}', config.formatted_author)


class LintTemplate(abc.ABC):
    """
    Check and format logic for one comment syntax.
    """
    TEMPLATE: ClassVar[str]
    SEPARATOR: ClassVar[str] = '\n\n'

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        template = cls.__dict__.get('TEMPLATE')
        if template is None:
            return
        for placeholder in ('{year}', '{author}'):
            count = template.count(placeholder)
            if count != 1:
                raise ValueError(f"{cls.__name__}: expected {placeholder} exactly once, found {count}")

    def header_pattern(self, config: Config) -> Pattern[str]:
        return compile_header_pattern(self.TEMPLATE, config.allowed_authors)

    def render(self, config: Config) -> str:
        return render_header(self.TEMPLATE, config)

    def has_header(self, config: Config, content: str) -> bool:
        return self.header_pattern(config).search(content) is not None

    @abc.abstractmethod
    def check(self, config: Config, filename: str, content: str) -> List[Issue]:
        raise NotImplementedError()

    @abc.abstractmethod
    def format(self, config: Config, filename: str, content: str) -> str:
        raise NotImplementedError()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CommentTemplate(LintTemplate):
    """
    Header made of comment lines. An existing header may start on any line (after a shebang,
    for instance); a missing one is inserted at the very beginning of the file.
    """

    def check(self, config: Config, filename: str, content: str) -> List[Issue]:
        if self.has_header(config, content):
            return []
        return [Issue(filename)]

    def format(self, config: Config, filename: str, content: str) -> str:
        if self.has_header(config, content):
            return content
        return self.render(config) + self.SEPARATOR + content


class DeclarationTemplate(LintTemplate):
    """
    Header placed right after a mandatory one-line declaration (e.g. `<?xml ...?>`).

    The declaration is never part of the boilerplate. check looks for the declaration line
    directly followed by the header, starting on any line. format splits off a leading
    declaration, inserts the header after it, and writes the declaration back in front.
    """
    DECLARATION: ClassVar[str]

    def declared_header_pattern(self, config: Config) -> Pattern[str]:
        return compile_declared_header_pattern(self.DECLARATION, self.TEMPLATE, config.allowed_authors)

    def split_declaration(self, content: str) -> Tuple[Optional[str], str]:
        """
        Returns (declaration line including its line break, rest), or (None, content).
        """
        first, newline, rest = content.partition('\n')
        if first.rstrip('\r') == self.DECLARATION:
            return first + (newline or '\n'), rest
        return None, content

    def check(self, config: Config, filename: str, content: str) -> List[Issue]:
        if self.declared_header_pattern(config).search(content) is not None:
            return []
        return [Issue(filename)]

    def format(self, config: Config, filename: str, content: str) -> str:
        if self.declared_header_pattern(config).search(content) is not None:
            return content

        declaration, rest = self.split_declaration(content)
        if declaration is None:
            # Header already on the first line, only the declaration is missing
            if self.header_pattern(config).match(content) is not None:
                return self.DECLARATION + '\n' + content
            declaration = self.DECLARATION + '\n'
        return declaration + self.render(config) + self.SEPARATOR + rest
