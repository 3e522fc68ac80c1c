from typing import List, Optional
from pathlib import Path

from licenselint.config import Config
from licenselint.issues import Issue, LintReport
from licenselint.io import read_text_file, write_text_file
from licenselint.registry import TemplateRegistry, build_registry
from licenselint.templates.base import LintTemplate
from licenselint.walker import for_each_file


class Linter:
    """
    Picks the template for a file and runs check or format with it.

    An exact filename match always wins: when a file name is registered, the extension table is
    not consulted, whatever the exact template reports.
    """

    def __init__(self, config: Config, registry: Optional[TemplateRegistry] = None) -> None:
        self.config = config
        self.registry = registry if registry is not None else build_registry(config.license)

    def template_for(self, filename: str) -> Optional[LintTemplate]:
        path = Path(filename)

        template = self.registry.lookup_exact(path.name)
        if template is not None:
            return template

        extension = path.suffix[1:]
        if extension:
            return self.registry.lookup_extension(extension)
        return None

    def check(self, filename: str, content: str) -> List[Issue]:
        template = self.template_for(filename)
        if template is None:
            return []
        return template.check(self.config, filename, content)

    def format(self, filename: str, content: str) -> str:
        template = self.template_for(filename)
        if template is None:
            return content
        return template.format(self.config, filename, content)

    def check_files_in_dir(self, dir: Path) -> LintReport:
        all_issues: List[Issue] = []

        def handle(path: Path) -> None:
            if self.template_for(str(path)) is None:
                return
            all_issues.extend(self.check(str(path), read_text_file(path)))

        errors = for_each_file(dir, handle)
        return LintReport(issues=all_issues, errors=errors, formatted=[])

    def format_files_in_dir(self, dir: Path) -> LintReport:
        formatted: List[Path] = []

        def handle(path: Path) -> None:
            if self.template_for(str(path)) is None:
                return
            content = read_text_file(path)
            formatted_content = self.format(str(path), content)
            if formatted_content != content:
                write_text_file(path, formatted_content)
                formatted.append(path)

        errors = for_each_file(dir, handle)
        return LintReport(issues=[], errors=errors, formatted=formatted)
