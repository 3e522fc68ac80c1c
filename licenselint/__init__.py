from licenselint.config import Config
from licenselint.issues import Issue, FileError, LintReport
from licenselint.license import License
from licenselint.linter import Linter
from licenselint.registry import TemplateRegistry, build_registry
