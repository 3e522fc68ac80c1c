from typing import Dict, Optional

from licenselint.license import License
from licenselint.templates.base import LintTemplate
from licenselint.templates import apache20


class TemplateRegistry:
    """
    Maps exact filenames and file extensions to templates.

    Keys are compared as-is: extensions carry no leading dot and are not case folded.
    """

    def __init__(self) -> None:
        self.exact_match_templates: Dict[str, LintTemplate] = {}
        self.templates: Dict[str, LintTemplate] = {}

    def register_exact(self, filename: str, template: LintTemplate) -> None:
        """
        Adds a template for files with exactly this name (like .clang-format).
        """
        self.exact_match_templates[filename] = template

    def register_extension(self, extension: str, template: LintTemplate) -> None:
        """
        Adds a template for a file extension.
        """
        self.templates[extension] = template

    def lookup_exact(self, filename: str) -> Optional[LintTemplate]:
        return self.exact_match_templates.get(filename)

    def lookup_extension(self, extension: str) -> Optional[LintTemplate]:
        return self.templates.get(extension)

    def __len__(self) -> int:
        return len(self.exact_match_templates) + len(self.templates)


def build_registry(license: License) -> TemplateRegistry:
    registry = TemplateRegistry()

    match license:
        case License.APACHE_20:
            registry.register_exact(".clang-format", apache20.ClangFormatApache20Template())
            registry.register_exact("CMakeLists.txt", apache20.CMakeListsApache20Template())

            registry.register_extension("ets", apache20.ArkTsApache20Template())
            registry.register_extension("cmake", apache20.CMakeApache20Template())
            registry.register_extension("cpp", apache20.CppApache20Template())
            registry.register_extension("go", apache20.GoApache20Template())
            registry.register_extension("hpp", apache20.HppApache20Template())
            registry.register_extension("in", apache20.InApache20Template())
            registry.register_extension("ipp", apache20.IppApache20Template())
            registry.register_extension("java", apache20.JavaApache20Template())
            registry.register_extension("properties", apache20.PropertiesApache20Template())
            registry.register_extension("py", apache20.PythonApache20Template())
            registry.register_extension("rs", apache20.RustApache20Template())
            registry.register_extension("toml", apache20.TomlApache20Template())
            registry.register_extension("tpp", apache20.TppApache20Template())
            registry.register_extension("ts", apache20.TypeScriptApache20Template())
            registry.register_extension("xml", apache20.XmlApache20Template())

            yaml = apache20.YamlApache20Template()
            registry.register_extension("yaml", yaml)
            registry.register_extension("yml", yaml)
        case _:
            raise ValueError(f"No templates for license: {license}")

    return registry
