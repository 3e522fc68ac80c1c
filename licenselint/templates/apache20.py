"""
Apache License 2.0 headers, one template per comment syntax.
"""
from licenselint.templates.base import CommentTemplate, DeclarationTemplate

##################################################################################################
# Boilerplate
##################################################################################################

SLASH_COMMENT_NOTICE = """\
// Copyright {year} {author}
//
// Licensed under the Apache License, Version 2.0 (the "License");
// you may not use this file except in compliance with the License.
// You may obtain a copy of the License at
//
//     http://www.apache.org/licenses/LICENSE-2.0
//
// Unless required by applicable law or agreed to in writing, software
// distributed under the License is distributed on an "AS IS" BASIS,
// WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
// See the License for the specific language governing permissions and
// limitations under the License."""

HASH_COMMENT_NOTICE = """\
# Copyright {year} {author}
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License."""

# clang-format style files carry "Copyright:" and end with their own line break
CLANG_FORMAT_NOTICE = """\
# Copyright: {year} {author}
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""

XML_NOTICE = """\
<!--
    Copyright {year} {author}

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
-->"""

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

##################################################################################################
# "//" comments
##################################################################################################

class ArkTsApache20Template(CommentTemplate):
    TEMPLATE = SLASH_COMMENT_NOTICE

class CppApache20Template(CommentTemplate):
    TEMPLATE = SLASH_COMMENT_NOTICE

class GoApache20Template(CommentTemplate):
    TEMPLATE = SLASH_COMMENT_NOTICE

class HppApache20Template(CommentTemplate):
    TEMPLATE = SLASH_COMMENT_NOTICE

class IppApache20Template(CommentTemplate):
    TEMPLATE = SLASH_COMMENT_NOTICE

class JavaApache20Template(CommentTemplate):
    TEMPLATE = SLASH_COMMENT_NOTICE

class RustApache20Template(CommentTemplate):
    TEMPLATE = SLASH_COMMENT_NOTICE

class TppApache20Template(CommentTemplate):
    TEMPLATE = SLASH_COMMENT_NOTICE

class TypeScriptApache20Template(CommentTemplate):
    TEMPLATE = SLASH_COMMENT_NOTICE

##################################################################################################
# "#" comments
##################################################################################################

class CMakeApache20Template(CommentTemplate):
    TEMPLATE = HASH_COMMENT_NOTICE

class CMakeListsApache20Template(CommentTemplate):
    TEMPLATE = HASH_COMMENT_NOTICE

class InApache20Template(CommentTemplate):
    TEMPLATE = HASH_COMMENT_NOTICE

class PropertiesApache20Template(CommentTemplate):
    TEMPLATE = HASH_COMMENT_NOTICE

class PythonApache20Template(CommentTemplate):
    TEMPLATE = HASH_COMMENT_NOTICE

class TomlApache20Template(CommentTemplate):
    TEMPLATE = HASH_COMMENT_NOTICE

class YamlApache20Template(CommentTemplate):
    TEMPLATE = HASH_COMMENT_NOTICE

class ClangFormatApache20Template(CommentTemplate):
    TEMPLATE = CLANG_FORMAT_NOTICE
    SEPARATOR = '\n'

##################################################################################################
# Markup
##################################################################################################

class XmlApache20Template(DeclarationTemplate):
    TEMPLATE = XML_NOTICE
    DECLARATION = XML_DECLARATION
