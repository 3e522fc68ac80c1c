from licenselint.templates.base import LintTemplate, CommentTemplate, DeclarationTemplate
