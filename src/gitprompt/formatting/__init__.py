"""Template compilation and two-stage prompt formatting."""

from gitprompt.formatting.formatter import format_fields, render_outputs, shorten_branch
from gitprompt.formatting.template import Template, compile_template

__all__ = [
    "Template",
    "compile_template",
    "format_fields",
    "render_outputs",
    "shorten_branch",
]
