"""Placeholder templates.

Grammar:
- `{name}` where name matches [a-z_]+ is a placeholder
- `{{` and `}}` are literal braces
- any other brace is literal text

Templates compile once into an ordered tuple of tokens. Rendering walks the
tokens and inserts substitution values verbatim: inserted text is never
scanned for placeholders again, so values taken from the repository (branch
names, remote refs) cannot inject placeholders or anything else.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

_TOKEN_RE = re.compile(r"\{\{|\}\}|\{([a-z_]+)\}")


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    name: str


Token = Literal | Placeholder


@dataclass(frozen=True)
class Template:
    """A compiled template."""

    source: str
    tokens: tuple[Token, ...]

    @property
    def placeholders(self) -> frozenset[str]:
        return frozenset(token.name for token in self.tokens if isinstance(token, Placeholder))

    def render(self, values: dict[str, str]) -> str:
        """Substitute placeholders; names missing from `values` contribute nothing."""
        parts: list[str] = []
        for token in self.tokens:
            if isinstance(token, Literal):
                parts.append(token.text)
            else:
                parts.append(values.get(token.name, ""))
        return "".join(parts)

    def render_if_any(self, values: dict[str, str]) -> str:
        """Render only when at least one placeholder resolves to a non-empty value.

        Templates without placeholders always render. Used for composite
        outputs so decorations around the fields vanish when there is nothing
        to decorate.
        """
        names = self.placeholders
        if names and not any(values.get(name) for name in names):
            return ""
        return self.render(values)


@lru_cache(maxsize=256)
def compile_template(source: str) -> Template:
    """Compile a template string into tokens."""
    tokens: list[Token] = []
    buffer: list[str] = []
    pos = 0

    for match in _TOKEN_RE.finditer(source):
        buffer.append(source[pos : match.start()])
        pos = match.end()

        name = match.group(1)
        if name is None:
            # Escaped brace
            buffer.append(match.group(0)[0])
            continue

        if buffer:
            text = "".join(buffer)
            if text:
                tokens.append(Literal(text))
            buffer = []
        tokens.append(Placeholder(name))

    buffer.append(source[pos:])
    text = "".join(buffer)
    if text:
        tokens.append(Literal(text))

    return Template(source=source, tokens=tuple(tokens))
