"""JSDoc-style comment extraction.

Finds ``/** ... */`` blocks in source text and splits them into a
description plus ``@tag`` directives. Parsing is lenient: a malformed
type expression leaves the tag untyped instead of failing the file.
"""

import logging
import re
from pathlib import Path

from .base import CommentBlock, CommentTag, TypeExpr

logger = logging.getLogger(__name__)

BLOCK_RE = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)
LINE_PREFIX_RE = re.compile(r"^\s*\*? ?")
TAG_RE = re.compile(r"^@(\w+)\s*(.*)$", re.DOTALL)
NAME_RE = re.compile(r"(\[[^\]]*\]|\S+)\s*(.*)$", re.DOTALL)

# Tags whose first token may be a {type}
TYPED_TAGS = {"param", "arg", "argument", "returns", "return", "property", "prop", "typedef", "type"}
# Tags that carry a name after the type
NAMED_TAGS = {"param", "arg", "argument", "property", "prop", "typedef"}
ALIASES = {"arg": "param", "argument": "param", "prop": "property"}


class TypeSyntaxError(ValueError):
    """Raised when a type expression cannot be parsed."""


def parse_comments(text: str) -> list[CommentBlock]:
    """Extract every documentation comment block from source text."""
    return [_parse_block(match.group(1)) for match in BLOCK_RE.finditer(text)]


def parse_file(file_path: Path) -> list[CommentBlock]:
    """Read a source file and extract its documentation comment blocks."""
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return parse_comments(text)


def _unwrap(raw: str) -> str:
    lines = [LINE_PREFIX_RE.sub("", line, count=1) for line in raw.splitlines()]
    return "\n".join(lines).strip()


def _parse_block(raw: str) -> CommentBlock:
    body = _unwrap(raw)

    description_lines: list[str] = []
    sections: list[str] = []
    for line in body.splitlines():
        if line.lstrip().startswith("@"):
            sections.append(line.lstrip())
        elif sections:
            sections[-1] += "\n" + line
        else:
            description_lines.append(line)

    tags = []
    for section in sections:
        tag = _parse_tag(section)
        if tag is not None:
            tags.append(tag)

    return CommentBlock(
        description="\n".join(description_lines).strip(),
        tags=tags,
        source=f"/**{raw}*/",
    )


def _parse_tag(section: str) -> CommentTag | None:
    match = TAG_RE.match(section.strip())
    if not match:
        return None
    title, rest = match.group(1), match.group(2).strip()
    title = ALIASES.get(title, title)

    type_expr = None
    if title in TYPED_TAGS and rest.startswith("{"):
        type_text, rest = _take_braced(rest)
        if type_text is not None:
            try:
                type_expr = parse_type_expression(type_text)
            except TypeSyntaxError as e:
                logger.debug("Ignoring malformed type {%s}: %s", type_text, e)

    name = None
    if title in NAMED_TAGS and rest:
        name_match = NAME_RE.match(rest)
        name, rest = name_match.group(1).strip("[]"), name_match.group(2)
        # [name=default] optional syntax
        name = name.split("=", 1)[0]

    description = re.sub(r"^-\s+", "", rest.strip())
    return CommentTag(
        title=title,
        name=name or None,
        description=description or None,
        type=type_expr,
    )


def _take_braced(text: str) -> tuple[str | None, str]:
    """Split ``{...} rest`` honouring nested braces."""
    depth = 0
    for i, ch in enumerate(text):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[1:i].strip(), text[i + 1:].strip()
    return None, text


# -- type expressions ---------------------------------------------------------

TOKEN_RE = re.compile(r"\s*(\.<|[<>(),|\[\]*?!=]|[\w$.\-]+)")


def _tokenize(text: str) -> list[str]:
    tokens = []
    pos = 0
    while pos < len(text):
        if text[pos:].strip() == "":
            break
        match = TOKEN_RE.match(text, pos)
        if not match:
            raise TypeSyntaxError(f"unexpected character {text[pos]!r}")
        tokens.append(match.group(1))
        pos = match.end()
    return tokens


def parse_type_expression(text: str) -> TypeExpr:
    """Parse a closure-style type expression.

    Supports names (``Pet``, ``Pet.model``), applications
    (``Array.<Pet>``, ``Map<string, Pet>``), ``Pet[]``, unions
    (``A|B``, ``(A|B)``) and the ``*`` wildcard. Nullable/optional markers
    are accepted and dropped.
    """
    tokens = _tokenize(text)
    if not tokens:
        raise TypeSyntaxError("empty type expression")
    parser = _TypeParser(tokens)
    expr = parser.parse_union()
    if parser.pos != len(tokens):
        raise TypeSyntaxError(f"unexpected token {tokens[parser.pos]!r}")
    return expr


class _TypeParser:
    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def _peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            raise TypeSyntaxError("unexpected end of type expression")
        self.pos += 1
        return token

    def _expect(self, token: str) -> None:
        found = self._next()
        if found != token:
            raise TypeSyntaxError(f"expected {token!r}, found {found!r}")

    def parse_union(self) -> TypeExpr:
        members = [self.parse_postfix()]
        while self._peek() == "|":
            self._next()
            members.append(self.parse_postfix())
        if len(members) == 1:
            return members[0]
        return TypeExpr(elements=members)

    def parse_postfix(self) -> TypeExpr:
        expr = self.parse_primary()
        while self._peek() in ("[", "=", "!", "?"):
            token = self._next()
            if token == "[":
                self._expect("]")
                expr = TypeExpr(expression=TypeExpr(name="Array"), applications=[expr])
        return expr

    def parse_primary(self) -> TypeExpr:
        token = self._next()
        while token in ("?", "!"):
            token = self._next()
        if token == "(":
            expr = self.parse_union()
            self._expect(")")
            return expr
        if token == "*":
            return TypeExpr()
        if not re.match(r"[\w$]", token):
            raise TypeSyntaxError(f"unexpected token {token!r}")

        name = token.rstrip(".")
        if self._peek() in (".<", "<"):
            self._next()
            applications = [] if self._peek() == ">" else [self.parse_union()]
            while self._peek() == ",":
                self._next()
                applications.append(self.parse_union())
            self._expect(">")
            return TypeExpr(expression=TypeExpr(name=name), applications=applications)
        return TypeExpr(name=name)
