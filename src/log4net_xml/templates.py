"""
Message template parsing and rendering

Templates are plain text with named or positional holes::

    "User {UserId} logged in from {@Client} after {Elapsed:0.00} ms"

``{{`` and ``}}`` produce literal braces. A hole may carry a capture
operator (``@`` destructure, ``$`` stringify), an alignment (``{Name,10}``,
``{Name,-10}``) and a format (``{Name:format}``). Holes that cannot be
parsed are kept as literal text.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .values import Destructuring, LogEventPropertyValue, create_property_value

logger = logging.getLogger(__name__)

_PROPERTY_NAME_RE = re.compile(r"^[A-Za-z0-9_]+$")
_ALIGNMENT_RE = re.compile(r"^-?\d+$")

TEMPLATE_CACHE_SIZE = 1000


@dataclass(frozen=True)
class TextToken:
    """Literal text between holes"""

    text: str

    def render(self, properties: Mapping[str, LogEventPropertyValue]) -> str:
        return self.text


@dataclass(frozen=True)
class PropertyToken:
    """A hole referring to a property by name or position"""

    name: str
    raw_text: str
    destructuring: Destructuring = Destructuring.DEFAULT
    alignment: Optional[int] = None
    format_spec: Optional[str] = None

    @property
    def is_positional(self) -> bool:
        return self.name.isdigit()

    def render(self, properties: Mapping[str, LogEventPropertyValue]) -> str:
        value = properties.get(self.name)
        if value is None:
            return self.raw_text

        rendered = value.render(self.format_spec)
        if self.alignment is None:
            return rendered
        width = abs(self.alignment)
        if self.alignment < 0:
            return rendered.ljust(width)
        return rendered.rjust(width)


MessageTemplateToken = Union[TextToken, PropertyToken]


@dataclass(frozen=True)
class MessageTemplate:
    """A parsed message template"""

    text: str
    tokens: Tuple[MessageTemplateToken, ...] = ()

    @classmethod
    def literal(cls, text: str) -> "MessageTemplate":
        """Template consisting of ``text`` only, with no holes"""
        return cls(text, (TextToken(text),) if text else ())

    @property
    def property_tokens(self) -> Tuple[PropertyToken, ...]:
        return tuple(t for t in self.tokens if isinstance(t, PropertyToken))

    def render(self, properties: Mapping[str, LogEventPropertyValue]) -> str:
        """Substitute property values into the template"""
        return "".join(token.render(properties) for token in self.tokens)

    def bind(self, args: Sequence[Any]) -> Dict[str, LogEventPropertyValue]:
        """
        Capture positional arguments as properties of this template

        When every hole is positional (``{0}``, ``{1}``), arguments bind by
        index. Otherwise named holes bind to arguments in order of first
        appearance.
        """
        tokens = self.property_tokens
        if not tokens or not args:
            return {}

        bound: Dict[str, LogEventPropertyValue] = {}

        if all(token.is_positional for token in tokens):
            for token in tokens:
                index = int(token.name)
                if token.name not in bound and index < len(args):
                    bound[token.name] = create_property_value(args[index], token.destructuring)
            return bound

        named: List[PropertyToken] = []
        seen = set()
        for token in tokens:
            if token.name not in seen:
                seen.add(token.name)
                named.append(token)

        for token, arg in zip(named, args):
            bound[token.name] = create_property_value(arg, token.destructuring)

        if len(args) > len(named):
            logger.debug(
                "Template %r has %d holes but %d arguments were supplied",
                self.text,
                len(named),
                len(args),
            )
        return bound


def _parse_property_token(raw: str) -> Optional[PropertyToken]:
    """Parse a ``{...}`` hole, returning None when it is malformed"""
    inner = raw[1:-1]

    destructuring = Destructuring.DEFAULT
    if inner[:1] == "@":
        destructuring = Destructuring.DESTRUCTURE
        inner = inner[1:]
    elif inner[:1] == "$":
        destructuring = Destructuring.STRINGIFY
        inner = inner[1:]

    format_spec = None
    if ":" in inner:
        inner, format_spec = inner.split(":", 1)
        if not format_spec:
            return None

    alignment = None
    if "," in inner:
        inner, alignment_text = inner.split(",", 1)
        if not _ALIGNMENT_RE.match(alignment_text):
            return None
        alignment = int(alignment_text)

    if not _PROPERTY_NAME_RE.match(inner):
        return None

    return PropertyToken(
        name=inner,
        raw_text=raw,
        destructuring=destructuring,
        alignment=alignment,
        format_spec=format_spec,
    )


def _tokenize(text: str) -> List[MessageTemplateToken]:
    tokens: List[MessageTemplateToken] = []
    buffer: List[str] = []
    i = 0
    length = len(text)

    def flush_text() -> None:
        if buffer:
            tokens.append(TextToken("".join(buffer)))
            buffer.clear()

    while i < length:
        ch = text[i]

        if ch == "{":
            if text.startswith("{{", i):
                buffer.append("{")
                i += 2
                continue

            end = text.find("}", i + 1)
            if end == -1:
                buffer.append(text[i:])
                break

            # An opening brace inside the hole makes the first one literal
            if "{" in text[i + 1 : end]:
                buffer.append(ch)
                i += 1
                continue

            raw = text[i : end + 1]
            token = _parse_property_token(raw)
            if token is None:
                buffer.append(raw)
            else:
                flush_text()
                tokens.append(token)
            i = end + 1
            continue

        if ch == "}" and text.startswith("}}", i):
            buffer.append("}")
            i += 2
            continue

        buffer.append(ch)
        i += 1

    flush_text()
    return tokens


@lru_cache(maxsize=TEMPLATE_CACHE_SIZE)
def parse_template(text: str) -> MessageTemplate:
    """Parse template text, caching the result"""
    return MessageTemplate(text, tuple(_tokenize(text)))
