"""Template grammar for decorated collection keys.

A key is a template iff it starts with ``$``. Three shapes share one pattern:

    ${Model({attr: ?, other->path: ?}).presentSomething()}:outputKey
    ${ClassName.staticMethod(literal, ?)}:outputKey
    ${function(?)}:outputKey

The ``?`` marker is bound to the value stored under the key.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import ParseError


SENTINEL = "$"
PLACEHOLDER = "?"

TEMPLATE_PATTERN = re.compile(
    r"""
    \$\{\s*
      (?:
          (?P<class>[^\s{:(]+)\s*
          (?:\(\s*\{(?P<properties>.*)\}\s*\)\s*)?
          \.\s*
      )?
      (?P<method>\w+)\s*\((?P<params>[\w?,\s]*)\)
    \s*\}\s*:\s*(?P<outkey>\w+)\s*
    """,
    re.VERBOSE | re.ASCII,
)


class TemplateShape(Enum):
    """Invocation strategy selected by the groups a template matched."""

    FUNCTION = "function"
    STATIC = "static"
    PRESENTER = "presenter"


@dataclass(frozen=True)
class ParsedTemplate:
    """Capture groups of a matched template."""

    method: str
    outkey: str
    class_name: str | None = None
    properties: str | None = None  # raw "name: value, ..." list, None if absent
    params: str | None = None  # raw "p1, p2" list, None if empty

    @property
    def shape(self) -> TemplateShape:
        if not self.class_name:
            return TemplateShape.FUNCTION
        if self.properties is None:
            return TemplateShape.STATIC
        return TemplateShape.PRESENTER

    def property_pairs(self) -> list[tuple[str, str]]:
        """Return the ``(name, value)`` pairs of the property list."""
        if not self.properties:
            return []
        return parse_properties(self.properties)

    def groups(self) -> dict[str, str | None]:
        """Return the capture groups keyed by their pattern names."""
        return {
            "class": self.class_name,
            "properties": self.properties,
            "method": self.method,
            "params": self.params,
            "outkey": self.outkey,
        }


def has_placeholder(template) -> bool:
    """Check whether a collection key is a template."""
    return isinstance(template, str) and template.startswith(SENTINEL)


def _clean(group: str | None) -> str | None:
    if group is None:
        return None
    group = group.strip()
    return group or None


def match(template: str) -> ParsedTemplate | None:
    """Match a key against the template pattern.

    Returns None if the key is not a well-formed template.
    """
    m = TEMPLATE_PATTERN.fullmatch(template)
    if not m:
        return None

    properties = m.group("properties")
    return ParsedTemplate(
        method=m.group("method"),
        outkey=m.group("outkey"),
        class_name=_clean(m.group("class")),
        # An empty "({})" still selects the presenter strategy
        properties=properties.strip() if properties is not None else None,
        params=_clean(m.group("params")),
    )


def parse(template: str) -> ParsedTemplate:
    """Parse a template key.

    Args:
        template: Key starting with the ``$`` sentinel

    Returns:
        Parsed capture groups

    Raises:
        ParseError: If the key matches none of the template shapes
    """
    parsed = match(template)
    if parsed is None:
        raise ParseError("Invalid template pattern", template=template)
    return parsed


def parse_properties(raw: str) -> list[tuple[str, str]]:
    """Split a property list into ``(name, value)`` pairs.

    Examples:
        parse_properties("name: ?") -> [("name", "?")]
        parse_properties("make->slug: ?, kind: car") -> [("make->slug", "?"), ("kind", "car")]
    """
    pairs = []
    for entry in raw.split(","):
        if not entry.strip():
            continue
        name, sep, value = entry.partition(":")
        name = name.strip()
        if not sep or not name:
            raise ParseError("Invalid property entry", template=entry.strip())
        pairs.append((name, value.strip()))
    return pairs
