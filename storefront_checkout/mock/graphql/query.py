"""
Line-oriented reader for the GraphQL documents this package generates.

It understands one operation per document, an optional ``@inContext``
directive line, the root field signature and a two-level selection. It is not
a GraphQL parser and is not meant for arbitrary third-party queries.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from storefront_checkout.mock.exceptions import EmptyQueryError

CONTEXT_DIRECTIVE = "@inContext"

_TYPE_RE = re.compile(r"^[a-z]*")


@dataclass
class ParsedQuery:
    type: Optional[str] = None
    endpoint: Optional[str] = None
    context: dict[str, Any] = field(default_factory=dict)
    # Top-level selection in document order; nested groups map to their
    # child field names, plain fields map to None.
    fields: dict[str, Optional[list[str]]] = field(default_factory=dict)
    variables: dict[str, Any] = field(default_factory=dict)

    def get_context(self, key: str) -> Any:
        return self.context.get(key)

    def has_field(self, name: str) -> bool:
        return name in self.fields

    @property
    def field_names(self) -> list[str]:
        return list(self.fields)

    @property
    def root_field(self) -> Optional[str]:
        """Name of the operation's root field, without its argument list."""
        if not self.endpoint:
            return None
        return self.endpoint.split("(", 1)[0].strip() or None


def _parse_context(line: str, variables: dict[str, Any]) -> dict[str, Any]:
    body = line.replace("{", "").strip()
    body = body.replace(CONTEXT_DIRECTIVE + "(", "").replace(")", "")
    context: dict[str, Any] = {}
    for row in body.split(","):
        if ":" not in row:
            continue
        key, value = (part.strip() for part in row.split(":", 1))
        context[key] = variables.get(value[1:] if value.startswith("$") else value)
    return context


def parse(query: Optional[str], variables: Optional[dict[str, Any]] = None) -> ParsedQuery:
    """
    Parse ``query`` into its operation type, root field signature, context
    variables and field selection.

    A blank document yields an empty ``ParsedQuery``. A document with nothing
    between its outer braces raises ``EmptyQueryError``.
    """
    variables = variables or {}
    parsed = ParsedQuery(variables=variables)

    lines = [line.strip() for line in (query or "").split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return parsed

    parsed.type = _TYPE_RE.match(lines[0]).group(0)

    # Operation braces
    lines = lines[1:-1]
    if not lines:
        raise EmptyQueryError()

    if lines[0].startswith(CONTEXT_DIRECTIVE):
        parsed.context = _parse_context(lines[0], variables)
        lines = lines[1:]
        if lines and lines[-1] == "}":
            lines.pop()

    if not lines:
        raise EmptyQueryError()

    parsed.endpoint = lines.pop(0).replace("{", "").strip()
    if lines and lines[-1] == "}":
        lines.pop()

    current: Optional[str] = None
    for item in lines:
        if item.endswith("{"):
            current = item[:-1].strip()
            parsed.fields[current] = []
        elif item == "}":
            current = None
        elif current:
            parsed.fields[current].append(item)
        else:
            parsed.fields[item] = None

    return parsed
