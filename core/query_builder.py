"""
Query Builder - Font provider query strings

PURPOSE: Serialize a family name and its variation parameters into the query grammar
         of the font provider, and parse such a query back on the provider side.
CONTEXT: The grammar is fixed by the provider:

    name=<family>&width=<float>&weight=<int>&italic=<float>&besteffort=<bool>

         Keys appear in exactly this order. A query consisting of the family name alone
         is the short form used when no variation values are given.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from core.font_parameters import FontVariationParameters
from utils.error_handler import MalformedQueryError

QUERY_KEYS = ("name", "width", "weight", "italic", "besteffort")


def format_number(value: float) -> str:
    """
    Render a number the way the provider expects it.

    Integral values drop the fractional part (100.0 -> "100"), everything else
    uses the shortest representation that round-trips (0.37 -> "0.37").
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


class QueryBuilder:
    """
    Builds a provider query for one family.

    Fields left as None are omitted from the query; when all of them are None the
    bare family name is returned.
    """

    def __init__(
        self,
        family_name: str,
        width: Optional[float] = None,
        weight: Optional[int] = None,
        italic: Optional[float] = None,
        best_effort: Optional[bool] = None,
    ):
        self.family_name = family_name
        self.width = width
        self.weight = weight
        self.italic = italic
        self.best_effort = best_effort

    @classmethod
    def from_parameters(cls, family_name: str, parameters: FontVariationParameters) -> "QueryBuilder":
        return cls(
            family_name,
            width=parameters.width,
            weight=parameters.weight,
            italic=parameters.italic,
            best_effort=parameters.best_effort,
        )

    def build(self) -> str:
        if self.width is None and self.weight is None and self.italic is None and self.best_effort is None:
            return self.family_name

        parts = [f"name={self.family_name}"]
        if self.width is not None:
            parts.append(f"width={format_number(self.width)}")
        if self.weight is not None:
            parts.append(f"weight={int(self.weight)}")
        if self.italic is not None:
            parts.append(f"italic={format_number(self.italic)}")
        if self.best_effort is not None:
            parts.append(f"besteffort={format_bool(self.best_effort)}")
        return "&".join(parts)


def build_query(family_name: str, parameters: FontVariationParameters) -> str:
    """Build the full query for a validated family name."""
    return QueryBuilder.from_parameters(family_name, parameters).build()


@dataclass(frozen=True)
class ParsedQuery:
    """Query fields as seen by the provider"""

    family_name: str
    width: Optional[float] = None
    weight: Optional[int] = None
    italic: Optional[float] = None
    best_effort: bool = False


def parse_query(query: str) -> ParsedQuery:
    """
    Parse a provider query string.

    Raises:
        MalformedQueryError: Unknown or duplicate key, missing name, or a value
            that does not parse
    """
    if not query or not query.strip():
        raise MalformedQueryError("Empty query")

    # Short form: just the family name
    if "=" not in query and "&" not in query:
        return ParsedQuery(family_name=query)

    fields: Dict[str, str] = {}
    for part in query.split("&"):
        key, sep, value = part.partition("=")
        if not sep:
            raise MalformedQueryError(f"Missing '=' in query part {part!r}", context={"query": query})
        if key not in QUERY_KEYS:
            raise MalformedQueryError(f"Unknown query key {key!r}", context={"query": query})
        if key in fields:
            raise MalformedQueryError(f"Duplicate query key {key!r}", context={"query": query})
        fields[key] = value

    family_name = fields.get("name")
    if not family_name:
        raise MalformedQueryError("Query has no family name", context={"query": query})

    try:
        width = float(fields["width"]) if "width" in fields else None
        weight = int(fields["weight"]) if "weight" in fields else None
        italic = float(fields["italic"]) if "italic" in fields else None
    except ValueError as e:
        raise MalformedQueryError(f"Invalid numeric value in query: {e}", context={"query": query}) from e

    best_effort_value = fields.get("besteffort", "false")
    if best_effort_value not in ("true", "false"):
        raise MalformedQueryError(
            f"Invalid besteffort value {best_effort_value!r}", context={"query": query}
        )

    return ParsedQuery(
        family_name=family_name,
        width=width,
        weight=weight,
        italic=italic,
        best_effort=best_effort_value == "true",
    )
