"""Date string parsers."""

from datetasks.parsing._base import DateFormat, DateParser
from datetasks.parsing.iso8601 import Iso8601Parser
from datetasks.parsing.rfc2822 import Rfc2822Parser

__all__ = [
    "DateFormat",
    "DateParser",
    "Iso8601Parser",
    "Rfc2822Parser",
    "get_parser",
]

_REGISTRY: dict[str, type[DateParser]] = {
    DateFormat.RFC2822: Rfc2822Parser,
    DateFormat.ISO8601: Iso8601Parser,
}


def get_parser(name: str) -> DateParser:
    """Get a parser instance by format name.

    Args:
        name: Format name ("rfc2822" or "iso8601").

    Returns:
        A DateParser instance.

    Raises:
        ValueError: If the format name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown date format: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()
