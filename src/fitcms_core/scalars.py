"""Scalar helpers shared by the reader and the writer."""

from __future__ import annotations

QUOTE_CHARS = ('"', "'")
BLOCK_MARKER = "|"
INDENT = "  "


def unquote(text: str) -> str:
    """Strip one matching pair of surrounding quotes.

    No escape processing is done::

        unquote('"hello"')   -> 'hello'
        unquote("'hi'")      -> 'hi'
        unquote('"mixed\\'')  -> '"mixed\\''
    """
    if len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]:
        return text[1:-1]
    return text


def quote(text: str) -> str:
    """Wrap *text* in double quotes. Embedded quotes are left alone."""
    return f'"{text}"'


def indent_of(line: str) -> int:
    """Column of the first non-whitespace character (0 for blank lines)."""
    return len(line) - len(line.lstrip())


def split_pair(text: str) -> tuple[str, str]:
    """Split ``key: value`` on the first colon; both halves trimmed."""
    key, _, value = text.partition(":")
    return key.strip(), value.strip()


def is_multiline(text: str) -> bool:
    return "\n" in text
