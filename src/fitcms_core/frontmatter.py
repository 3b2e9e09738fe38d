"""Frontmatter codec: ``---`` delimited metadata followed by a body."""

from __future__ import annotations

import logging
import re

from .document import Document
from .reader import parse
from .values import VMapping
from .writer import serialize

logger = logging.getLogger(__name__)

DELIMITER = "---"

_FRONTMATTER_RE = re.compile(
    r"\A---\r?\n"          # opening delimiter
    r"(?:(.*?)\r?\n)?"     # metadata block (may be empty)
    r"---(?:\r?\n(.*))?\Z",  # closing delimiter, then the body
    re.DOTALL,
)


def has_frontmatter(text: str) -> bool:
    """True when *text* starts with a complete ``---`` delimited block."""
    return _FRONTMATTER_RE.match(text) is not None


def split(text: str) -> Document:
    """Split *text* into a :class:`Document`.

    Text without a leading frontmatter block comes back unchanged as the
    body, with empty metadata. The body is trimmed.
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        logger.debug("No frontmatter block found")
        return Document(VMapping(), text)

    meta, body = match.group(1), match.group(2)
    return Document(parse(meta or ""), (body or "").strip())


def compose(metadata: VMapping, body: str) -> str:
    """Join *metadata* and *body* into a single Markdown document.

    The body is written verbatim after a blank line.
    """
    return f"{DELIMITER}\n{serialize(metadata)}{DELIMITER}\n\n{body}"
