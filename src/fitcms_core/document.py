"""Document: a Markdown post split into metadata and body."""

from __future__ import annotations

from dataclasses import dataclass, field

from .values import Value, VMapping


@dataclass
class Document:
    """Holds the frontmatter metadata and the free-text body of a post."""

    metadata: VMapping = field(default_factory=VMapping)
    body: str = ""

    # -- Convenience accessors ------------------------------------------

    def get(self, key: str) -> Value:
        return self.metadata.get(key)

    @property
    def title(self) -> str:
        return self.metadata.text("title")

    @property
    def date(self) -> str:
        return self.metadata.text("date")

    # -- Text round trip ------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> "Document":
        from .frontmatter import split
        return split(text)

    def to_text(self) -> str:
        from .frontmatter import compose
        return compose(self.metadata, self.body)
