"""Content repository: site sections and blog posts on top of a FileStore."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone

from .config import ContentConfig
from .document import Document
from .errors import ContentNotFoundError, ContentValidationError
from .frontmatter import compose, split
from .reader import parse
from .store import FileStore
from .values import VMapping
from .writer import serialize

logger = logging.getLogger(__name__)

BLOG = "blog"

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """``"My First 5K!"`` → ``"my-first-5k"``."""
    return _SLUG_RE.sub("-", title.lower()).strip("-")


@dataclass
class BlogPost:
    slug: str
    sha: str
    document: Document

    @property
    def metadata(self) -> VMapping:
        return self.document.metadata

    @property
    def body(self) -> str:
        return self.document.body


def _post_date(post: BlogPost) -> datetime:
    raw = post.document.date.strip()
    if raw.endswith(("Z", "z")):
        # fromisoformat only accepts the Z suffix from 3.11 on
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return datetime.min
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class ContentRepository:
    """Reads and writes the site's YAML sections and Markdown posts."""

    def __init__(self, store: FileStore, config: ContentConfig | None = None) -> None:
        self.store = store
        self.config = config or ContentConfig()

    # -- Sections -------------------------------------------------------

    def types(self) -> list[str]:
        return [*self.config.sections, BLOG]

    def _section_path(self, name: str) -> str:
        path = self.config.section_path(name)
        if path is None:
            raise ContentNotFoundError(f"Content type not found: {name}")
        return path

    def get_section(self, name: str) -> tuple[VMapping, str]:
        """Return the parsed section and its sha."""
        path = self._section_path(name)
        stored = self.store.read(path)
        if stored is None:
            raise ContentNotFoundError(f"Content not found: {path}")
        return parse(stored.content), stored.sha

    def put_section(self, name: str, data: VMapping, sha: str | None = None) -> str:
        path = self._section_path(name)
        new_sha = self.store.write(path, serialize(data), f"Update {name} via admin panel", sha)
        logger.info("Updated section %s (%s)", name, new_sha)
        return new_sha

    # -- Blog posts -----------------------------------------------------

    def list_posts(self) -> list[BlogPost]:
        """All posts, newest ``date`` first; undated posts last."""
        posts: list[BlogPost] = []
        suffix = self.config.post_suffix
        for path in self.store.list(self.config.blog_dir):
            name = path.rsplit("/", 1)[-1]
            if not name.endswith(suffix):
                continue
            stored = self.store.read(path)
            if stored is None:
                continue
            posts.append(BlogPost(name[: -len(suffix)], stored.sha, split(stored.content)))
        posts.sort(key=_post_date, reverse=True)
        return posts

    def get_post(self, slug: str) -> BlogPost:
        stored = self.store.read(self.config.post_path(slug))
        if stored is None:
            raise ContentNotFoundError(f"Post not found: {slug}")
        return BlogPost(slug, stored.sha, split(stored.content))

    def create_post(self, metadata: VMapping, body: str = "") -> str:
        """Write a new post and return its slug (derived from the title)."""
        title = metadata.text("title").strip()
        if not title:
            raise ContentValidationError("Title is required")
        slug = slugify(title)
        if not slug:
            raise ContentValidationError(f"Title has no usable characters: {title!r}")
        self.store.write(
            self.config.post_path(slug),
            compose(metadata, body),
            f"Add new blog post: {title}",
        )
        logger.info("Created post %s", slug)
        return slug

    def update_post(
        self, slug: str, metadata: VMapping, body: str = "", sha: str | None = None
    ) -> str:
        """Overwrite post *slug*; *sha* must match the stored version."""
        title = metadata.text("title") or slug
        new_sha = self.store.write(
            self.config.post_path(slug),
            compose(metadata, body),
            f"Update blog post: {title}",
            sha,
        )
        logger.info("Updated post %s (%s)", slug, new_sha)
        return new_sha
