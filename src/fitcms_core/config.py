"""Content layout configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

DEFAULT_CONTENT_DIR = "content"
SECTION_NAMES = ("about", "quotes", "workouts", "site")


def _default_sections(content_dir: str = DEFAULT_CONTENT_DIR) -> dict[str, str]:
    return {name: f"{content_dir}/{name}.yml" for name in SECTION_NAMES}


@dataclass
class ContentConfig:
    """Where each kind of content lives inside the store."""

    sections: dict[str, str] = field(default_factory=_default_sections)
    blog_dir: str = f"{DEFAULT_CONTENT_DIR}/blog"
    post_suffix: str = ".md"

    def section_path(self, name: str) -> str | None:
        return self.sections.get(name)

    def post_path(self, slug: str) -> str:
        return f"{self.blog_dir}/{slug}{self.post_suffix}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ContentConfig":
        """Build a config from ``FITCMS_CONTENT_DIR`` / ``FITCMS_BLOG_DIR``."""
        env = os.environ if environ is None else environ
        content_dir = env.get("FITCMS_CONTENT_DIR", DEFAULT_CONTENT_DIR).rstrip("/")
        blog_dir = env.get("FITCMS_BLOG_DIR", f"{content_dir}/blog").rstrip("/")
        return cls(sections=_default_sections(content_dir), blog_dir=blog_dir)
