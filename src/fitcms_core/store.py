"""File stores: the content repository's persistence layer.

A store behaves like the Git contents API the admin panel talks to: every
file carries a content hash (``sha``) and overwriting a file requires the
hash that was read, so concurrent edits are detected rather than lost.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Protocol

from .errors import ConflictError, ContentValidationError

logger = logging.getLogger(__name__)


def content_sha(content: str) -> str:
    """Git blob hash of *content* encoded as UTF-8."""
    data = content.encode("utf-8")
    return hashlib.sha1(b"blob %d\0" % len(data) + data).hexdigest()


@dataclass
class StoredFile:
    path: str
    content: str
    sha: str


@dataclass
class Commit:
    path: str
    message: str
    sha: str


class FileStore(Protocol):
    def read(self, path: str) -> StoredFile | None: ...

    def write(self, path: str, content: str, message: str, sha: str | None = None) -> str: ...

    def list(self, directory: str) -> list[str]: ...


def _check_sha(path: str, current: str | None, supplied: str | None) -> None:
    if current is None:
        return
    if supplied != current:
        logger.warning("Rejected write to %s (sha %s, current %s)", path, supplied, current)
        raise ConflictError(path, supplied, current)


# ---------------------------------------------------------------------------
# In-memory store
# ---------------------------------------------------------------------------

@dataclass
class MemoryStore:
    """Dict-backed store that also records a commit log."""

    files: dict[str, str] = field(default_factory=dict)
    commits: list[Commit] = field(default_factory=list)

    def read(self, path: str) -> StoredFile | None:
        if path not in self.files:
            return None
        content = self.files[path]
        return StoredFile(path, content, content_sha(content))

    def write(self, path: str, content: str, message: str, sha: str | None = None) -> str:
        current = self.files.get(path)
        _check_sha(path, None if current is None else content_sha(current), sha)
        self.files[path] = content
        new_sha = content_sha(content)
        self.commits.append(Commit(path, message, new_sha))
        logger.debug("Committed %s: %s", path, message)
        return new_sha

    def list(self, directory: str) -> list[str]:
        prefix = directory.rstrip("/") + "/"
        return sorted(
            p for p in self.files
            if p.startswith(prefix) and "/" not in p[len(prefix):]
        )


# ---------------------------------------------------------------------------
# Directory store
# ---------------------------------------------------------------------------

class DirectoryStore:
    """Store rooted at a local directory, e.g. a checkout of the site repo."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        rel = PurePosixPath(path)
        if rel.is_absolute() or ".." in rel.parts:
            raise ContentValidationError(f"path escapes the store root: {path}")
        return self.root.joinpath(*rel.parts)

    def read(self, path: str) -> StoredFile | None:
        target = self._resolve(path)
        if not target.is_file():
            return None
        content = target.read_text(encoding="utf-8")
        return StoredFile(path, content, content_sha(content))

    def write(self, path: str, content: str, message: str, sha: str | None = None) -> str:
        target = self._resolve(path)
        current = target.read_text(encoding="utf-8") if target.is_file() else None
        _check_sha(path, None if current is None else content_sha(current), sha)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s: %s", path, message)
        return content_sha(content)

    def list(self, directory: str) -> list[str]:
        target = self._resolve(directory)
        if not target.is_dir():
            return []
        prefix = directory.rstrip("/")
        return sorted(f"{prefix}/{p.name}" for p in target.iterdir() if p.is_file())
