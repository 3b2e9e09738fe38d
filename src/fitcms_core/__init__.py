"""fitcms core: YAML-subset and frontmatter codec for a Git-backed blog."""

from .document import Document
from .frontmatter import compose, has_frontmatter, split
from .reader import parse
from .writer import serialize
from .values import (
    Empty,
    Value,
    VList,
    VMapping,
    VScalar,
    _Empty,
)
from .convert import normalize, to_mapping, to_python, to_value
from .config import ContentConfig
from .content import BlogPost, ContentRepository, slugify
from .store import DirectoryStore, FileStore, MemoryStore, StoredFile, content_sha
from .errors import (
    ConflictError,
    ContentNotFoundError,
    ContentValidationError,
    FitCMSError,
)

__all__ = [
    "parse",
    "serialize",
    "split",
    "compose",
    "has_frontmatter",
    "Document",
    "Empty",
    "Value",
    "VList",
    "VMapping",
    "VScalar",
    "normalize",
    "to_mapping",
    "to_python",
    "to_value",
    "ContentConfig",
    "ContentRepository",
    "BlogPost",
    "slugify",
    "FileStore",
    "MemoryStore",
    "DirectoryStore",
    "StoredFile",
    "content_sha",
    "FitCMSError",
    "ContentNotFoundError",
    "ConflictError",
    "ContentValidationError",
]
