"""Exception hierarchy for fitcms_core.

The codec itself never raises on bad input; these errors come from the
content repository and the file stores::

    FitCMSError
    ├── ContentNotFoundError   - unknown section, missing file or post
    ├── ConflictError          - stale or missing content hash on write
    └── ContentValidationError - request data the repository cannot store
"""


class FitCMSError(Exception):
    """Base class for all fitcms_core errors."""


class ContentNotFoundError(FitCMSError):
    """Raised when a section, file or blog post does not exist."""


class ConflictError(FitCMSError):
    """Raised when a write does not carry the file's current content hash.

    Attributes:
        path: Store path that was being written.
        expected: Hash supplied by the caller (``None`` if omitted).
        actual: Hash currently stored.
    """

    def __init__(self, path: str, expected: str | None, actual: str) -> None:
        self.path = path
        self.expected = expected
        self.actual = actual
        if expected is None:
            msg = f"{path} already exists; its current sha is required"
        else:
            msg = f"{path} changed: expected sha {expected}, found {actual}"
        super().__init__(msg)


class ContentValidationError(FitCMSError):
    """Raised when submitted content is missing required fields."""
