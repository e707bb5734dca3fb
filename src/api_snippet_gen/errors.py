"""Error hierarchy for api-snippet-gen.

Every error carries a class-level ``exit_code`` used by the CLI. Errors raised
by a single generation call derive from :class:`SnippetError` and also carry an
``kind`` so callers can tell input-shape problems apart from assembly bugs::

    SnippetGenError (exit 1)
    +-- DescriptorError      (exit 2)
    +-- UnknownLanguageError (exit 2)
    +-- ConfigError          (exit 2)
    +-- SnippetError         (exit 3)
        +-- MissingBodyError        kind=missing_body
        +-- UnsupportedMethodError  kind=unsupported_method
        +-- SnippetAssemblyError    kind=assembly
"""

import enum

EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2
EXIT_GENERATION_FAILED = 3


class ErrorKind(str, enum.Enum):
    """Why a generation call failed."""

    MISSING_BODY = "missing_body"
    UNSUPPORTED_METHOD = "unsupported_method"
    ASSEMBLY = "assembly"


class SnippetGenError(Exception):
    """Base class for all api-snippet-gen errors."""

    exit_code: int = EXIT_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class DescriptorError(SnippetGenError):
    """Raised when a request descriptor file or entry cannot be loaded."""

    exit_code = EXIT_INVALID_INPUT


class UnknownLanguageError(SnippetGenError):
    """Raised when no grammar is registered for the requested language."""

    exit_code = EXIT_INVALID_INPUT


class ConfigError(SnippetGenError):
    """Raised for unreadable or invalid settings."""

    exit_code = EXIT_INVALID_INPUT


class SnippetError(SnippetGenError):
    """A single snippet could not be generated. No partial text is produced."""

    exit_code = EXIT_GENERATION_FAILED
    kind: ErrorKind = ErrorKind.ASSEMBLY

    @property
    def recoverable(self) -> bool:
        """True when the failure is the caller's input, not an assembly bug."""
        return self.kind is not ErrorKind.ASSEMBLY


class MissingBodyError(SnippetError):
    kind = ErrorKind.MISSING_BODY


class UnsupportedMethodError(SnippetError):
    kind = ErrorKind.UNSUPPORTED_METHOD


class SnippetAssemblyError(SnippetError):
    kind = ErrorKind.ASSEMBLY
