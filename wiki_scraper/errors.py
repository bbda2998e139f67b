"""Error types raised by the extraction pipeline."""

from typing import Optional


class WikiScraperError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(WikiScraperError, ValueError):
    """A rule document is malformed or one of its patterns does not compile.

    Fatal: the run is aborted before any article is processed.
    """

    def __init__(self, message: str, language: Optional[str] = None, field: Optional[str] = None):
        self.language = language
        self.field = field
        prefix = []
        if language:
            prefix.append(f"language={language}")
        if field:
            prefix.append(f"field={field}")
        if prefix:
            message = f"[{' '.join(prefix)}] {message}"
        super().__init__(message)


class InputReadError(WikiScraperError):
    """A single article (or input file) cannot be read or decoded.

    Recoverable: the article is skipped and processing continues.
    """

    def __init__(self, message: str, source: str):
        self.source = source
        super().__init__(f"{source}: {message}")
