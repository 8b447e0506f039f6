"""
Error hierarchy for URL resolution.

Every error carries the stage that failed (``op``) and the token that was
being processed (``url``) so a caller can report which argument broke and
where. Batch resolution additionally records the argument ``position``.
"""


class MCError(Exception):
    """Base class for all mc_client errors."""

    def __init__(self, message: str, *, op: str = "", url: str | None = None):
        super().__init__(message)
        self.message = message
        self.op = op
        self.url = url
        self.position: int | None = None

    def __str__(self) -> str:
        text = f"{self.op}: {self.message}" if self.op else self.message
        if self.url is not None:
            text = f"{text} (url={self.url!r})"
        if self.position is not None:
            text = f"{text} [argument {self.position}]"
        return text


class EmptyInputError(MCError):
    """An empty URL was given where one is required."""


class URLParseError(MCError):
    """The token is not a syntactically valid URL."""


class ClassificationError(MCError):
    """The URL type does not match what the operation requires."""


class InvalidURLError(MCError):
    """The URL is well-formed but structurally disallowed."""


class UnsupportedSchemeError(MCError):
    """The URL scheme is neither object storage nor local file."""


class ConfigError(MCError):
    """Required configuration is missing."""


class ConfigLoadError(ConfigError):
    """Configuration could not be loaded or failed validation."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message, op="config")
        self.errors = errors or []

    def __str__(self) -> str:
        text = super().__str__()
        if self.errors:
            error_list = "\n  - ".join(self.errors)
            return f"{text}\n  - {error_list}"
        return text


class AliasResolutionError(MCError):
    """An alias is invalid or its expansion does not yield a valid URL."""
