"""
Exception classes raised by the tokenizers and the text sources they read from.
"""


class TokenizerError(Exception):
    """Base class for every error raised by itx."""


class FileError(TokenizerError):
    """A file could not be opened for reading."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class SourceReadError(TokenizerError):
    """A read failed after the source was opened successfully."""


class InvalidPattern(TokenizerError):
    """A regular expression failed to compile."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class NoTokenAvailable(TokenizerError, LookupError):
    """next() was called with no pending token."""


class UnknownMode(TokenizerError):
    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"Unknown mode: {mode}")


class MissingPattern(TokenizerError):
    def __init__(self):
        super().__init__("Regex mode requires a pattern argument")


class ConfigError(TokenizerError):
    """The configuration file is malformed or has unknown keys."""
