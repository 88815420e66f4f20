"""Exception hierarchy for splitter construction and configuration."""


class SentenceSplitterError(Exception):
    """Base class for all sentencesplit errors."""
    pass


class InvalidLanguageCode(SentenceSplitterError):
    """Language code is not two lowercase ASCII letters."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invalid language code: {code!r}")


class PrefixFileNotFound(SentenceSplitterError):
    """Explicit non-breaking prefix file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Non-breaking prefix file not found at path: {path}")


class PrefixFileReadError(SentenceSplitterError):
    """Explicit non-breaking prefix file exists but cannot be read."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read prefix file {path}: {cause}")


class PatternError(SentenceSplitterError):
    """A built-in pattern failed to compile."""

    def __init__(self, pattern: str, cause: Exception):
        self.pattern = pattern
        self.cause = cause
        super().__init__(f"Invalid pattern {pattern!r}: {cause}")


class ConfigLoadError(SentenceSplitterError):
    """Exception raised when config loading or validation fails."""
    pass
