"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Any


class Segmenter(Protocol):
    """Anything that turns a block of text into ordered sentence strings."""

    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences.

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of sentences, in input order
        """
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...
