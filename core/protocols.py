"""Protocol definitions for dependency abstraction.

Defines interfaces for external dependencies to enable:
- Dependency Injection
- Easy mocking in tests
- Clear layer boundaries
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerProtocol(Protocol):
    """Protocol for logging operations.

    Implementations:
    - MaskingLogger (production)
    - NullLogger / recording loggers (tests)
    """

    def log(self, message: str) -> None:
        """Log a message."""
        ...

    def setup_file_handler(self, path: Path) -> None:
        """Set up file handler for logging."""
        ...


@runtime_checkable
class TextReaderProtocol(Protocol):
    """Protocol for reading text documents.

    Implementations:
    - TextReader (production - XML and other markup text files)
    - MockTextReader (tests)
    """

    def read(self, file_path: str) -> str:
        """Read a document as text.

        Args:
            file_path: Path to the document

        Returns:
            Document content as string

        Raises:
            FileNotFoundError: If file does not exist
            ValueError: If file format is not supported
        """
        ...


class NullLogger:
    """Null object pattern for logger - does nothing."""

    def log(self, message: str) -> None:
        pass

    def setup_file_handler(self, path: Path) -> None:
        pass
