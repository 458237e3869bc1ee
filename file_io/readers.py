"""Text reading utilities for XML-like documents.

Supports plain markup text files (.xml, .soap, .wsdl, .xsd, .html, .txt, .log).

Provides both function-based API and class-based API (for dependency
injection).
"""

import os

from config.loader import DEFAULT_INPUT_EXTENSIONS


def read_text(file_path: str, extensions: list[str] | None = None) -> str:
    """
    Read a document as UTF-8 text.

    Args:
        file_path: Path to the document
        extensions: Accepted extensions (default: DEFAULT_INPUT_EXTENSIONS)

    Returns:
        Document content as string

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If file format is not supported
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    extensions = extensions or DEFAULT_INPUT_EXTENSIONS
    _, ext = os.path.splitext(file_path)
    ext = ext.lower()

    if ext not in extensions:
        raise ValueError(
            f"Unsupported file format: {ext or '(none)'}. "
            f"Supported formats: {', '.join(extensions)}"
        )

    # newline="" keeps line endings as-is so unmasked content is echoed unchanged
    with open(file_path, encoding="utf-8", newline="") as f:
        return f.read()


class TextReader:
    """Text reader implementing TextReaderProtocol.

    Usage:
        reader = TextReader()
        text = reader.read("request.xml")
    """

    def __init__(self, extensions: list[str] | None = None):
        self.extensions = extensions or list(DEFAULT_INPUT_EXTENSIONS)

    def read(self, file_path: str) -> str:
        """Read a document as text.

        Raises:
            FileNotFoundError: If file does not exist
            ValueError: If file format is not supported
        """
        return read_text(file_path, self.extensions)


class MockTextReader:
    """Mock text reader for testing.

    Implements: core.protocols.TextReaderProtocol

    Usage:
        reader = MockTextReader("<a><password>x</password></a>")
        text = reader.read("any_path.xml")  # Returns the configured text
    """

    def __init__(self, return_text: str = ""):
        self._return_text = return_text
        self.read_called_with: list[str] = []  # Track calls for assertions

    def read(self, file_path: str) -> str:
        self.read_called_with.append(file_path)
        return self._return_text
