"""Shared fixtures for xmlmasking tests."""

import shutil
import tempfile
from pathlib import Path

import pytest

from masking_logging import MaskingLogger


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)

    # Close all logger handlers before cleanup
    MaskingLogger().close()

    # Clean up temp directory, ignore errors on Windows
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_config():
    """Sample config matching the structure in config.yaml."""
    return {
        "masking": {
            "elements": ["password", "secret"],
        },
        "input": {
            "extensions": [".xml", ".txt"],
        },
        "output": {
            "directory": "output",
            "log_suffix": "_log.txt",
        },
    }


@pytest.fixture
def masking_logger_instance():
    """Get a masking logger instance."""
    logger = MaskingLogger()
    yield logger
    logger.close()


class RecordingLogger:
    """Logger double that keeps logged messages in memory."""

    def __init__(self):
        self.messages: list[str] = []
        self.file_handlers: list[Path] = []

    def log(self, message: str) -> None:
        self.messages.append(message)

    def setup_file_handler(self, path: Path) -> None:
        self.file_handlers.append(path)


@pytest.fixture
def recording_logger():
    return RecordingLogger()
