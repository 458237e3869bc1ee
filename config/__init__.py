"""Configuration loading and management."""

from .loader import (
    DEFAULT_INPUT_EXTENSIONS,
    get_input_extensions,
    get_mask_elements,
    get_output_config,
    load_config,
)

__all__ = [
    "DEFAULT_INPUT_EXTENSIONS",
    "get_input_extensions",
    "get_mask_elements",
    "get_output_config",
    "load_config",
]
