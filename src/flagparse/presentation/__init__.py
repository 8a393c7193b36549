"""Presentation layer: error and usage text, plain and Rich-rendered."""

from flagparse.presentation.formatters import (
    NO_ERROR_MESSAGE,
    format_default,
    format_error,
    format_options,
    render_error,
    render_options,
)
from flagparse.presentation.printer import print_error, print_options

__all__ = [
    "NO_ERROR_MESSAGE",
    "format_default",
    "format_error",
    "format_options",
    "render_error",
    "render_options",
    "print_error",
    "print_options",
]
