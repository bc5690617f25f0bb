"""Localized strings and title helpers shared by the renderer and the CLI."""

from .messages import DEFAULT_LOCALE, MESSAGES, get_message, resolve_locale
from .text import download_filename, format_title, safe_filename

__all__ = [
    "DEFAULT_LOCALE",
    "MESSAGES",
    "get_message",
    "resolve_locale",
    "download_filename",
    "format_title",
    "safe_filename",
]
