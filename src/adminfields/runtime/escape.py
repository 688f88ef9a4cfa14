"""HTML escaping utilities for XSS prevention."""

from typing import Any


def escape_html(value: Any) -> str:
    """Escape HTML special characters to prevent XSS.

    Escapes: & < > "

    Args:
        value: Any value to escape (will be converted to string first)

    Returns:
        HTML-escaped string safe for embedding in HTML content or inside a
        double-quoted attribute value
    """
    s = str(value)
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def to_html(content: Any) -> str:
    """Convert element content to HTML.

    Objects exposing ``__html__`` (``markupsafe.Markup``, fields, elements)
    are trusted markup and inserted verbatim; anything else is escaped.
    """
    if content is None:
        return ""
    if hasattr(content, "__html__"):
        return str(content.__html__())
    return escape_html(content)
