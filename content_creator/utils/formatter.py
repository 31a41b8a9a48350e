"""Render generated text for display in the browser front-end."""
import html
import re

_LINE_BREAK = re.compile(r"\\n|\r?\n")
_BOLD = re.compile(r"\*\*(.+?)\*\*")


def to_display_html(text: str) -> str:
    """Escape markup, then convert line breaks (including literal "\\n") into <br> tags."""
    return _LINE_BREAK.sub("<br>", html.escape(text))


def strip_markup(text: str) -> str:
    """Drop **bold** markers, leaving the plain words"""
    return _BOLD.sub(r"\1", text)
