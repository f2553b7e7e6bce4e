"""Structural checks for stylesheet content."""

import re

from ..utils.error import StyleSheetParseError

_COMMENT_RE = re.compile(r'/\*.*?\*/', re.DOTALL)
_STRING_RE = re.compile(r'"(?:\\.|[^"\\\n])*"|\'(?:\\.|[^\'\\\n])*\'', re.DOTALL)

def strip_comments_and_strings(css: str) -> str:
    """Remove comments and quoted strings so their contents are not counted."""
    css = _COMMENT_RE.sub('', css)
    if '/*' in css:
        raise StyleSheetParseError("Unclosed comment")
    css = _STRING_RE.sub('', css)
    if '"' in css or "'" in css:
        raise StyleSheetParseError("Unclosed string")
    return css

def is_balanced(text: str, open_char: str, close_char: str) -> bool:
    """Check if brackets/parentheses are balanced in text."""
    count = 0
    for char in text:
        if char == open_char:
            count += 1
        elif char == close_char:
            count -= 1
            if count < 0:
                return False
    return count == 0

def validate_style_block(css: str) -> None:
    """Validate the content of a <style> block before parsing.

    Args:
        css: Stylesheet text

    Raises:
        StyleSheetParseError: If blocks or parentheses are unbalanced
    """
    text = strip_comments_and_strings(css)
    if not is_balanced(text, '{', '}'):
        raise StyleSheetParseError("Unbalanced braces in style block")
    if not is_balanced(text, '(', ')'):
        raise StyleSheetParseError("Unbalanced parentheses in style block")

# Exported functions
__all__ = [
    'strip_comments_and_strings',
    'is_balanced',
    'validate_style_block',
]
