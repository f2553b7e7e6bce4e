"""Inline Extract: turn inline HTML styles into a stylesheet."""

from .core import StyleRule, ExtractOptions, extract_styles, extract_css, format_css, resolve_options
from .plugin import InlineExtractPlugin, ProcessResult, Diagnostic, process
from .utils.config import VERSION
from .utils.error import InlineExtractError, StyleSheetParseError, ConfigurationError

__version__ = VERSION

__all__ = [
    'StyleRule',
    'ExtractOptions',
    'extract_styles',
    'extract_css',
    'format_css',
    'resolve_options',
    'InlineExtractPlugin',
    'ProcessResult',
    'Diagnostic',
    'process',
    'InlineExtractError',
    'StyleSheetParseError',
    'ConfigurationError',
]
