"""Core functionality for inline style extraction."""

from .extractor import StyleRule, merge_style, extract_styles, extract_css
from .formatter import format_css
from .options import ExtractOptions, resolve_options
from .properties import format_prop, format_props, merge_props
from .selector import compare_selectors, format_selector, generate_selector, generate_hash
from .stylesheet import parse_style_rules
from .validator import validate_style_block

__all__ = [
    'StyleRule',
    'merge_style',
    'extract_styles',
    'extract_css',
    'format_css',
    'ExtractOptions',
    'resolve_options',
    'format_props',
    'format_prop',
    'merge_props',
    'compare_selectors',
    'format_selector',
    'generate_selector',
    'generate_hash',
    'parse_style_rules',
    'validate_style_block',
]
