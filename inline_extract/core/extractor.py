"""Core inline style extraction functionality."""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.html import find_style_blocks, find_styled_elements, get_attribute, parse_html
from ..utils.logging import get_logger
from .formatter import format_css
from .options import ExtractOptions, resolve_options
from .properties import format_prop, format_props, merge_props
from .selector import compare_selectors, format_selector, generate_selector
from .stylesheet import parse_style_rules

logger = get_logger(__name__)

@dataclass
class StyleRule:
    """A selector and its sorted declarations."""
    selector: str
    props: List[str] = field(default_factory=list)

def merge_style(styles: List[StyleRule], selector: str, props: List[str]) -> List[StyleRule]:
    """Fold a selector and its properties into the collected styles.

    The first rule with an equivalent selector absorbs the properties in
    place; otherwise a new rule is appended.
    
    Args:
        styles: Collected rules, updated in place
        selector: Formatted selector
        props: Declarations for the selector
        
    Returns:
        The updated list
    """
    for style in styles:
        if compare_selectors(style.selector, selector):
            style.props = merge_props(style.props, props)
            return styles
    styles.append(StyleRule(selector, merge_props([], props)))
    return styles

def extract_styles(options: ExtractOptions, rng: Optional[random.Random] = None) -> List[StyleRule]:
    """Extract styles from HTML content.

    Inline ``style`` attributes are collected first, in document order, then
    the rules of ``<style>`` blocks when ``options.style_tags`` is set.
    
    Args:
        options: Resolved extraction options
        rng: Random source for hash selectors
        
    Returns:
        Collected rules in first-seen order
        
    Raises:
        StyleSheetParseError: If a <style> block is malformed
    """
    rng = rng or random.Random()
    soup = parse_html(options.html)
    styles: List[StyleRule] = []

    for element in find_styled_elements(soup):
        selector = generate_selector(
            get_attribute(element, 'class'),
            get_attribute(element, 'id'),
            options.selector,
            rng
        )
        if not selector:
            logger.debug(f"Skipping <{element.name}> without a usable selector")
            continue
        merge_style(styles, selector, format_props(get_attribute(element, 'style')))

    if options.style_tags:
        for block in find_style_blocks(soup):
            for selector, declarations in parse_style_rules(block.get_text()):
                props = [format_prop(declaration) for declaration in declarations]
                merge_style(styles, format_selector(selector), props)

    logger.debug(f"Extracted {len(styles)} rules")
    return styles

def extract_css(html: str, selector='class', style_tags: bool = False, indent: int = 2,
                rng: Optional[random.Random] = None) -> str:
    """Extract inline styles from HTML and return them as CSS text.

    Raises:
        ConfigurationError: If the selector strategy is invalid
        StyleSheetParseError: If a <style> block is malformed
    """
    options = resolve_options(html=html, selector=selector, style_tags=style_tags, indent=indent)
    return format_css(extract_styles(options, rng), options.indent)

# Exported names
__all__ = [
    'StyleRule',
    'merge_style',
    'extract_styles',
    'extract_css',
]
