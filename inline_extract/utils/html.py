"""HTML content handling functionality."""

from typing import List
from bs4 import BeautifulSoup, Tag

def parse_html(html: str) -> BeautifulSoup:
    """Parse HTML content.

    Attribute values are kept as the raw strings found in the markup, so a
    multi-token ``class`` attribute is returned as text rather than a list.
    
    Args:
        html: HTML content to parse
        
    Returns:
        BeautifulSoup object (empty for empty input)
    """
    return BeautifulSoup(html or '', 'html.parser', multi_valued_attributes=None)

def find_styled_elements(soup: BeautifulSoup) -> List[Tag]:
    """Return elements carrying a style attribute, in document order.

    Empty and whitespace-only attribute values are included.
    """
    return soup.find_all(style=True)

def find_style_blocks(soup: BeautifulSoup) -> List[Tag]:
    """Return <style> elements in document order."""
    return soup.find_all('style')

def get_attribute(element: Tag, name: str) -> str:
    """Get an attribute value as text, empty when absent."""
    value = element.get(name)
    if value is None:
        return ''
    if isinstance(value, list):
        return ' '.join(value)
    return value

# Exported functions
__all__ = [
    'parse_html',
    'find_styled_elements',
    'find_style_blocks',
    'get_attribute',
]
