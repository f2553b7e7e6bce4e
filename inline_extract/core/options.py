"""Extraction options and their defaults."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from ..utils.config import DEFAULT_INDENT, DEFAULT_SELECTOR, SELECTOR_TYPES
from ..utils.error import ConfigurationError

@dataclass(frozen=True)
class ExtractOptions:
    """Fully resolved options for one extraction run."""
    html: str = ''
    selector: Union[str, Tuple[str, ...]] = DEFAULT_SELECTOR
    style_tags: bool = False
    indent: int = DEFAULT_INDENT

def resolve_indent(indent: Any) -> int:
    """Return ``indent`` if it is a positive integer, else the default."""
    if isinstance(indent, bool) or not isinstance(indent, int) or indent <= 0:
        return DEFAULT_INDENT
    return indent

def resolve_selector(selector: Any) -> Union[str, Tuple[str, ...]]:
    """Validate a selector strategy or ordered list of strategies.

    Raises:
        ConfigurationError: If a strategy is unknown or the list is empty
    """
    if selector is None:
        return DEFAULT_SELECTOR
    names = (selector,) if isinstance(selector, str) else tuple(selector)
    if not names:
        raise ConfigurationError("At least one selector type is required")
    for name in names:
        if name not in SELECTOR_TYPES:
            raise ConfigurationError(
                f"Unknown selector type {name!r}, expected one of {', '.join(SELECTOR_TYPES)}")
    return selector if isinstance(selector, str) else names

def resolve_options(options: Optional[Mapping[str, Any]] = None, **overrides) -> ExtractOptions:
    """Build ExtractOptions from a mapping, applying defaults.

    Missing or ``None`` values take their defaults. ``styleTags`` is accepted
    as an alias for ``style_tags``.
    
    Args:
        options: Option mapping (``html``, ``selector``, ``style_tags``, ``indent``)
        **overrides: Options taking precedence over the mapping
        
    Returns:
        Resolved options
        
    Raises:
        ConfigurationError: If the selector strategy is invalid
    """
    values = dict(options or {})
    values.update(overrides)
    if 'styleTags' in values and values.get('style_tags') is None:
        values['style_tags'] = values.pop('styleTags')
    html = values.get('html')
    return ExtractOptions(
        html=html if isinstance(html, str) else '',
        selector=resolve_selector(values.get('selector')),
        style_tags=bool(values.get('style_tags')),
        indent=resolve_indent(values.get('indent')),
    )

# Exported names
__all__ = ['ExtractOptions', 'resolve_indent', 'resolve_selector', 'resolve_options']
