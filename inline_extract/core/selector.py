"""Selector generation and comparison."""

import random
import re
from typing import Optional, Sequence, Union

from ..utils.config import COMBINATOR_PATTERN, HASH_ALPHABET, HASH_LENGTH

SelectorStrategy = Union[str, Sequence[str]]

_COMBINATOR_RE = re.compile(COMBINATOR_PATTERN)

def format_class(class_name: str) -> str:
    """Format a class attribute value as a compound class selector.

    Args:
        class_name: Raw class attribute text, e.g. ``"btn  primary"``

    Returns:
        Selector such as ``".btn.primary"``, or ``''`` if there are no classes
    """
    tokens = (class_name or '').split()
    if not tokens:
        return ''
    selector = '.'.join(tokens)
    return selector if selector.startswith('.') else '.' + selector

def format_id(element_id: str) -> str:
    """Format an id attribute value as an id selector."""
    element_id = (element_id or '').strip()
    if not element_id:
        return ''
    return element_id if element_id.startswith('#') else '#' + element_id

def format_selector(selector: str) -> str:
    """Normalize spacing in a selector taken from a stylesheet."""
    selector = selector.strip().replace('>', ' > ')
    selector = re.sub(r' +,', ', ', selector)
    return re.sub(r'  +', ' ', selector)

def generate_hash(rng: random.Random, length: int = HASH_LENGTH) -> str:
    """Generate a random token usable as a class name.

    Tokens starting with a digit are regenerated.
    """
    while True:
        token = ''.join(rng.choice(HASH_ALPHABET) for _ in range(length))
        if not token[0].isdigit():
            return token

def generate_selector(class_name: str, element_id: str, strategy: SelectorStrategy,
                      rng: Optional[random.Random] = None) -> str:
    """Generate a selector for an element.

    Strategies are tried in order and the first non-empty selector wins.
    Names are checked once by ``resolve_selector``; anything else is skipped.
    
    Args:
        class_name: Raw class attribute text
        element_id: Raw id attribute text
        strategy: ``'class'``, ``'id'``, ``'hash'`` or an ordered list of them
        rng: Random source for the hash strategy
        
    Returns:
        Selector text, or ``''`` when no strategy produced one
    """
    strategies = (strategy,) if isinstance(strategy, str) else strategy
    for name in strategies:
        if name == 'class':
            selector = format_class(class_name)
        elif name == 'id':
            selector = format_id(element_id)
        elif name == 'hash':
            selector = '.' + generate_hash(rng or random.Random())
        else:
            continue
        if selector:
            return selector
    return ''

def has_combinator(selector: str) -> bool:
    """Check whether a selector contains combinator or grouping characters."""
    return bool(_COMBINATOR_RE.search(selector))

def compare_selectors(selector1: str, selector2: str) -> bool:
    """Compare two selectors to determine if they are equivalent.

    Selectors with combinators, grouping or pseudo-class arguments must match
    exactly. Compound class/id selectors match regardless of token order.
    """
    if has_combinator(selector1) or has_combinator(selector2):
        return selector1 == selector2
    return sorted(selector1.split('.')) == sorted(selector2.split('.'))

# Exported functions
__all__ = [
    'format_class',
    'format_id',
    'format_selector',
    'generate_hash',
    'generate_selector',
    'has_combinator',
    'compare_selectors',
]
