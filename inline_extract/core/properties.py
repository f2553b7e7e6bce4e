"""Style declaration parsing and merging."""

from typing import Iterable, List, Optional

def format_prop(fragment: str) -> str:
    """Normalize a single ``name:value`` fragment to ``"name: value"``.

    Fragments without a colon are returned trimmed but otherwise untouched.
    """
    name, sep, value = fragment.partition(':')
    if not sep:
        return fragment.strip()
    return f"{name.strip()}: {value.strip()}"

def format_props(style: Optional[str]) -> List[str]:
    """Format a style attribute value into a sorted list of declarations.

    Args:
        style: Raw ``style`` attribute text

    Returns:
        Sorted, de-duplicated ``"name: value"`` strings
    """
    if not style:
        return []
    return merge_props([], [format_prop(fragment) for fragment in style.split(';') if fragment.strip()])

def merge_props(props1: Iterable[str], props2: Iterable[str]) -> List[str]:
    """Merge two sets of properties, removing duplicates and sorting the result."""
    return sorted(set(props1) | set(props2))

# Exported functions
__all__ = [
    'format_prop',
    'format_props',
    'merge_props',
]
