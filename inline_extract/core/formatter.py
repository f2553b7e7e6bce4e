"""CSS text output."""

from typing import List

def format_css(styles: List, indent: int) -> str:
    """Format extracted styles into a string of CSS.

    Rules are separated by a blank line; a rule without properties is still
    written as an empty block.
    
    Args:
        styles: Rules with ``selector`` and ``props`` attributes
        indent: Number of spaces to indent declarations with
        
    Returns:
        CSS text, empty if there are no rules
    """
    pad = ' ' * indent
    lines = []
    for style in styles:
        lines.append(f"{style.selector} {{")
        for prop in style.props:
            lines.append(f"{pad}{prop};")
        lines.append('}\n')
    return '\n'.join(lines)

# Exported functions
__all__ = ['format_css']
