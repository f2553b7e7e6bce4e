"""Reading style rules out of <style> blocks."""

from typing import List, Tuple

from cssutils.tokenize2 import Tokenizer

from ..utils.error import StyleSheetParseError
from .validator import validate_style_block

# (type, value, line, column) as produced by the cssutils tokenizer
Token = Tuple[str, str, int, int]

def tokenize(css: str) -> List[Token]:
    """Tokenize stylesheet text, dropping comments.

    Token values are the source text, so declarations can be rendered exactly
    as written.

    Raises:
        StyleSheetParseError: If a string is left unterminated
    """
    tokens = []
    for token in Tokenizer().tokenize(css):
        if token[0] == 'COMMENT':
            continue
        if token[0] == 'INVALID':
            raise StyleSheetParseError(f"Unclosed string at line {token[2]}, column {token[3]}")
        tokens.append(token)
    return tokens

def _text(tokens: List[Token]) -> str:
    return ''.join(token[1] for token in tokens).strip()

def _selector_text(tokens: List[Token]) -> str:
    return ''.join(' ' if token[0] == 'S' else token[1] for token in tokens).strip()

def _line(tokens: List[Token]) -> int:
    return tokens[0][2] if tokens else 0

def read_block(tokens: List[Token], start: int) -> Tuple[List[Token], int]:
    """Return the tokens inside the block opened at ``start`` and the position after it.

    Raises:
        StyleSheetParseError: If the block is never closed
    """
    depth = 0
    for pos in range(start, len(tokens)):
        value = tokens[pos][1]
        if value == '{':
            depth += 1
        elif value == '}':
            depth -= 1
            if not depth:
                return tokens[start + 1:pos], pos + 1
    raise StyleSheetParseError(f"Unclosed block at line {tokens[start][2]}")

def _add_declaration(declarations: List[str], tokens: List[Token]) -> None:
    text = _text(tokens)
    if not text or text.startswith('@'):
        return
    name, sep, _ = text.partition(':')
    if not sep or not name.strip():
        raise StyleSheetParseError(f"Unknown word {text!r} at line {_line(tokens)}")
    declarations.append(text)

def split_declarations(tokens: List[Token]) -> List[str]:
    """Split the body of a rule into declaration texts.

    Nested blocks are skipped along with their selector; declarations before
    and after them are kept. Nested at-rules without a block are ignored.

    Args:
        tokens: Tokens between a rule's braces

    Returns:
        ``name:value`` texts in source order

    Raises:
        StyleSheetParseError: If a declaration has no property name or colon
    """
    declarations = []
    current = []
    pos = 0
    while pos < len(tokens):
        value = tokens[pos][1]
        if value == '{':
            _, pos = read_block(tokens, pos)
            current = []
            continue
        if value == ';':
            _add_declaration(declarations, current)
            current = []
        else:
            current.append(tokens[pos])
        pos += 1
    _add_declaration(declarations, current)
    return declarations

def parse_style_rules(css: str) -> List[Tuple[str, List[str]]]:
    """Parse the top-level style rules of a <style> block.

    At-rules (``@import``, ``@media`` and the like) are skipped together with
    their blocks.

    Args:
        css: Stylesheet text

    Returns:
        ``(selector, declarations)`` pairs in source order

    Raises:
        StyleSheetParseError: If the stylesheet is malformed
    """
    validate_style_block(css)
    tokens = tokenize(css)
    rules = []
    prelude = []
    pos = 0
    while pos < len(tokens):
        value = tokens[pos][1]
        if value == '{':
            selector = _selector_text(prelude)
            if not selector:
                raise StyleSheetParseError(f"Missing selector at line {tokens[pos][2]}")
            body, pos = read_block(tokens, pos)
            if not selector.startswith('@'):
                rules.append((selector, split_declarations(body)))
            prelude = []
            continue
        if value == '}':
            raise StyleSheetParseError(f"Unexpected }} at line {tokens[pos][2]}")
        if value == ';':
            text = _text(prelude)
            if text and not text.startswith('@'):
                raise StyleSheetParseError(f"Unknown word {text!r} at line {_line(prelude)}")
            prelude = []
        elif value not in ('<!--', '-->'):
            prelude.append(tokens[pos])
        pos += 1

    text = _text(prelude)
    if text and not text.startswith('@'):
        raise StyleSheetParseError(f"Unknown word {text!r} at line {_line(prelude)}")
    return rules

# Exported functions
__all__ = [
    'tokenize',
    'read_block',
    'split_declarations',
    'parse_style_rules',
]
