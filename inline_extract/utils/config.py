"""Configuration utility for Inline Extract."""

# Project version
VERSION = "1.0.0"

# Name reported with diagnostics raised through the host layer
PLUGIN_NAME = 'inline-extract'

# Selector strategies
SELECTOR_TYPES = ('class', 'id', 'hash')
DEFAULT_SELECTOR = 'class'

# Output formatting
DEFAULT_INDENT = 2

# Hash selector generation
HASH_LENGTH = 10
HASH_ALPHABET = 'abcdefghijklmnopqrstuvwxyz0123456789'

# Characters that make a selector order-sensitive
COMBINATOR_PATTERN = r'[\s>+~(),]'

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL = 'INFO'

# Exported config
__all__ = [
    'VERSION', 'PLUGIN_NAME',
    'SELECTOR_TYPES', 'DEFAULT_SELECTOR',
    'DEFAULT_INDENT',
    'HASH_LENGTH', 'HASH_ALPHABET',
    'COMBINATOR_PATTERN',
    'LOG_FORMAT', 'LOG_LEVEL',
]
