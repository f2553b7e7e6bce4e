"""Error utility for Inline Extract."""

class InlineExtractError(Exception):
    """Base exception for Inline Extract."""
    pass

class StyleSheetParseError(InlineExtractError):
    """Raised when a <style> block cannot be parsed."""
    pass

class ConfigurationError(InlineExtractError):
    """Raised when configuration is invalid."""
    pass

class FileOperationError(InlineExtractError):
    """Raised when file operations fail."""
    pass

# Exported exceptions
__all__ = [
    'InlineExtractError',
    'StyleSheetParseError',
    'ConfigurationError',
    'FileOperationError',
]
