"""File utility for Inline Extract."""

import os
import chardet
from .error import FileOperationError

def detect_encoding(file_path: str) -> str:
    """Detect file encoding, falling back to utf-8.
    
    Args:
        file_path: Path to file
        
    Returns:
        Detected encoding
        
    Raises:
        FileOperationError: If the file cannot be opened
    """
    try:
        with open(file_path, 'rb') as f:
            raw_data = f.read()
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

    if not raw_data:
        return 'utf-8'
    return chardet.detect(raw_data)['encoding'] or 'utf-8'

def safe_read_file(file_path: str, encoding: str = None) -> str:
    """Safely read content from a file.
    
    Args:
        file_path: Path to the file
        encoding: File encoding, detected when omitted
        
    Returns:
        File content
        
    Raises:
        FileOperationError: If file read fails
    """
    if not os.path.isfile(file_path):
        raise FileOperationError(f"File not found: {file_path}")
    encoding = encoding or detect_encoding(file_path)
    try:
        with open(file_path, 'r', encoding=encoding) as f:
            return f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

def safe_write_file(file_path: str, content: str, encoding: str = 'utf-8') -> bool:
    """Safely write content to a file.
    
    Args:
        file_path: Path to the file
        content: Content to write
        encoding: File encoding
        
    Returns:
        True if successful
        
    Raises:
        FileOperationError: If file write fails
    """
    try:
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(file_path, 'w', encoding=encoding) as f:
            f.write(content)
        return True
    except OSError as e:
        raise FileOperationError(f"Failed to write file {file_path}: {e}")

# Exported functions
__all__ = ['detect_encoding', 'safe_read_file', 'safe_write_file']
