#!/usr/bin/env python3
"""
Command-line interface for Inline Extract.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from inline_extract.plugin import InlineExtractPlugin
from inline_extract.utils.config import DEFAULT_INDENT, SELECTOR_TYPES, VERSION
from inline_extract.utils.file import safe_read_file, safe_write_file
from inline_extract.utils.logging import setup_logging

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='inline-extract',
        description='Convert inline styles in an HTML file into a stylesheet'
    )
    
    # Input source
    parser.add_argument(
        '-f', '--file',
        help='Path to HTML file',
        type=Path,
        required=True
    )
    
    # Output options
    parser.add_argument(
        '-o', '--output',
        help='Output CSS file (default: stdout)',
        type=Path
    )
    parser.add_argument(
        '--indent',
        help='Spaces used to indent declarations',
        type=int,
        default=DEFAULT_INDENT
    )
    
    # Processing options
    parser.add_argument(
        '-s', '--selector',
        help='Selector strategy; repeat to give fallbacks in order (default: class)',
        choices=SELECTOR_TYPES,
        action='append'
    )
    parser.add_argument(
        '--style-tags',
        help='Also extract rules from <style> elements',
        action='store_true'
    )
    
    # Other options
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )
    
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(args.verbose)
    
    try:
        html = safe_read_file(str(args.file))
        plugin = InlineExtractPlugin({
            'html': html,
            'selector': args.selector,
            'style_tags': args.style_tags,
            'indent': args.indent,
        })
        result = plugin.process(source=str(args.file))
        if not result.ok:
            return 1
        
        if args.output:
            safe_write_file(str(args.output), result.css)
            logging.info(f"CSS saved to {args.output}")
        else:
            sys.stdout.write(result.css)
        
        return 0
        
    except Exception as e:
        logging.error(f"Error: {str(e)}")
        return 1

if __name__ == '__main__':
    sys.exit(main())
