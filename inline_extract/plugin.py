"""Host integration for inline style extraction."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
import logging
import random

import cssutils

from .core.extractor import extract_styles
from .core.formatter import format_css
from .core.options import ExtractOptions, resolve_options
from .utils.config import PLUGIN_NAME
from .utils.error import InlineExtractError
from .utils.logging import get_logger

# Disable cssutils logging
cssutils.log.setLevel(logging.CRITICAL)

logger = get_logger(__name__)

@dataclass
class Diagnostic:
    """An error reported by the plugin."""
    plugin: str
    message: str
    source: Optional[str] = None

    def __str__(self) -> str:
        location = f"{self.source}: " if self.source else ''
        return f"{self.plugin}: {location}{self.message}"

@dataclass
class ProcessResult:
    """Outcome of running the plugin over a stylesheet."""
    css: str
    root: Optional[cssutils.css.CSSStyleSheet] = None
    source: Optional[str] = None
    errors: List[Diagnostic] = field(default_factory=list)
    _warnings: List[Diagnostic] = field(default_factory=list, repr=False)

    @property
    def ok(self) -> bool:
        return not self.errors

    def warnings(self) -> List[Diagnostic]:
        return list(self._warnings)

class InlineExtractPlugin:
    """Replace a stylesheet with the styles extracted from an HTML document.

    Extraction failures do not raise; they are recorded on the result and
    the input stylesheet is returned unchanged.
    """

    name = PLUGIN_NAME

    def __init__(self, options: Optional[Mapping[str, Any]] = None, rng: Optional[random.Random] = None):
        """Initialize the plugin.

        Args:
            options: ``html``, ``selector``, ``style_tags``/``styleTags`` and ``indent``
            rng: Random source for hash selectors

        Raises:
            ConfigurationError: If the selector strategy is invalid
        """
        self.options: ExtractOptions = resolve_options(options)
        self.rng = rng

    def run(self) -> str:
        """Extract and format the configured HTML, propagating errors."""
        return format_css(extract_styles(self.options, self.rng), self.options.indent)

    def process(self, css: str = '', source: Optional[str] = None) -> ProcessResult:
        """Process a stylesheet.
        
        Args:
            css: Input stylesheet text, replaced on success
            source: Label identifying the input, kept on the result, its
                stylesheet and any diagnostics
            
        Returns:
            ProcessResult with the output CSS and any errors
        """
        try:
            output = self.run()
        except InlineExtractError as e:
            diagnostic = Diagnostic(self.name, f"Failed to extract inline styles: {e}", source)
            logger.error(str(diagnostic))
            return ProcessResult(css=css, source=source, errors=[diagnostic])

        root = cssutils.CSSParser(raiseExceptions=False, validate=False).parseString(output, href=source)
        logger.debug(f"Replaced stylesheet {source or '<input>'} with {len(root.cssRules)} rules")
        return ProcessResult(css=output, root=root, source=source)

def process(css: str = '', options: Optional[Dict[str, Any]] = None, source: Optional[str] = None) -> ProcessResult:
    """Run InlineExtractPlugin over ``css`` with ``options``."""
    return InlineExtractPlugin(options).process(css, source)

# Exported names
__all__ = ['Diagnostic', 'ProcessResult', 'InlineExtractPlugin', 'process']
