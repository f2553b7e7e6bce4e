"""Pytest configuration for Inline Extract tests."""

import logging
import random
import pytest

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

class ScriptedRandom:
    """Random stand-in returning characters from a fixed script."""

    def __init__(self, script):
        self._chars = iter(script)

    def choice(self, seq):
        char = next(self._chars)
        assert char in seq
        return char

@pytest.fixture
def rng():
    """Return a seeded random source."""
    return random.Random(1234)

@pytest.fixture
def scripted_random():
    """Return a factory for scripted random sources."""
    return ScriptedRandom

@pytest.fixture(scope='session')
def sample_html():
    """Return sample HTML content with inline styles."""
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <title>Test Page</title>
    </head>
    <body>
        <div class="container" style="max-width: 1200px; margin: 0 auto;">
            <header class="header" id="top" style="padding: 10px">
                <h1 style="font-size: 2em;">Test Page</h1>
            </header>
            <p class="note lead" style="color: #333;">First</p>
            <p class="lead  note" style="font-weight: bold; color: #333">Second</p>
            <p>Plain paragraph</p>
        </div>
    </body>
    </html>
    """

@pytest.fixture(scope='session')
def style_tag_html():
    """Return HTML with both a <style> block and inline styles."""
    return """
    <style>
        .existing { margin: 10px; }
        .parent>.child { color: blue; }
    </style>
    <div style="color: red;" class="test">Hello</div>
    """

@pytest.fixture(scope='session')
def malformed_style_html():
    """Return HTML whose <style> block is missing a closing brace."""
    return """
    <style>
        .valid { color: red; }
        .invalid { color: red
        .another { margin: 10px; }
    </style>
    <div style="color: red;" class="test">Hello</div>
    """
