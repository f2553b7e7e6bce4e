"""Utilities for Inline Extract."""
