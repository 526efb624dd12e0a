"""Command line interface for block-glyphs."""

from block_glyphs.cli.main import main

__all__ = ["main"]
