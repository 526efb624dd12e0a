"""Renderers for previewing surfaces."""

from block_glyphs.render.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
