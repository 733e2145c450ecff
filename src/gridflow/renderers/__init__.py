"""Renderers: canvas, character sets, and the text renderer."""
