"""
md_format — render Document do GitHub Flavored Markdown.

Publiczne API:
  render_document(doc, lang)   → str
  render_block(block, level)   → str
  render_text(spans)           → str
"""

from .markdown import render_document, render_block, render_text, escape, anchor_id

__all__ = [
    "render_document",
    "render_block",
    "render_text",
    "escape",
    "anchor_id",
]
