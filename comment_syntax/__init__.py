"""
comment_syntax — drzewo węzłów komentarza i parser składni komentarzy.

Publiczne API:
  Parser(lookup_sym, lookup_package)   parser komentarzy
  parser_for(current, packages)        parser dla pakietu z metadanych
  CommentDoc, *Node, *Run              typy drzewa
"""

from .nodes import (
    PlainRun,
    ItalicRun,
    LinkRun,
    DocLinkRun,
    TextRun,
    CodeNode,
    HeadingNode,
    ParagraphNode,
    ListItem,
    ListNode,
    BlockNode,
    LinkDef,
    CommentDoc,
)
from .parser import Parser, parser_for

__all__ = [
    "PlainRun",
    "ItalicRun",
    "LinkRun",
    "DocLinkRun",
    "TextRun",
    "CodeNode",
    "HeadingNode",
    "ParagraphNode",
    "ListItem",
    "ListNode",
    "BlockNode",
    "LinkDef",
    "CommentDoc",
    "Parser",
    "parser_for",
]
