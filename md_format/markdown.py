"""
md_format/markdown.py — render modelu bloków do GitHub Flavored Markdown.

Funkcje formatujące (header, code_block, paragraph, list_entry, italic,
link, doc_link, escape) odpowiadają za całą wiedzę o składni Markdown; builder
i resolver są od niej niezależne.

Reguły:
  - nagłówki na poziomie Document.level (max 6)
  - blok kodu: ```<lang> … ```, płot dłuższy od backticków w samym kodzie
  - element listy: "- tekst" lub "N. tekst"; blok zbiorczy listy zamyka listę
  - odsyłacz rozwiązany → [tekst](path#Recv.Name); nierozwiązany → sam tekst
"""

from __future__ import annotations

import re
from typing import Iterable

from doc_model.blocks import Block, BlockKind, Document
from doc_model.text import CrossRef, InlineSpan, Italic, Link, Plain

# Znaki specjalne Markdown poprzedzane backslashem w zwykłym tekście.
_ESCAPE_RE = re.compile(r"([\\`*_\[\]<>|])")

_BACKTICKS_RE = re.compile(r"`+")

_MAX_HEADER_LEVEL = 6


# ---------------------------------------------------------------------------
# Funkcje formatujące
# ---------------------------------------------------------------------------

def escape(text: str) -> str:
    return _ESCAPE_RE.sub(r"\\\1", text)


def italic(text: str) -> str:
    return f"*{text}*"


def header(level: int, text: str) -> str:
    level = max(1, min(level, _MAX_HEADER_LEVEL))
    return f"{'#' * level} {text}\n\n"


def code_block(code: str, lang: str = "go") -> str:
    if not code.endswith("\n"):
        code += "\n"
    # Płot dłuższy od najdłuższej serii backticków w kodzie
    longest = max((len(run) for run in _BACKTICKS_RE.findall(code)), default=0)
    fence = "`" * max(3, longest + 1)
    return f"{fence}{lang}\n{code}{fence}\n\n"


def paragraph(text: str) -> str:
    return f"{text}\n\n"


def list_entry(number: str, text: str) -> str:
    marker = f"{number}." if number else "-"
    # Linie kontynuacji wcinamy, żeby zostały w elemencie listy; puste zostają puste
    pad = " " * (len(marker) + 1)
    first, *rest = text.split("\n")
    body = "\n".join([first, *(pad + line if line else "" for line in rest)])
    return f"{marker} {body}\n"


def link(text: str, href: str) -> str:
    return f"[{text}]({href})"


def anchor_id(anchor: str) -> str:
    """Identyfikator kotwicy: "func Recv Name" → Recv.Name, "type T" → T."""
    _, _, rest = anchor.partition(" ")
    return ".".join(rest.split())


def doc_link(text: str, path: str, anchor: str) -> str:
    return link(text, f"{path}#{anchor_id(anchor)}")


# ---------------------------------------------------------------------------
# Render
# ---------------------------------------------------------------------------

def render_text(spans: Iterable[InlineSpan]) -> str:
    out: list[str] = []
    for span in spans:
        match span:
            case Plain(text=text):
                out.append(escape(text))
            case Italic(text=text):
                out.append(italic(escape(text)))
            case Link(inner=inner, url=url):
                out.append(link(render_text(inner), url))
            case CrossRef(inner=inner) if span.resolved:
                out.append(doc_link(render_text(inner), span.path, span.anchor))
            case CrossRef(inner=inner):
                out.append(render_text(inner))
    return "".join(out)


def render_block(block: Block, level: int = 1, lang: str = "go") -> str:
    """Render pojedynczego bloku; blok zbiorczy listy daje pustą linię końcową."""
    match block.kind:
        case BlockKind.CODE:
            return code_block("".join(s.text for s in block.text if isinstance(s, Plain)), lang)
        case BlockKind.HEADER:
            return header(level, render_text(block.text))
        case BlockKind.PARAGRAPH:
            return paragraph(render_text(block.text))
        case BlockKind.LIST if block.aggregate:
            return "\n"
        case BlockKind.LIST:
            number, rest = _split_marker(block.text)
            return list_entry(number, render_text(rest))
    return ""


def render_document(doc: Document, lang: str = "go") -> str:
    """Render całego dokumentu; bloki w kolejności kluczy."""
    blocks = sorted(doc.blocks, key=lambda b: b.key)
    return "".join(render_block(b, doc.level, lang) for b in blocks).rstrip("\n") + "\n"


def _split_marker(text: tuple[InlineSpan, ...]) -> tuple[str, tuple[InlineSpan, ...]]:
    """Pierwszy span elementu listy to marker (numer lub "")."""
    if text and isinstance(text[0], Plain):
        return text[0].text, text[1:]
    return "", text
