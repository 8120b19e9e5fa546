"""
comment_syntax/parser.py — podział surowego komentarza na bloki i przebiegi inline.

Architektura:
  text → _split_lines() → _unindent() → _split_spans()
  → definicje linków ([Text]: URL) odkładane na bok
  → każdy span: lista | kod | nagłówek | akapit
  → akapity: _inline() → PlainRun / LinkRun / DocLinkRun
  → CommentDoc

Parser nie zna pakietów bezpośrednio — dostaje dwie funkcje:
  lookup_sym(recv, name) -> bool          czy bieżący pakiet ma symbol
  lookup_package(name)   -> str | None    ścieżka importu dla krótkiej nazwy

Kluczowe funkcje publiczne:
  Parser(lookup_sym, lookup_package).parse(text) -> CommentDoc
  parser_for(current, packages)                  -> Parser
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Literal

from doc_model.packages import Package, PackageSet

from .nodes import (
    BlockNode,
    CodeNode,
    CommentDoc,
    DocLinkRun,
    HeadingNode,
    LinkDef,
    LinkRun,
    ListItem,
    ListNode,
    ParagraphNode,
    PlainRun,
    TextRun,
)
from .patterns import (
    BLANK_LINE_RE,
    BRACKET_RE,
    HEADING_RE,
    IDENT_RE,
    IMPORT_PATH_RE,
    INDENT_RE,
    LINK_DEF_RE,
    LIST_MARKER_RE,
    OLD_HEADING_RE,
    URL_RE,
)

LookupSym = Callable[[str, str], bool]
LookupPackage = Callable[[str], str | None]

_INLINE_RE = re.compile(f"{BRACKET_RE.pattern}|(?P<url>{URL_RE.pattern})")


# ---------------------------------------------------------------------------
# Typy wewnętrzne
# ---------------------------------------------------------------------------

_SpanKind = Literal["PARA", "INDENTED"]


@dataclass(slots=True)
class _Span:
    kind: _SpanKind
    lines: list[str]
    blank_before: bool     # span poprzedzony pustą linią w źródle


def _no_sym(recv: str, name: str) -> bool:
    return False


def _no_package(name: str) -> str | None:
    return None


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class Parser:
    """
    Parser komentarzy dokumentacyjnych.

    Bezstanowy między wywołaniami parse() — ten sam obiekt można używać
    dla wielu komentarzy tego samego pakietu.
    """

    def __init__(
        self,
        lookup_sym: LookupSym | None = None,
        lookup_package: LookupPackage | None = None,
    ) -> None:
        self.lookup_sym = lookup_sym or _no_sym
        self.lookup_package = lookup_package or _no_package

    def parse(self, text: str) -> CommentDoc:
        lines = _unindent(_split_lines(text))
        spans = _split_spans(lines)

        # Definicje linków mogą stać w dowolnym akapicie złożonym tylko z nich
        links: list[LinkDef] = []
        kept: list[_Span] = []
        for span in spans:
            if span.kind == "PARA" and all(LINK_DEF_RE.match(l) for l in span.lines):
                for l in span.lines:
                    m = LINK_DEF_RE.match(l)
                    links.append(LinkDef(text=m["text"], url=m["url"]))
            else:
                kept.append(span)

        link_map: dict[str, str] = {}
        for d in links:
            link_map.setdefault(d.text, d.url)   # pierwsza definicja wygrywa

        content: list[BlockNode] = []
        for idx, span in enumerate(kept):
            if span.kind == "INDENTED":
                if LIST_MARKER_RE.match(span.lines[0]):
                    content.append(self._list(span, link_map))
                else:
                    content.append(CodeNode(text=_code_text(span.lines)))
                continue

            if len(span.lines) == 1:
                line = span.lines[0]
                m = HEADING_RE.match(line)
                if m:
                    content.append(HeadingNode(text=self._inline(m["title"].strip(), link_map)))
                    continue
                if _is_old_heading(kept, idx):
                    content.append(HeadingNode(text=self._inline(line.strip(), link_map)))
                    continue

            content.append(ParagraphNode(text=self._inline("\n".join(span.lines), link_map)))

        return CommentDoc(content=tuple(content), links=tuple(links))

    # ------------------------------------------------------------------
    # Listy
    # ------------------------------------------------------------------

    def _list(self, span: _Span, link_map: dict[str, str]) -> ListNode:
        # (numer, akapity elementu; akapit = lista linii)
        raw_items: list[tuple[str, list[list[str]]]] = []
        blank_between = False
        pending_blank = False

        for line in span.lines:
            if BLANK_LINE_RE.match(line):
                pending_blank = True
                continue
            m = LIST_MARKER_RE.match(line)
            if m:
                if pending_blank and raw_items:
                    blank_between = True
                raw_items.append((m["number"] or "", [[m["rest"].strip()]]))
            elif pending_blank:
                raw_items[-1][1].append([line.strip()])
            else:
                raw_items[-1][1][-1].append(line.strip())
            pending_blank = False

        items = tuple(
            ListItem(
                number=number,
                content=tuple(
                    ParagraphNode(text=self._inline("\n".join(p), link_map)) for p in paras
                ),
            )
            for number, paras in raw_items
        )
        return ListNode(
            items=items,
            force_blank_before=span.blank_before,
            force_blank_between=blank_between,
        )

    # ------------------------------------------------------------------
    # Inline
    # ------------------------------------------------------------------

    def _inline(self, text: str, link_map: dict[str, str]) -> tuple[TextRun, ...]:
        runs: list[TextRun] = []
        buf: list[str] = []

        def flush() -> None:
            if buf:
                runs.append(PlainRun(text="".join(buf)))
                buf.clear()

        pos = 0
        for m in _INLINE_RE.finditer(text):
            buf.append(text[pos:m.start()])
            pos = m.end()

            if m["url"]:
                flush()
                runs.append(LinkRun(text=(PlainRun(text=m["url"]),), url=m["url"]))
                continue

            inner = m["text"]
            if inner in link_map:
                flush()
                runs.append(LinkRun(text=(PlainRun(text=inner),), url=link_map[inner]))
                continue

            ref = self.doc_link(inner)
            if ref is not None:
                flush()
                runs.append(ref)
            else:
                buf.append(m.group())

        buf.append(text[pos:])
        flush()
        return tuple(runs)

    def doc_link(self, inner: str) -> DocLinkRun | None:
        """
        Rozpoznaje składnię odsyłacza:
          [Name] [Recv.Name] [pkg] [pkg.Name] [pkg.Recv.Name]
          [import/path] [import/path.Name] [import/path.Recv.Name]
        Opcjonalny wiodący '*' (wskaźnik) jest pomijany.
        """
        display = (PlainRun(text=inner),)
        target = inner[1:] if inner.startswith("*") else inner

        if "/" in target:
            dot = target.find(".", target.rfind("/"))
            if dot < 0:
                if IMPORT_PATH_RE.match(target):
                    return DocLinkRun(text=display, import_path=target)
                return None
            import_path, parts = target[:dot], target[dot + 1:].split(".")
            if not IMPORT_PATH_RE.match(import_path) or not _idents(parts):
                return None
            match parts:
                case [name]:
                    return DocLinkRun(text=display, import_path=import_path, name=name)
                case [recv, name]:
                    return DocLinkRun(text=display, import_path=import_path, recv=recv, name=name)
            return None

        parts = target.split(".")
        if not _idents(parts):
            return None

        match parts:
            case [name]:
                if self.lookup_sym("", name):
                    return DocLinkRun(text=display, name=name)
                if (path := self.lookup_package(name)):
                    return DocLinkRun(text=display, import_path=path)
            case [first, name]:
                if self.lookup_sym(first, name):
                    return DocLinkRun(text=display, recv=first, name=name)
                if (path := self.lookup_package(first)):
                    return DocLinkRun(text=display, import_path=path, name=name)
            case [pkg, recv, name]:
                if (path := self.lookup_package(pkg)):
                    return DocLinkRun(text=display, import_path=path, recv=recv, name=name)
        return None


def parser_for(current: Package, packages: PackageSet) -> Parser:
    """Parser z odsyłaczami sprawdzanymi względem bieżącego pakietu."""
    return Parser(lookup_sym=current.lookup_sym, lookup_package=packages.lookup_package)


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _split_lines(text: str) -> list[str]:
    lines = text.replace("\r\n", "\n").split("\n")
    while lines and BLANK_LINE_RE.match(lines[0]):
        lines.pop(0)
    while lines and BLANK_LINE_RE.match(lines[-1]):
        lines.pop()
    return lines


def _indent(line: str) -> str:
    return INDENT_RE.match(line).group()


def _common_indent(lines: list[str]) -> str:
    indents = [_indent(l) for l in lines if not BLANK_LINE_RE.match(l)]
    if not indents:
        return ""
    prefix = indents[0]
    for ind in indents[1:]:
        while not ind.startswith(prefix):
            prefix = prefix[:-1]
    return prefix


def _unindent(lines: list[str]) -> list[str]:
    """Usuwa wspólne wcięcie; puste linie stają się ""."""
    prefix = _common_indent(lines)
    return ["" if BLANK_LINE_RE.match(l) else l[len(prefix):] for l in lines]


def _is_indented(line: str) -> bool:
    return line[:1] in (" ", "\t")


def _split_spans(lines: list[str]) -> list[_Span]:
    spans: list[_Span] = []
    blank = False
    i, n = 0, len(lines)

    while i < n:
        line = lines[i]
        if BLANK_LINE_RE.match(line):
            blank = True
            i += 1
            continue

        if _is_indented(line):
            # Wcięty span może zawierać puste linie; końcowe puste odcinamy
            j, last = i, i
            while j < n and (BLANK_LINE_RE.match(lines[j]) or _is_indented(lines[j])):
                if not BLANK_LINE_RE.match(lines[j]):
                    last = j
                j += 1
            spans.append(_Span("INDENTED", lines[i:last + 1], blank))
            i = last + 1
        else:
            j = i
            while j < n and not BLANK_LINE_RE.match(lines[j]) and not _is_indented(lines[j]):
                j += 1
            spans.append(_Span("PARA", lines[i:j], blank))
            i = j
        blank = False

    return spans


def _code_text(lines: list[str]) -> str:
    return "\n".join(_unindent(lines)) + "\n"


def _is_old_heading(spans: list[_Span], idx: int) -> bool:
    """
    Jednolinijkowy akapit otoczony pustymi liniami, po którym następuje akapit;
    wielka litera, bez interpunkcji. Poprzedni span może być dowolny (także kod).
    """
    if idx == 0 or idx + 1 >= len(spans):
        return False
    span, nxt = spans[idx], spans[idx + 1]
    if nxt.kind != "PARA":
        return False
    if not (span.blank_before and nxt.blank_before):
        return False
    return bool(OLD_HEADING_RE.match(span.lines[0].strip()))


def _idents(parts: list[str]) -> bool:
    return bool(parts) and all(IDENT_RE.match(p) for p in parts)
