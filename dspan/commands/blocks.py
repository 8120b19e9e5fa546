"""Komenda: dspan blocks — podgląd modelu bloków komentarza."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from doc_builder import new_document
from doc_model.blocks import Document
from doc_model.text import CrossRef, InlineSpan, Italic, Link, Plain
from dspan._context import (
    add_common_arguments,
    build_config,
    current_package,
    load_packages,
)

console = Console()

KIND_STYLE: dict[str, str] = {
    "code":      "green",
    "header":    "bold magenta",
    "list":      "yellow",
    "paragraph": "white",
}


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _describe(spans: tuple[InlineSpan, ...]) -> str:
    """Tekst bloku z odsyłaczami oznaczonymi jako ⟨path | anchor⟩."""
    parts: list[str] = []
    for span in spans:
        match span:
            case Plain(text=text):
                parts.append(text)
            case Italic(text=text):
                parts.append(f"_{text}_")
            case Link(inner=inner, url=url):
                parts.append(f"{_describe(inner)} <{url}>")
            case CrossRef(inner=inner):
                target = f"{span.path or '.'} | {span.anchor}" if span.resolved else "?"
                parts.append(f"{_describe(inner)} ⟨{target}⟩")
    return "".join(parts)


def _show_table(doc: Document) -> None:
    if not doc.blocks:
        console.print("[yellow]Brak bloków.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("KEY",  justify="right", no_wrap=True, style="dim")
    table.add_column("KIND", no_wrap=True)
    table.add_column("TEKST", no_wrap=False, max_width=100)

    for block in doc.blocks:
        kind = str(block.kind) + (" (zbiorczy)" if block.aggregate else "")
        table.add_row(
            str(block.key),
            Text(kind, style=KIND_STYLE.get(block.kind, "white")),
            Text(_describe(block.text)),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(doc)} bloków, poziom nagłówków {doc.level}[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    path = Path(args.comment_file)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)

    packages = load_packages(args.packages)
    current  = current_package(packages, args.package)
    cfg      = build_config(args)

    doc = new_document(path.read_text(encoding="utf-8"), current, packages, cfg)
    _show_table(doc)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "blocks",
        help="Wyświetla bloki (Document) zbudowane z komentarza.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje komentarz dokumentacyjny z pliku, rozwiązuje odsyłacze względem
metadanych pakietów i wyświetla bloki w kolejności kluczy.

Przykłady:
  dspan blocks doc.txt --packages packages.json
  dspan blocks doc.txt --packages packages.json --package example.com/mod/pkg
        """,
    )
    p.add_argument(
        "comment_file",
        metavar="PLIK",
        help="Plik z tekstem komentarza.",
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
