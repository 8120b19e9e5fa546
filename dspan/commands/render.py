"""Komenda: dspan render — render komentarza do Markdown."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from doc_builder import new_document
from dspan._context import (
    add_common_arguments,
    build_config,
    current_package,
    load_packages,
)
from md_format import render_document

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    path = Path(args.comment_file)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)

    packages = load_packages(args.packages)
    current  = current_package(packages, args.package)
    cfg      = build_config(args)

    doc = new_document(path.read_text(encoding="utf-8"), current, packages, cfg)
    markdown = render_document(doc, lang=args.lang)

    if args.out is None:
        sys.stdout.write(markdown)
        return

    out_path = Path(args.out)
    out_path.write_text(markdown, encoding="utf-8")
    console.print(f"[green]Markdown:[/green] {out_path}  ({len(doc)} bloków)")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "render",
        help="Renderuje komentarz do GitHub Flavored Markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje komentarz, rozwiązuje odsyłacze i renderuje wynik do Markdown.

Przykłady:
  dspan render doc.txt --packages packages.json
  dspan render doc.txt --packages packages.json --out README.md --level 2
        """,
    )
    p.add_argument(
        "comment_file",
        metavar="PLIK",
        help="Plik z tekstem komentarza.",
    )
    add_common_arguments(p)
    p.add_argument(
        "--out",
        metavar="PLIK.md",
        default=None,
        help="Plik wynikowy (domyślnie: stdout).",
    )
    p.add_argument(
        "--lang",
        default="go",
        help="Język bloków kodu w Markdown (domyślnie: go).",
    )
    p.set_defaults(func=run)
