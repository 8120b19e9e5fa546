"""
dspan — narzędzie CLI dla DocSpan.

Użycie:
  dspan <komenda> [opcje]

Komendy:
  blocks    Wyświetla bloki (Document) zbudowane z komentarza.
  resolve   Rozwiązuje odsyłacz [pkg.Recv.Name] do kind / path / anchor.
  render    Renderuje komentarz do GitHub Flavored Markdown.

Konfiguracja (zmienne środowiskowe):
  DSPAN_LEVEL        poziom nagłówków (domyślnie 1)
  DSPAN_MODULE_ROOT  prefiks modułu usuwany ze ścieżek odsyłaczy
  DSPAN_WORKDIR      katalog, w którym szukamy go.mod (domyślnie .)
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from dspan.commands import blocks as cmd_blocks
from dspan.commands import resolve as cmd_resolve
from dspan.commands import render as cmd_render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dspan",
        description="DocSpan — komentarze dokumentacyjne → bloki → Markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="dspan 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_blocks.add_parser(subparsers)
    cmd_resolve.add_parser(subparsers)
    cmd_render.add_parser(subparsers)

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
