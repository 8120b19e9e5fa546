"""
comment_syntax/patterns.py — wzorce regex składni komentarzy.

Kolejność sprawdzania w parserze:
  1. definicje linków  [Text]: URL
  2. markery list      -, *, +, •, N., N)
  3. nagłówki          # Tytuł  /  stary styl (jedna linia, wielka litera)
  4. odsyłacze inline  [...]  oraz gołe URL-e
"""

from __future__ import annotations

import re

# Pusta (lub biała) linia.
BLANK_LINE_RE = re.compile(r"^[\t\f ]*$")

# Wiodące białe znaki linii.
INDENT_RE = re.compile(r"^[\t ]*")

# Definicja linku: [Text]: URL
LINK_DEF_RE = re.compile(r"^\[(?P<text>[^\[\]]+)\]:\s+(?P<url>\S+)\s*$")

# Marker listy: punktor albo liczba z kropką / nawiasem.
LIST_MARKER_RE = re.compile(
    r"^[\t ]*(?:(?P<bullet>[-*+•])|(?P<number>\d+)[.)])[\t ]+(?P<rest>.*)$"
)

# Nagłówek nowego stylu: "# Tytuł"
HEADING_RE = re.compile(r"^#[\t ]+(?P<title>\S.*)$")

# Nagłówek starego stylu: wielka litera, bez interpunkcji poza nawiasami,
# przecinkami i apostrofami, nie kończy się znakiem interpunkcyjnym.
OLD_HEADING_RE = re.compile(r"^[A-Z][^!:;,{}\[\]<>.?]*$")

# Odsyłacz w nawiasach kwadratowych (bez zagnieżdżeń).
BRACKET_RE = re.compile(r"\[(?P<text>[^\[\]\n]+)\]")

# Goły URL; kończy się przed interpunkcją zamykającą zdanie.
URL_RE = re.compile(r"https?://[^\s<>\"'\[\]]*[^\s<>\"'\[\].,:;!?)]")

# Identyfikator symbolu.
IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Ścieżka importu z co najmniej jednym "/" (np. example.com/mod/pkg).
IMPORT_PATH_RE = re.compile(r"^[A-Za-z0-9_.~+-]+(?:/[A-Za-z0-9_.~+-]+)+$")
