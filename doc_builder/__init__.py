"""
doc_builder — zamiana drzewa komentarza na model bloków.

Publiczne API:
  build_document(tree, current, packages, config)  → Document
  new_document(text, current, packages, config)    → Document (z parsowaniem)
  Config, detect_module_root                       konfiguracja
"""

from .config  import Config, detect_module_root
from .builder import build_document, new_document

__all__ = [
    "Config",
    "detect_module_root",
    "build_document",
    "new_document",
]
