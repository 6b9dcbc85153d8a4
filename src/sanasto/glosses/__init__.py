"""
Gloss storage and cross-reference resolution.

Provides the read-only LexemeStore, the reference PhraseMatcher and the
depth-capped CrossReferenceExpander built on top of them.
"""

from .expander import MAX_DEPTH, CrossReferenceExpander
from .models import ExpansionNode, GlossEntry
from .phrases import PhraseMatch, PhraseMatcher
from .store import LexemeStore

__all__ = [
    "GlossEntry",
    "ExpansionNode",
    "LexemeStore",
    "PhraseMatch",
    "PhraseMatcher",
    "CrossReferenceExpander",
    "MAX_DEPTH",
]
