"""
sanasto - a pocket Finnish-English dictionary engine.

Prefix autocomplete over the headword list and cross-reference aware
definition lookup ("diminutive of koira." expands into the gloss of koira).
"""

from .config import SanastoConfig
from .engine import LookupEngine
from .errors import GlossLoadError, SanastoError
from .glosses import CrossReferenceExpander, ExpansionNode, GlossEntry, LexemeStore, PhraseMatcher
from .index import PrefixIndex

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("sanasto")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "SanastoConfig",
    "LookupEngine",
    "SanastoError",
    "GlossLoadError",
    "GlossEntry",
    "LexemeStore",
    "PhraseMatcher",
    "CrossReferenceExpander",
    "ExpansionNode",
    "PrefixIndex",
]
