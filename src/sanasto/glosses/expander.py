"""
Cross-reference expansion of meaning lines.
"""

import logging

from .models import ExpansionNode
from .phrases import PhraseMatch, PhraseMatcher
from .store import LexemeStore

logger = logging.getLogger("sanasto.glosses")

# Reference chains may be cyclic; expansion never goes past this depth.
MAX_DEPTH = 2

_TRAILING_PUNCTUATION = ".,:;!?"


def extract_target(meaning: str, match: PhraseMatch) -> str:
    """Pull the referenced headword out of a meaning line.

    Drops the matched phrase, trailing punctuation, and any annotation after
    an opening parenthesis or a semicolon.

    Example:
        >>> extract_target("diminutive of koira (colloquial).", PhraseMatch("diminutive of ", 14))
        'koira'
    """
    text = meaning.lstrip()
    if text.startswith(match.key):
        remainder = text[len(match.key):]
    else:
        # Irregular spacing inside the phrase; fall back to whole tokens
        remainder = " ".join(text.split()[len(match.key.split()):])

    target = remainder.strip().rstrip(_TRAILING_PUNCTUATION).rstrip()
    if "(" in target:
        target = target[:target.index("(")].strip()
    if ";" in target:
        target = target[:target.index(";")].strip()
    return target


class CrossReferenceExpander:
    """Expands meanings like "diminutive of koira." into koira's glosses.

    A meaning that starts with a known reference phrase names another
    headword; that headword's entries are attached to the meaning, and each
    of their meanings is expanded once more. Expansion stops at MAX_DEPTH.

    Example:
        >>> store = LexemeStore([GlossEntry(word="koira", pos="noun", meanings=["dog"])])
        >>> expander = CrossReferenceExpander(store, PhraseMatcher(["diminutive of"]))
        >>> node = expander.expand("diminutive of koira.")
        >>> node.referenced_headword, node.referenced_entries[0].meanings
        ('koira', ('dog',))
    """

    def __init__(self, store: LexemeStore, matcher: PhraseMatcher) -> None:
        self.store = store
        self.matcher = matcher

    def expand(self, meaning: str, depth: int = 1) -> ExpansionNode | None:
        """Expand a single meaning line.

        Args:
            meaning: Meaning line to inspect
            depth: 1 for meanings of the displayed word; the expander calls
                itself with depth 2 for the referenced entries' meanings

        Returns:
            An ExpansionNode, or None when the meaning has no reference
            phrase, the target has no glosses, or depth exceeds MAX_DEPTH

        Raises:
            ValueError: If depth is less than 1
        """
        if depth < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")
        if depth > MAX_DEPTH:
            return None

        match = self.matcher.find_longest_prefix(meaning)
        if match is None:
            return None

        target = extract_target(meaning, match)
        if not target:
            return None

        entries = self.store.lookup(target)
        if not entries:
            logger.debug(f"expand: no glosses for referenced word '{target}'")
            return None

        nested = []
        for entry in entries:
            if depth + 1 <= MAX_DEPTH:
                nested.append(tuple(self.expand(m, depth + 1) for m in entry.meanings))
            else:
                nested.append(tuple(None for _ in entry.meanings))

        node = ExpansionNode(
            source_meaning=meaning,
            depth=depth,
            referenced_headword=target,
            referenced_entries=entries,
            nested=tuple(nested),
        )
        if depth == 1:
            logger.debug(f"expand: '{meaning}' references {node.referenced_headwords()}")
        return node
