"""
Longest-match detection of reference phrases ("see also", "diminutive of")
at the start of a meaning line.
"""

import logging
from collections.abc import Iterable
from typing import NamedTuple

logger = logging.getLogger("sanasto.glosses")


class PhraseMatch(NamedTuple):
    """A matched reference phrase key (phrase plus one trailing space)."""
    key: str
    length: int


class PhraseMatcher:
    """Finds the longest reference phrase leading a piece of text.

    Each phrase is stored as a key with one trailing space appended, so a
    phrase only matches on a whole-word boundary: "see" matches "see koira"
    but never "seesaw". Candidates are built from the first k whitespace
    tokens of the text, most tokens first, so "see also" wins over "see".

    The lookup tables are computed once in the constructor and never change.

    Example:
        >>> matcher = PhraseMatcher(["see", "see also"])
        >>> matcher.find_longest_prefix("see also the manual")
        PhraseMatch(key='see also ', length=9)
        >>> matcher.find_longest_prefix("seesaw") is None
        True
    """

    def __init__(self, phrases: Iterable[str] = ()) -> None:
        keys = set()
        for phrase in phrases:
            phrase = phrase.strip()
            if phrase:
                keys.add(phrase + " ")

        self._keys: frozenset[str] = frozenset(keys)
        # Distinct key lengths in code points, longest first
        self.key_lengths: tuple[int, ...] = tuple(sorted({len(k) for k in keys}, reverse=True))
        # Distinct word counts, longest first; only these token counts are probed
        self._word_counts: tuple[int, ...] = tuple(sorted({len(k.split()) for k in keys}, reverse=True))

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, phrase: object) -> bool:
        return isinstance(phrase, str) and phrase + " " in self._keys

    def find_longest_prefix(self, text: str) -> PhraseMatch | None:
        """Return the longest reference phrase key that `text` starts with.

        Args:
            text: A meaning line, e.g. "diminutive of koira."

        Returns:
            PhraseMatch(key, length) for the most specific phrase, or None
        """
        words = text.split()
        if not words or not self._keys:
            return None

        logger.debug(f"find_longest_prefix: checking for phrases leading '{text}'")

        for count in self._word_counts:
            if count > len(words):
                continue
            candidate = " ".join(words[:count]) + " "
            if candidate in self._keys:
                logger.debug(f"find_longest_prefix: matched '{candidate}'")
                return PhraseMatch(candidate, len(candidate))

        return None
