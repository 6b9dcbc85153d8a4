"""
Read-only headword to gloss mapping.
"""

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..errors import GlossLoadError
from .models import GlossEntry

logger = logging.getLogger("sanasto.glosses")


class LexemeStore:
    """Maps each headword to its gloss entries, in source order.

    The store is filled once at construction and only read afterwards; it is
    shared by the index builder and the cross-reference expander.

    Example:
        >>> store = LexemeStore([GlossEntry(word="koira", pos="noun", meanings=["dog"])])
        >>> store.lookup("koira")[0].meanings
        ('dog',)
        >>> store.lookup("kissa")
        ()
    """

    def __init__(self, entries: Iterable[GlossEntry] = ()) -> None:
        grouped: dict[str, list[GlossEntry]] = {}
        for entry in entries:
            grouped.setdefault(entry.headword, []).append(entry)
        self._entries: dict[str, tuple[GlossEntry, ...]] = {
            headword: tuple(group) for headword, group in grouped.items()
        }

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "LexemeStore":
        """Build a store from already-decoded gloss records.

        Raises:
            GlossLoadError: If any record fails validation
        """
        entries = []
        for number, record in enumerate(records, start=1):
            try:
                entries.append(GlossEntry.model_validate(record))
            except ValidationError as e:
                raise GlossLoadError(f"invalid gloss record: {e}", line_number=number) from e
        return cls(entries)

    @classmethod
    def from_jsonl(cls, path: Path) -> "LexemeStore":
        """Load a gloss dataset with one JSON object per line.

        Expected line format:
            {"word": "koira", "pos": "noun", "meanings": ["dog"]}

        Blank lines are skipped. Any other unparseable line aborts the load:
        lookups assume every stored record is well formed.

        Args:
            path: Path to the .jsonl file

        Returns:
            A populated LexemeStore

        Raises:
            FileNotFoundError: If the file doesn't exist
            GlossLoadError: If a line is not valid JSON or not a gloss record
        """
        entries = []
        with open(path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError as e:
                    raise GlossLoadError(f"malformed JSON: {e.msg}", path=path, line_number=line_number) from e
                if not isinstance(record, dict):
                    raise GlossLoadError("gloss record must be a JSON object", path=path, line_number=line_number)
                try:
                    entries.append(GlossEntry.model_validate(record))
                except ValidationError as e:
                    raise GlossLoadError(f"invalid gloss record: {e}", path=path, line_number=line_number) from e

        store = cls(entries)
        logger.debug(f"Loaded {len(entries)} gloss records for {len(store)} headwords from {path}")
        return store

    def lookup(self, headword: str) -> tuple[GlossEntry, ...]:
        """All entries for `headword`, or an empty tuple if there are none."""
        return self._entries.get(headword, ())

    def __contains__(self, headword: object) -> bool:
        return headword in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def headwords(self) -> list[str]:
        """Headwords in first-seen order."""
        return list(self._entries)

    def search_meanings(self, query: str) -> list[str]:
        """Reverse lookup: headwords with a meaning containing `query`.

        Matching is a case-insensitive substring test against every meaning
        line. A blank query matches nothing.

        Args:
            query: English text to look for

        Returns:
            Sorted list of distinct matching headwords
        """
        needle = query.strip().lower()
        if not needle:
            return []

        found = set()
        for headword, entries in self._entries.items():
            if any(needle in meaning.lower() for entry in entries for meaning in entry.meanings):
                found.add(headword)

        logger.debug(f"search_meanings: {len(found)} headwords match '{needle}'")
        return sorted(found)
