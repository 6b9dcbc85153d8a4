"""
Data models for gloss records and cross-reference expansions.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GlossEntry(BaseModel):
    """One definition record for a headword.

    A headword can have several entries (homonyms, different parts of
    speech); their order in the source data is the display order.

    Attributes:
        headword: The word being defined (e.g., "koira")
        part_of_speech: Part of speech tag (e.g., "noun")
        meanings: English meaning lines, in source order
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    headword: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("word", "headword"),
        description="Headword this gloss defines",
    )
    part_of_speech: str = Field(
        default="",
        validation_alias=AliasChoices("pos", "part_of_speech"),
        description="Part of speech",
    )
    meanings: tuple[str, ...] = Field(default_factory=tuple, description="Meaning lines in order")


@dataclass(frozen=True)
class ExpansionNode:
    """Result of expanding one meaning line that leads with a reference phrase.

    Built per render call and never stored. `nested` is aligned with
    `referenced_entries` and with each entry's meanings: nested[i][j] is the
    expansion of referenced_entries[i].meanings[j], or None when that meaning
    references nothing (or the depth cap stopped the recursion).

    Attributes:
        source_meaning: The meaning line that was expanded
        depth: 1 for a meaning of the looked-up word, 2 for one level down
        referenced_headword: Cleaned target extracted from the meaning
        referenced_entries: Gloss entries stored for the target
        nested: Per-entry, per-meaning expansions one level deeper
    """
    source_meaning: str
    depth: int
    referenced_headword: Optional[str] = None
    referenced_entries: tuple[GlossEntry, ...] = ()
    nested: tuple[tuple[Optional["ExpansionNode"], ...], ...] = field(default=())

    def iter_entries(self) -> Iterator[tuple[GlossEntry, list[tuple[str, Optional["ExpansionNode"]]]]]:
        """Yield each referenced entry with its (meaning, nested expansion) pairs."""
        for i, entry in enumerate(self.referenced_entries):
            children = self.nested[i] if i < len(self.nested) else ()
            pairs = []
            for j, meaning in enumerate(entry.meanings):
                pairs.append((meaning, children[j] if j < len(children) else None))
            yield entry, pairs

    def iter_meanings(self) -> Iterator[tuple[GlossEntry, str, Optional["ExpansionNode"]]]:
        """Yield (entry, meaning, nested expansion) in display order."""
        for entry, pairs in self.iter_entries():
            for meaning, child in pairs:
                yield entry, meaning, child

    def referenced_headwords(self) -> list[str]:
        """Every headword surfaced by this expansion, outermost first."""
        found = [self.referenced_headword] if self.referenced_headword else []
        for _, _, child in self.iter_meanings():
            if child is not None:
                found.extend(child.referenced_headwords())
        return found
