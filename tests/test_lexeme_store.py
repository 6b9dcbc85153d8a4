"""
Unit tests for GlossEntry and LexemeStore.
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from sanasto.errors import GlossLoadError, SanastoError
from sanasto.glosses import GlossEntry, LexemeStore


def write_jsonl(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestGlossEntry:
    """Test GlossEntry model."""

    def test_create_from_source_keys(self) -> None:
        """Test the word/pos keys used by the gloss dataset."""
        entry = GlossEntry.model_validate({"word": "koira", "pos": "noun", "meanings": ["dog"]})
        assert entry.headword == "koira"
        assert entry.part_of_speech == "noun"
        assert entry.meanings == ("dog",)

    def test_create_from_field_names(self) -> None:
        """Test the long field names are accepted too."""
        entry = GlossEntry(headword="kala", part_of_speech="noun", meanings=["fish"])
        assert entry.headword == "kala"
        assert entry.meanings == ("fish",)

    def test_defaults(self) -> None:
        """Test part of speech and meanings default to empty."""
        entry = GlossEntry(word="hei")
        assert entry.part_of_speech == ""
        assert entry.meanings == ()

    def test_frozen(self) -> None:
        """Test entries cannot be modified once created."""
        entry = GlossEntry(word="koira", pos="noun", meanings=["dog"])
        with pytest.raises(ValidationError):
            entry.headword = "kissa"

    def test_missing_headword(self) -> None:
        """Test a record without a headword is rejected."""
        with pytest.raises(ValidationError):
            GlossEntry.model_validate({"pos": "noun", "meanings": ["dog"]})

    def test_empty_headword(self) -> None:
        """Test an empty headword is rejected."""
        with pytest.raises(ValidationError):
            GlossEntry(word="", pos="noun")


class TestLexemeStore:
    """Test LexemeStore loading and lookup."""

    def test_empty_store(self) -> None:
        """Test an empty store returns empty results."""
        store = LexemeStore()
        assert len(store) == 0
        assert store.lookup("koira") == ()
        assert "koira" not in store

    def test_homonyms_keep_order(self) -> None:
        """Test entries sharing a headword keep insertion order."""
        store = LexemeStore([
            GlossEntry(word="terve", pos="adj", meanings=["healthy"]),
            GlossEntry(word="kala", pos="noun", meanings=["fish"]),
            GlossEntry(word="terve", pos="intj", meanings=["hi"]),
        ])

        entries = store.lookup("terve")
        assert [e.part_of_speech for e in entries] == ["adj", "intj"]
        assert len(store) == 2
        assert store.headwords() == ["terve", "kala"]
        assert list(store) == ["terve", "kala"]

    def test_every_entry_stored_under_its_headword(self) -> None:
        """Test each key maps only to entries with that headword."""
        store = LexemeStore.from_records([
            {"word": "a", "pos": "x", "meanings": []},
            {"word": "b", "pos": "x", "meanings": []},
            {"word": "a", "pos": "y", "meanings": []},
        ])
        for headword in store:
            assert all(entry.headword == headword for entry in store.lookup(headword))

    def test_from_records_invalid(self) -> None:
        """Test an invalid in-memory record reports its position."""
        with pytest.raises(GlossLoadError) as exc_info:
            LexemeStore.from_records([{"word": "a"}, {"pos": "noun"}])
        assert exc_info.value.line_number == 2
        assert exc_info.value.path is None

    def test_from_jsonl(self, tmp_path: Path) -> None:
        """Test loading a JSONL gloss file."""
        path = write_jsonl(tmp_path / "glosses.jsonl", [
            json.dumps({"word": "koira", "pos": "noun", "meanings": ["dog"]}),
            "",
            json.dumps({"word": "äiti", "pos": "noun", "meanings": ["mother"]}, ensure_ascii=False),
        ])

        store = LexemeStore.from_jsonl(path)

        assert len(store) == 2
        assert store.lookup("koira")[0].meanings == ("dog",)
        assert store.lookup("äiti")[0].meanings == ("mother",)

    def test_from_jsonl_missing_file(self, tmp_path: Path) -> None:
        """Test loading a non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            LexemeStore.from_jsonl(tmp_path / "missing.jsonl")

    def test_from_jsonl_malformed_json(self, tmp_path: Path) -> None:
        """Test a broken line aborts the whole load."""
        path = write_jsonl(tmp_path / "glosses.jsonl", [
            json.dumps({"word": "koira", "pos": "noun", "meanings": ["dog"]}),
            '{"word": "kala", "pos": ',
            json.dumps({"word": "kissa", "pos": "noun", "meanings": ["cat"]}),
        ])

        with pytest.raises(GlossLoadError) as exc_info:
            LexemeStore.from_jsonl(path)

        assert exc_info.value.line_number == 2
        assert exc_info.value.path == path
        assert "malformed JSON" in str(exc_info.value)
        assert isinstance(exc_info.value, SanastoError)

    def test_from_jsonl_not_an_object(self, tmp_path: Path) -> None:
        """Test a JSON value that isn't an object is rejected."""
        path = write_jsonl(tmp_path / "glosses.jsonl", ['["koira", "noun"]'])

        with pytest.raises(GlossLoadError, match="must be a JSON object"):
            LexemeStore.from_jsonl(path)

    def test_from_jsonl_invalid_record(self, tmp_path: Path) -> None:
        """Test a well-formed JSON object with bad fields is rejected."""
        path = write_jsonl(tmp_path / "glosses.jsonl", [
            json.dumps({"word": "koira", "pos": "noun", "meanings": "dog"}),
        ])

        with pytest.raises(GlossLoadError, match="invalid gloss record"):
            LexemeStore.from_jsonl(path)

    def test_search_meanings(self) -> None:
        """Test reverse lookup by English meaning."""
        store = LexemeStore([
            GlossEntry(word="koira", pos="noun", meanings=["dog"]),
            GlossEntry(word="hurtta", pos="noun", meanings=["hound", "dog (colloquial)"]),
            GlossEntry(word="kala", pos="noun", meanings=["fish"]),
        ])

        assert store.search_meanings("dog") == ["hurtta", "koira"]
        assert store.search_meanings("  DOG ") == ["hurtta", "koira"]
        assert store.search_meanings("fish") == ["kala"]

    def test_search_meanings_no_match(self) -> None:
        """Test reverse lookup misses and blank queries return empty lists."""
        store = LexemeStore([GlossEntry(word="koira", pos="noun", meanings=["dog"])])
        assert store.search_meanings("cat") == []
        assert store.search_meanings("") == []
        assert store.search_meanings("   ") == []
