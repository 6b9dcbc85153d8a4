"""
Pytest configuration and fixtures for sanasto tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing sanasto
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


GLOSS_RECORDS = [
    {"word": "koira", "pos": "noun", "meanings": ["dog", "synonym of hurtta (colloquial)"]},
    {"word": "koiran", "pos": "noun", "meanings": ["genitive singular of koira"]},
    {"word": "koiranen", "pos": "noun", "meanings": ["diminutive of koira."]},
    {"word": "hurtta", "pos": "noun", "meanings": ["hound", "see koira"]},
    {"word": "kala", "pos": "noun", "meanings": ["fish"]},
    {"word": "terve", "pos": "adj", "meanings": ["healthy"]},
    {"word": "terve", "pos": "intj", "meanings": ["hi"]},
]

WORDS = ["koira", "koiran", "koiranen", "hurtta", "kala", '"terve"']

PHRASES = ["see", "see also", "diminutive of", "genitive singular of", "synonym of"]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Write a small dictionary (words, glosses, phrases) to a temp directory."""
    (tmp_path / "words.txt").write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    (tmp_path / "glosses.jsonl").write_text(
        "".join(json.dumps(record, ensure_ascii=False) + "\n" for record in GLOSS_RECORDS),
        encoding="utf-8",
    )
    (tmp_path / "go-deeper.txt").write_text("\n".join(PHRASES) + "\n", encoding="utf-8")
    return tmp_path
