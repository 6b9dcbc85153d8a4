"""
Line-oriented loaders for the word list and the reference phrase list.
"""

from pathlib import Path


def _read_lines(path: Path) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f]


def load_words(path: Path) -> list[str]:
    """Load the headword list, one word per line.

    Surrounding whitespace and double quotes are stripped and blank lines
    are skipped.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    words = []
    for line in _read_lines(path):
        word = line.strip('"')
        if word:
            words.append(word)
    return words


def load_phrases(path: Path) -> list[str]:
    """Load reference phrases ("see also", "plural of"), one per line."""
    return [line for line in _read_lines(path) if line]
