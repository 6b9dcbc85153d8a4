"""
Plain-text rendering of a headword's annotated definition.
"""

from .glosses import CrossReferenceExpander, ExpansionNode, LexemeStore

# (entry line, meaning line) prefixes per expansion depth
_DEPTH_PREFIXES = {
    1: ("  ~> ", "      - "),
    2: ("         ~> ", "            - "),
}


def format_expansion(node: ExpansionNode) -> str:
    """Render an expansion and everything nested under it."""
    entry_prefix, meaning_prefix = _DEPTH_PREFIXES[node.depth]
    lines = []
    for entry, pairs in node.iter_entries():
        lines.append(f"{entry_prefix}{entry.headword} ({entry.part_of_speech})\n")
        for meaning, child in pairs:
            lines.append(f"{meaning_prefix}{meaning}\n")
            if child is not None:
                lines.append(format_expansion(child))
    return "".join(lines)


def format_gloss_text(headword: str, store: LexemeStore, expander: CrossReferenceExpander) -> str:
    """Render every gloss of `headword` with cross-references expanded.

    Example output:
        koiranen (noun)

        - diminutive of koira.
          ~> koira (noun)
              - dog

    Args:
        headword: Word to render
        store: Gloss source
        expander: Cross-reference expander sharing the same store

    Returns:
        The rendered text, or a "No gloss available." notice
    """
    entries = store.lookup(headword)
    if not entries:
        return f"{headword}\n\nNo gloss available."

    parts = []
    for i, entry in enumerate(entries):
        if i > 0:
            parts.append("\n")
        parts.append(f"{entry.headword} ({entry.part_of_speech})\n\n")
        for meaning in entry.meanings:
            parts.append(f"- {meaning}\n")
            node = expander.expand(meaning)
            if node is not None:
                parts.append(format_expansion(node))
    return "".join(parts)
