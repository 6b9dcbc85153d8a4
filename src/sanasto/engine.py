"""
Lookup engine tying the store, index and cross-reference machinery together.
"""

import logging
import time

from .config import SanastoConfig
from .glosses import CrossReferenceExpander, ExpansionNode, GlossEntry, LexemeStore, PhraseMatcher
from .index import PrefixIndex
from .loaders import load_phrases, load_words

logger = logging.getLogger("sanasto")


class LookupEngine:
    """Build-once, read-many facade over the dictionary data.

    Usage:
        engine = LookupEngine.from_config(SanastoConfig(data_dir=Path("data")))

        # Search as you type
        candidates = engine.complete("koi")

        # Render the chosen word
        for entry in engine.lookup("koiranen"):
            for meaning in entry.meanings:
                annotation = engine.expand(meaning)
    """

    def __init__(self, store: LexemeStore, index: PrefixIndex, matcher: PhraseMatcher) -> None:
        self.store = store
        self.index = index
        self.matcher = matcher
        self.expander = CrossReferenceExpander(store, matcher)

    @classmethod
    def from_config(cls, config: SanastoConfig) -> "LookupEngine":
        """Load all data files named by `config` and build the engine.

        The gloss and phrase files are required. Without a word list the
        index is built from the gloss headwords instead.

        Raises:
            FileNotFoundError: If the gloss or phrase file is missing
            GlossLoadError: If a gloss record is malformed
        """
        start = time.perf_counter()
        store = LexemeStore.from_jsonl(config.glosses_path)
        logger.info(
            f"Loaded glosses for {len(store)} words from {config.glosses_path} "
            f"in {time.perf_counter() - start:.3f}s"
        )

        start = time.perf_counter()
        if config.words_path.exists():
            words = load_words(config.words_path)
        else:
            logger.warning(f"Word list {config.words_path} not found, indexing gloss headwords instead")
            words = store.headwords()
        index = PrefixIndex.from_words(words)
        logger.info(f"Built trie over {len(words)} words in {time.perf_counter() - start:.3f}s")
        index.log_diagnostics()

        start = time.perf_counter()
        matcher = PhraseMatcher(load_phrases(config.phrases_path))
        logger.info(
            f"Initialized {len(matcher)} reference phrases from {config.phrases_path} "
            f"in {time.perf_counter() - start:.3f}s"
        )

        return cls(store, index, matcher)

    def complete(self, prefix: str) -> list[str]:
        """Headwords starting with `prefix` (at most MAX_MATCHES)."""
        return self.index.find_matches(prefix)

    def lookup(self, headword: str) -> tuple[GlossEntry, ...]:
        return self.store.lookup(headword)

    def expand(self, meaning: str, depth: int = 1) -> ExpansionNode | None:
        return self.expander.expand(meaning, depth)

    def reverse_find(self, query: str) -> list[str]:
        """Headwords whose English meanings contain `query`."""
        return self.store.search_meanings(query)
