from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional

from .config import settings

logger = logging.getLogger(__name__)

# Minimal word list for development/demo.
# In production, point WORDLADDER_WORD_LIST at a full word list.

DEFAULT_WORDS = [
    # cat -> cot -> cog -> dog
    'cat','cot','cog','dog','bat','bag','big','bog','bug','but','cut','cap','cop','cup',
    'hat','hot','hog','hug','hut','mat','mop','map','pat','pot','pit','sit','sat','set',
    'ten','tan','tin','ton','top','tip','tap',
    # cold -> cord -> card -> ward -> warm
    'cold','cord','card','ward','warm','word','wore','core','care','cart','dart','dark',
    'bark','band','bond','bold','bolt','boat','coat','cost','most','mist','mast','fast',
    'fist','gist','hold','hole','home','dome','dame','game','gate','late','lane','line',
    'mine','mind','wind','wine','fine','fire','hire','here','hers',
    # no neighbours
    'quiz','jazz',
]

def load_words(path) -> List[str]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list file not found: {path}")
    words: List[str] = []
    with path.open('r', encoding='utf-8', errors='ignore') as f:
        for line in f:
            w = line.strip()
            if not w or not w.isalpha():
                continue
            words.append(w)
    logger.info("Loaded %s words from %s", len(words), path)
    return words

class WordIndex:
    """Dictionary words bucketed by length.

    Words are stored lowercase. Empty words and words of ``max_length``
    characters or more are left out, so lookups for them always fail.
    """

    def __init__(self, words: Iterable[str], max_length: int = 10):
        self.max_length = max_length
        buckets: Dict[int, set] = {}
        for word in words:
            w = word.strip().lower()
            if not w or len(w) >= max_length:
                continue
            buckets.setdefault(len(w), set()).add(w)
        self._buckets: Dict[int, FrozenSet[str]] = {n: frozenset(ws) for n, ws in buckets.items()}

    @classmethod
    def build(cls, words: Iterable[str], max_length: int = 10) -> 'WordIndex':
        return cls(words, max_length=max_length)

    def contains(self, word: str) -> bool:
        if not word:
            return False
        bucket = self._buckets.get(len(word))
        if bucket is None:
            return False
        return word.lower() in bucket

    __contains__ = contains

    def bucket(self, length: int) -> FrozenSet[str]:
        return self._buckets.get(length, frozenset())

    def lengths(self) -> List[int]:
        return sorted(self._buckets)

    def __len__(self) -> int:
        return sum(len(b) for b in self._buckets.values())

def default_index(word_list: Optional[str] = None, max_length: int = 10) -> WordIndex:
    words = load_words(word_list) if word_list else DEFAULT_WORDS
    index = WordIndex.build(words, max_length=max_length)
    logger.info("Indexed %s words across lengths %s", len(index), index.lengths())
    return index

# Singleton instance
service = default_index(settings.word_list, settings.max_word_length)
