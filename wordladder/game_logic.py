from __future__ import annotations
from typing import List

from .dictionary import WordIndex
from .graph import GraphCache
from .schemas import MoveResult

class LadderState:
    def __init__(self, start: str, end: str, index: WordIndex, graphs: GraphCache, longest: bool = False):
        self.start = start.lower()
        self.end = end.lower()
        self.index = index
        self.graphs = graphs
        self.longest = longest
        self.ladder: List[str] = [self.start]

    @property
    def last_word(self) -> str:
        return self.ladder[-1]

    def is_word(self, word: str) -> bool:
        return self.index.contains(word)

    def verify(self) -> bool:
        # whole-ladder check, run once the end word is reached
        for a, b in zip(self.ladder, self.ladder[1:]):
            if not self.graphs.adjacent(a, b) or not self.is_word(a):
                return False
        return self.is_word(self.ladder[-1])

    def add_word(self, new_word: str) -> MoveResult:
        """Try to extend the ladder with ``new_word``.

        Returns:
            'duplicate' - longest-ladder game and the word is already in the ladder
            'invalid'   - not one letter away from (or a different length than) the last word
            'notfound'  - not in the dictionary
            'win'       - added, and it is the end word
            'error'     - the end word was reached but the ladder fails verification
            'ok'        - added
        """
        new_word = new_word.lower()
        if self.longest and new_word in self.ladder:
            return 'duplicate'
        if not self.graphs.adjacent(new_word, self.last_word):
            return 'invalid'
        if not self.is_word(new_word):
            return 'notfound'
        self.ladder.append(new_word)
        if new_word == self.end:
            return 'win' if self.verify() else 'error'
        return 'ok'

    def undo(self) -> str:
        """Remove and return the last word; '' if only the start word is left."""
        if len(self.ladder) <= 1:
            return ''
        return self.ladder.pop()
