from __future__ import annotations
import logging
import uuid
from typing import Dict, Iterable, List, Optional

from ..config import Settings
from ..dictionary import WordIndex
from ..game_logic import LadderState
from ..graph import GraphCache
from ..schemas import GameState, GameStatus, MoveResult
from .timer import SessionClock, TimerCallback

logger = logging.getLogger(__name__)

class LadderGame:
    """A single game session. Use GameManager.start_game() to create one."""

    def __init__(self, start: str, end: str, index: WordIndex, graphs: GraphCache,
                 longest: bool = False, clock: Optional[SessionClock] = None,
                 game_id: Optional[str] = None):
        self.id = game_id or uuid.uuid4().hex
        self.state = LadderState(start, end, index, graphs, longest=longest)
        self.clock = clock or SessionClock()
        self.status: GameStatus = 'active'
        self.result: Optional[MoveResult] = None

    @property
    def ladder(self) -> List[str]:
        return list(self.state.ladder)

    @property
    def finished(self) -> bool:
        return self.status in ('won', 'error')

    @property
    def elapsed(self) -> float:
        return self.clock.seconds

    def start_timer(self):
        if self.finished:
            return
        self.clock.start()
        self.status = 'active'

    def pause_timer(self):
        self.clock.stop()
        if not self.finished:
            self.status = 'paused'

    def is_word(self, word: str) -> bool:
        return self.state.is_word(word)

    def add_word(self, word: str) -> MoveResult:
        if self.finished:
            return self.result  # type: ignore
        result = self.state.add_word(word)
        if result in ('win', 'error'):
            self.clock.stop()
            self.result = result
            self.status = 'won' if result == 'win' else 'error'
            if result == 'win':
                logger.info("Game %s won in %.1fs with %s words", self.id, self.elapsed, len(self.state.ladder))
            else:
                logger.error("Game %s reached %r but the ladder failed verification: %s",
                             self.id, self.state.end, self.state.ladder)
        return result

    def undo(self) -> str:
        if self.finished:
            return ''
        return self.state.undo()

    def to_state(self) -> GameState:
        return GameState(
            id=self.id,
            start=self.state.start,
            end=self.state.end,
            longest=self.state.longest,
            ladder=self.ladder,
            status=self.status,
            elapsed=self.elapsed,
        )

class GameManager:
    """Holds the dictionary and the per-length graphs shared by every game."""

    def __init__(self, words: Iterable[str] = (), timer_callback: Optional[TimerCallback] = None,
                 settings: Optional[Settings] = None, index: Optional[WordIndex] = None):
        self.settings = settings or Settings()
        self.index = index if index is not None else WordIndex.build(words, max_length=self.settings.max_word_length)
        self.graphs = GraphCache(self.index)
        self.timer_callback = timer_callback
        self.games: Dict[str, LadderGame] = {}

    def is_word(self, word: str) -> bool:
        return self.index.contains(word)

    def adjacent(self, a: str, b: str) -> bool:
        return self.graphs.adjacent(a, b)

    def is_possible_game(self, start: str, end: str) -> bool:
        return self.graphs.is_possible(start, end)

    def start_game(self, start: str, end: str, longest: bool = False,
                   callback: Optional[TimerCallback] = None,
                   game_id: Optional[str] = None) -> Optional[LadderGame]:
        start = start.lower()
        end = end.lower()
        if not self.is_possible_game(start, end):
            logger.info("No ladder from %r to %r; game not started", start, end)
            return None
        clock = SessionClock(
            callback if callback is not None else self.timer_callback,
            tick_interval=self.settings.tick_interval,
            notify_delay=self.settings.notify_delay,
        )
        game = LadderGame(start, end, self.index, self.graphs, longest=longest, clock=clock, game_id=game_id)
        game.start_timer()
        if game.id in self.games:
            self.discard(game.id)
        self.games[game.id] = game
        logger.info("Game %s started: %s -> %s%s", game.id, start, end, " (longest)" if longest else "")
        return game

    def get(self, game_id: str) -> Optional[LadderGame]:
        game = self.games.get(game_id)
        if game is None:
            logger.debug("Unknown game %s", game_id)
        return game

    def discard(self, game_id: str):
        game = self.games.pop(game_id, None)
        if game is not None:
            game.pause_timer()

    def active_games(self) -> List[LadderGame]:
        return [g for g in self.games.values() if g.status == 'active']
