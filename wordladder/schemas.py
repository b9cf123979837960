from __future__ import annotations
from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional

MoveResult = Literal['ok', 'invalid', 'notfound', 'duplicate', 'win', 'error']

GameStatus = Literal['active', 'paused', 'won', 'error']

class StartGame(BaseModel):
    start: str = Field(..., min_length=1)
    end: str = Field(..., min_length=1)
    longest: bool = False

    @field_validator('start', 'end')
    @classmethod
    def _strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('word must not be blank')
        return v

class Move(BaseModel):
    word: str

class MoveOutcome(BaseModel):
    result: MoveResult
    word: str
    ladder: List[str]

class UndoOutcome(BaseModel):
    # '' when only the start word was left
    word: str
    ladder: List[str]

class TimerState(BaseModel):
    # seconds, one decimal
    elapsed: float
    isPaused: bool = False

class GameState(BaseModel):
    id: str
    start: str
    end: str
    longest: bool = False
    ladder: List[str]
    status: GameStatus = 'active'
    elapsed: float = 0.0

class WordCheck(BaseModel):
    word: str
    valid: bool

class AdjacencyCheck(BaseModel):
    a: str
    b: str
    adjacent: bool

class PossibleCheck(BaseModel):
    start: str
    end: str
    possible: bool

class DictionaryInfo(BaseModel):
    words: int
    lengths: List[int]
    cachedGraphs: List[int] = []

class ErrorMessage(BaseModel):
    error: str
    detail: Optional[str] = None
