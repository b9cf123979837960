from __future__ import annotations
from typing import List

import socketio
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .config import settings, setup_logging
from .schemas import (AdjacencyCheck, DictionaryInfo, ErrorMessage, GameState, Move, MoveOutcome,
                      PossibleCheck, StartGame, UndoOutcome, WordCheck)
from .managers.game import GameManager
from .dictionary import service as dict_service
from .routers import ws

setup_logging(settings.log_level)

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=settings.cors_origins)
app = FastAPI(title="Word Ladder Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

# One controller for the whole process: dictionary and graphs are shared by every game
games = GameManager(index=dict_service, settings=settings)

app.state.games = games
app.include_router(ws.router, prefix='/ws')

# REST Endpoints
@app.get('/dict/validate', response_model=WordCheck)
async def validate_word(word: str):
    return WordCheck(word=word.lower(), valid=games.is_word(word))

@app.get('/dict/info', response_model=DictionaryInfo)
async def dictionary_info():
    return DictionaryInfo(words=len(games.index), lengths=games.index.lengths(),
                          cachedGraphs=games.graphs.cached_lengths())

@app.get('/ladder/adjacent', response_model=AdjacencyCheck)
async def check_adjacent(a: str, b: str):
    return AdjacencyCheck(a=a.lower(), b=b.lower(), adjacent=games.adjacent(a, b))

@app.get('/ladder/possible', response_model=PossibleCheck)
async def check_possible(start: str, end: str):
    return PossibleCheck(start=start.lower(), end=end.lower(), possible=games.is_possible_game(start, end))

@app.get('/games', response_model=List[GameState])
async def list_games():
    return [g.to_state() for g in games.games.values()]

@app.get('/games/{game_id}', response_model=GameState)
async def get_game(game_id: str):
    game = games.get(game_id)
    if not game:
        raise HTTPException(status_code=404, detail='Game not found')
    return game.to_state()

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.emit('pong', to=sid)

@sio.event
async def disconnect(sid):
    games.discard(sid)

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

async def _emit_error(sid: str, error: str, detail: str = None):
    await sio.emit('game:error', ErrorMessage(error=error, detail=detail).model_dump(exclude_none=True), to=sid)

def _timer_push(sid: str):
    async def push(seconds: float):
        await sio.emit('timer-sync', {'elapsed': seconds, 'isPaused': False}, to=sid)
    return push

@sio.on('game:start')
async def game_start(sid, payload):
    try:
        req = StartGame.model_validate(payload)
    except ValidationError as e:
        await _emit_error(sid, 'invalid payload', str(e))
        return
    games.discard(sid)
    game = games.start_game(req.start, req.end, req.longest, callback=_timer_push(sid), game_id=sid)
    if game is None:
        await sio.emit('game:impossible', {'start': req.start.lower(), 'end': req.end.lower()}, to=sid)
        return
    await sio.emit('game:state', game.to_state().model_dump(), to=sid)

@sio.on('game:addWord')
async def add_word(sid, payload):
    game = games.get(sid)
    if not game:
        await _emit_error(sid, 'no game')
        return
    try:
        move = Move.model_validate(payload)
    except ValidationError as e:
        await _emit_error(sid, 'invalid payload', str(e))
        return
    result = game.add_word(move.word)
    outcome = MoveOutcome(result=result, word=move.word.lower(), ladder=game.ladder)
    await sio.emit('game:moveResult', outcome.model_dump(), to=sid)
    if game.finished:
        await sio.emit('game:state', game.to_state().model_dump(), to=sid)

@sio.on('game:undo')
async def undo(sid):
    game = games.get(sid)
    if not game:
        await _emit_error(sid, 'no game')
        return
    word = game.undo()
    await sio.emit('game:undone', UndoOutcome(word=word, ladder=game.ladder).model_dump(), to=sid)

@sio.on('game:pause')
async def pause(sid):
    game = games.get(sid)
    if not game:
        await _emit_error(sid, 'no game')
        return
    game.pause_timer()
    await sio.emit('game:state', game.to_state().model_dump(), to=sid)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordladder.main:application --reload --host 0.0.0.0 --port 8000
