import json

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from wordladder.schemas import ErrorMessage, Move, MoveOutcome, StartGame, UndoOutcome

router = APIRouter()

@router.websocket("/ladder")
async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()
    games = websocket.app.state.games
    game = None

    async def send_state():
        await websocket.send_json({"type": "state", **game.to_state().model_dump()})

    async def push(seconds: float):
        await websocket.send_json({"type": "tick", "elapsed": seconds})

    async def send_error(error: str, detail: str = None):
        await websocket.send_json({"type": "error", **ErrorMessage(error=error, detail=detail).model_dump(exclude_none=True)})

    try:
        while True:
            text = await websocket.receive_text()
            try:
                data = json.loads(text)
            except ValueError as e:
                await send_error("invalid json", str(e))
                continue
            kind = data.get("type") if isinstance(data, dict) else None
            try:
                if kind == "start":
                    req = StartGame.model_validate(data)
                    if game is not None:
                        games.discard(game.id)
                    game = games.start_game(req.start, req.end, req.longest, callback=push)
                    if game is None:
                        await websocket.send_json({"type": "impossible", "start": req.start.lower(), "end": req.end.lower()})
                    else:
                        await send_state()
                elif game is None:
                    await send_error("no game")
                elif kind == "move":
                    move = Move.model_validate(data)
                    result = game.add_word(move.word)
                    outcome = MoveOutcome(result=result, word=move.word.lower(), ladder=game.ladder)
                    await websocket.send_json({"type": "move", **outcome.model_dump()})
                elif kind == "undo":
                    word = game.undo()
                    await websocket.send_json({"type": "undo", **UndoOutcome(word=word, ladder=game.ladder).model_dump()})
                elif kind == "pause":
                    game.pause_timer()
                    await send_state()
                else:
                    await send_error(f"unknown message type {kind!r}")
            except ValidationError as e:
                await send_error("invalid payload", str(e))
    except WebSocketDisconnect:
        pass
    finally:
        if game is not None:
            games.discard(game.id)
