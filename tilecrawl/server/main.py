"""FastAPI server for Tile Crawl.

Provides an HTTP/WebSocket API that a browser front end uses to render the
dungeon and forward player actions.
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import replace

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

from ..interface.command_parser import ActionParseError, CommandParser
from ..models.config import GameConfig
from ..models.errors import InvalidConfigurationError
from .schemas.requests import ActionRequest, CreateGameRequest
from .schemas.responses import ActionResponse, CreateGameResponse, GameStateResponse
from .session import GameSessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global session manager
sessions = GameSessionManager()
parser = CommandParser()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Tile Crawl server starting...")
    yield
    logger.info("Tile Crawl server shutting down...")
    await sessions.cleanup_all()


app = FastAPI(
    title="Tile Crawl API",
    description="Web API for playing procedurally generated dungeon sessions",
    version="1.0.0",
    lifespan=lifespan,
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def build_config(request: CreateGameRequest) -> GameConfig:
    """Overlay the request's optional settings on the default GameConfig.

    Raises:
        InvalidConfigurationError: If the combined settings are inconsistent
    """
    defaults = GameConfig()
    rooms = replace(
        defaults.rooms,
        **_present(
            min_count=request.minRooms,
            max_count=request.maxRooms,
            min_size=request.minRoomSize,
            max_size=request.maxRoomSize,
        ),
    )
    items = replace(
        defaults.items,
        **_present(sword_count=request.swords, potion_count=request.potions),
    )
    return replace(
        defaults,
        rooms=rooms,
        items=items,
        **_present(width=request.width, height=request.height, enemy_count=request.enemies),
    )


def _present(**values) -> dict:
    return {key: value for key, value in values.items() if value is not None}


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Tile Crawl",
        "status": "operational",
        "activeGames": len(sessions.sessions),
    }


@app.post("/api/games", response_model=CreateGameResponse)
async def create_game(request: CreateGameRequest):
    """Create a new game session.

    Example:
        POST /api/games
        {"seed": 42, "width": 40, "height": 24, "enemies": 10}
    """
    try:
        config = build_config(request)
        session = sessions.create_session(seed=request.seed, config=config)
    except InvalidConfigurationError as e:
        logger.warning(f"Rejected game configuration: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return CreateGameResponse(
        gameId=session.id,
        seed=session.game.seed,
        state=session.get_state(),
    )


@app.get("/api/games/{game_id}/state", response_model=GameStateResponse)
async def get_game_state(game_id: str):
    """Get current game state snapshot."""
    session = sessions.get(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")

    return GameStateResponse(
        gameId=game_id,
        turn=session.game.turn,
        status=session.game.status.value,
        state=session.get_state(),
    )


@app.post("/api/games/{game_id}/actions", response_model=ActionResponse)
async def submit_action(game_id: str, request: ActionRequest):
    """Execute one player action and broadcast the new state.

    Example:
        POST /api/games/game-abc123/actions
        {"action": "move:up"}
    """
    session = sessions.get(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")

    if session.is_finished:
        raise HTTPException(
            status_code=400,
            detail=f"Game already ended: {session.game.status.value}",
        )

    try:
        action = parser.parse(request.action)
    except ActionParseError as e:
        return ActionResponse(accepted=False, errors=[e.message])
    except ValueError:
        # HELP/QUIT meta signals from the terminal parser
        return ActionResponse(
            accepted=False,
            errors=[f"'{request.action.strip()}': help/quit are not game actions"],
        )

    if action is None:
        return ActionResponse(accepted=False, errors=["Empty action"])

    results = await session.execute_action(action)
    events = [event.to_dict() for event in results.events]

    await session.broadcast(
        {
            "type": "TURN_EXECUTED",
            "turn": session.game.turn,
            "events": events,
            "state": session.get_state(),
        }
    )
    if session.is_finished:
        await session.broadcast({"type": "GAME_OVER", "status": session.game.status.value})

    return ActionResponse(
        accepted=True,
        action=action.token,
        moved=results.moved,
        turn=session.game.turn,
        status=session.game.status.value,
        events=events,
    )


@app.delete("/api/games/{game_id}")
async def delete_game(game_id: str):
    """Delete a game session."""
    if sessions.delete(game_id):
        return {"message": f"Game {game_id} deleted"}
    else:
        raise HTTPException(status_code=404, detail="Game not found")


# ============================================
# WEBSOCKET ENDPOINT
# ============================================


@app.websocket("/ws/games/{game_id}")
async def websocket_endpoint(websocket: WebSocket, game_id: str):
    """WebSocket connection for real-time state updates.

    Clients receive:
    - CONNECTED: Initial connection confirmation with state
    - TURN_EXECUTED: Action completed with events and new state
    - GAME_OVER: Session reached a terminal state
    """
    session = sessions.get(game_id)
    if not session:
        await websocket.close(code=1008, reason="Game not found")
        return

    await websocket.accept()
    session.add_connection(websocket)

    try:
        await websocket.send_json(
            {
                "type": "CONNECTED",
                "gameId": game_id,
                "turn": session.game.turn,
                "state": session.get_state(),
            }
        )

        # Keep connection alive and handle client messages
        while True:
            data = await websocket.receive_json()

            if data.get("type") == "PING":
                await websocket.send_json({"type": "PONG"})

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected from game {game_id}")
    except Exception as e:
        logger.error(f"WebSocket error in game {game_id}: {e}", exc_info=True)
    finally:
        session.remove_connection(websocket)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
