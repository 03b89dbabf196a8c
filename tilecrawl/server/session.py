"""Game session management for single-player sessions."""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field

from fastapi import WebSocket

from ..engine.map_generator import generate_map
from ..engine.turn_executor import TurnExecutor, TurnResults
from ..models.action import Action
from ..models.config import GameConfig
from ..models.game import Game
from ..utils.serialization import snapshot

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Manages one game session.

    Coordinates the game state, action execution and WebSocket connections
    for a single player. Actions are serialized through ``lock`` so only one
    turn is ever in flight.
    """

    id: str
    game: Game
    executor: TurnExecutor
    connections: list[WebSocket] = field(default_factory=list)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def get_state(self) -> dict:
        """Return a fresh snapshot of the game state."""
        return snapshot(self.game)

    @property
    def is_finished(self) -> bool:
        return not self.game.is_game_on

    async def execute_action(self, action: Action) -> TurnResults:
        """Execute one player action to completion.

        Args:
            action: Parsed player action

        Returns:
            TurnResults for the action
        """
        async with self.lock:
            results = self.executor.execute_action(self.game, action)

        logger.info(
            f"Game {self.id}: turn {self.game.turn} {action.token} -> {self.game.status.value}"
        )
        return results

    async def broadcast(self, message: dict):
        """Send message to all connected WebSocket clients.

        Args:
            message: Dictionary to send as JSON
        """
        disconnected = []
        for ws in self.connections:
            try:
                await ws.send_json(message)
            except Exception as e:
                logger.warning(f"Failed to send to WebSocket: {e}")
                disconnected.append(ws)

        # Remove disconnected clients
        for ws in disconnected:
            self.connections.remove(ws)

    def add_connection(self, websocket: WebSocket):
        """Add a WebSocket connection to this session."""
        self.connections.append(websocket)
        logger.info(f"WebSocket connected to game {self.id}, total: {len(self.connections)}")

    def remove_connection(self, websocket: WebSocket):
        """Remove a WebSocket connection from this session."""
        if websocket in self.connections:
            self.connections.remove(websocket)
            logger.info(
                f"WebSocket disconnected from game {self.id}, remaining: {len(self.connections)}"
            )


class GameSessionManager:
    """Manages all active game sessions.

    Sessions live in memory only and are lost when the server stops.
    """

    def __init__(self):
        self.sessions: dict[str, GameSession] = {}

    def create_session(self, seed: int | None = None, config: GameConfig | None = None) -> GameSession:
        """Generate a new dungeon and register a session for it.

        Args:
            seed: Optional RNG seed for determinism
            config: Optional session configuration

        Returns:
            Newly created GameSession

        Raises:
            InvalidConfigurationError: If the configuration cannot be generated
        """
        game_id = f"game-{uuid.uuid4().hex[:8]}"

        if seed is None:
            seed = uuid.uuid4().int % (2**32)

        game = generate_map(seed=seed, config=config)

        session = GameSession(id=game_id, game=game, executor=TurnExecutor())
        self.sessions[game_id] = session

        logger.info(f"Created game {game_id}: seed={seed}")

        return session

    def get(self, game_id: str) -> GameSession | None:
        """Get a game session by ID.

        Args:
            game_id: Game session ID

        Returns:
            GameSession if found, None otherwise
        """
        return self.sessions.get(game_id)

    def delete(self, game_id: str) -> bool:
        """Delete a game session.

        Args:
            game_id: Game session ID

        Returns:
            True if deleted, False if not found
        """
        if game_id in self.sessions:
            del self.sessions[game_id]
            logger.info(f"Deleted game {game_id}")
            return True
        return False

    async def cleanup_all(self):
        """Clean up all sessions (called on shutdown)."""
        logger.info(f"Cleaning up {len(self.sessions)} game sessions")
        self.sessions.clear()
