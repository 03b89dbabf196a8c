"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field


class CreateGameRequest(BaseModel):
    """Request to create a new game.

    Every generation setting is optional; omitted values fall back to the
    GameConfig defaults.
    """

    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")
    width: int | None = Field(default=None, gt=0, description="Grid width in tiles")
    height: int | None = Field(default=None, gt=0, description="Grid height in tiles")
    minRooms: int | None = Field(default=None, ge=0)  # noqa: N815
    maxRooms: int | None = Field(default=None, ge=0)  # noqa: N815
    minRoomSize: int | None = Field(default=None, ge=0)  # noqa: N815
    maxRoomSize: int | None = Field(default=None, ge=0)  # noqa: N815
    swords: int | None = Field(default=None, ge=0)
    potions: int | None = Field(default=None, ge=0)
    enemies: int | None = Field(default=None, ge=0)


class ActionRequest(BaseModel):
    """Single player action.

    Accepts the wire tokens ``move:<direction>`` and ``attack`` as well as
    any raw input the command parser understands (e.g. "w", "move up").
    """

    action: str = Field(min_length=1, description="Action token, e.g. 'move:up' or 'attack'")
