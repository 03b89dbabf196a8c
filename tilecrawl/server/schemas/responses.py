"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class GameStateResponse(BaseModel):
    """Response containing current game state."""

    gameId: str  # noqa: N815
    turn: int
    status: str
    state: dict


class CreateGameResponse(BaseModel):
    """Response after creating a new game."""

    gameId: str  # noqa: N815
    seed: int
    state: dict


class ActionResponse(BaseModel):
    """Response after executing a player action."""

    accepted: bool
    action: str | None = None
    moved: bool = False
    turn: int | None = None
    status: str | None = None
    events: list[dict] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
