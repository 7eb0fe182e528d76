"""Pydantic model for recorded game events."""
from __future__ import annotations
from typing import Any, Dict
from pydantic import BaseModel, Field


class GameEvent(BaseModel):
    """One logger hook invocation: type is the hook name."""
    type: str  # "start" | "draw" | "play" | "wild" | "win" | "quit"
    payload: Dict[str, Any] = Field(default_factory=dict)
