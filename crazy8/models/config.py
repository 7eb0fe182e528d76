"""Pydantic configuration model for simulation runs."""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field, model_validator

DECK_SIZE = 52
# Cards that may start in hands.  Larger deals leave too little in the
# deck and discard to circulate, and a forced draw can empty both.
MAX_DEALT = 30


class SimulationConfig(BaseModel):
    games: int = Field(default=10000, ge=1)
    players: int = Field(default=4, ge=2, le=10)
    hand_size: int = Field(default=5, ge=1)
    stall_cap: int = Field(default=10000, ge=0)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _deal_leaves_cards_to_draw(self) -> "SimulationConfig":
        dealt = self.players * self.hand_size
        if dealt > MAX_DEALT:
            raise ValueError(
                f"Cannot deal {self.hand_size} cards to {self.players} players: "
                f"at most {MAX_DEALT} of the {DECK_SIZE} cards may start in hands"
            )
        return self
