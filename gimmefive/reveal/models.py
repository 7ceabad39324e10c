from enum import Enum
from typing import Literal
from pydantic import BaseModel

class Phase(str, Enum):
    ROLLING = "rolling"
    STOPPED = "stopped"

class StartRound(BaseModel):
    pass

class TimerFired(BaseModel):
    round_number: int            # Round that scheduled this tick

class NewRoundRequested(BaseModel):
    source: Literal["confirm", "scroll_up", "scroll_down"] = "confirm"

class QuitRequested(BaseModel):
    pass

class RoundSnapshot(BaseModel):
    word: str                    # "" until the first round starts
    phase: Phase
    step: int                    # -1 before the first round
    round_number: int = 0

    @property
    def is_final(self) -> bool:
        return self.phase == Phase.STOPPED and self.step >= 0
