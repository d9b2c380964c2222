"""A computer player that just wanders from room to room."""

from __future__ import annotations

import random
from typing import Optional

from ..knowledge import Knowledge
from ..models import EndTurn, Move, Room, TurnAction
from .computer import Chooser, ComputerPlayer


class RandomAI(ComputerPlayer):
    """Travels to a random room each turn and never suggests or accuses."""

    def __init__(
        self,
        name: str,
        knowledge: Knowledge,
        chooser: Optional[Chooser] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(name, knowledge, chooser)
        self.rng = rng or random.Random()
        self._moved = False

    def start_turn(self) -> None:
        self._moved = False

    def make_turn(self) -> TurnAction:
        if self._moved:
            return EndTurn()
        self._moved = True
        return Move(destination=self.rng.choice(list(Room)), arrived=True)
