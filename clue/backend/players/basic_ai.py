"""A computer player that plays like a beginner would."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Set, Type

from ..errors import InvariantViolation
from ..knowledge import Knowledge
from ..models import (
    CardValue,
    EndTurn,
    MakeAccusation,
    Move,
    Person,
    Room,
    Statement,
    Suggest,
    SuggestionResult,
    TurnAction,
    Weapon,
)
from .computer import Chooser, ComputerPlayer

logger = logging.getLogger(__name__)

RoomProvider = Callable[[], Iterable[Room]]


def _first(values: Set, category: Type[CardValue]):
    """First of ``values`` in catalogue order."""
    for value in category:
        if value in values:
            return value
    raise InvariantViolation(f"every {category.__name__.lower()} has been ruled out")


class BasicAI(ComputerPlayer):
    """
    Greedy strategy:

    - accuse as soon as the envelope is known (or a suggestion went unrefuted)
    - otherwise head for a room that is still suspicious
    - once in one, suggest the first suspicious person and weapon there

    It makes no effort to hide what it knows in its suggestions.
    """

    def __init__(
        self,
        name: str,
        knowledge: Knowledge,
        chooser: Optional[Chooser] = None,
        reachable_rooms: Optional[RoomProvider] = None,
    ):
        """
        Args:
            reachable_rooms: rooms the token can reach this turn; defaults to
                every room, which suits a game played without a board
        """
        super().__init__(name, knowledge, chooser)
        self.reachable_rooms: RoomProvider = reachable_rooms or (lambda: list(Room))
        self._pending_accusation: Optional[Statement] = None
        self._moved = False
        self._suggested = False

    def start_turn(self) -> None:
        self._moved = False
        self._suggested = False

    def make_turn(self) -> TurnAction:
        accusation = self._pending_accusation or self.knowledge.solution()
        if accusation is not None:
            self._pending_accusation = None
            return MakeAccusation(accusation)

        if self._suggested:
            return EndTurn()

        if not self.knowledge.in_suspicious_room():
            if self._moved:
                return EndTurn()
            self._moved = True
            return self._travel()

        room = self.knowledge.location.room
        statement = Statement(
            person=_first(self.knowledge.suspicious_people, Person),
            weapon=_first(self.knowledge.suspicious_weapons, Weapon),
            room=room,
        )
        self._suggested = True
        return Suggest(statement)

    def _travel(self) -> Move:
        close = set(self.reachable_rooms())
        targets = self.knowledge.suspicious_rooms & close
        if targets:
            return Move(destination=_first(targets, Room), arrived=True)
        logger.info(
            "%s wants to travel toward one of: %s",
            self.name,
            ", ".join(sorted(room.value for room in self.knowledge.suspicious_rooms)),
        )
        return Move()

    def suggestion_resolved(self, result: SuggestionResult) -> None:
        super().suggestion_resolved(result)
        if not result.refuted:
            # Nobody holds any of the three, and none are in our own hand
            self._pending_accusation = result.statement
