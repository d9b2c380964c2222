"""Turn actions players hand to the engine, and what a suggestion produced."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .cards import Card, Person, Room, Statement
from .event import CouldntRefute, Event


class TurnActionType(str, Enum):
    """What a player can do when asked for its next move"""
    SUGGEST = "suggest"
    ACCUSE = "accuse"
    TRAVEL = "travel"
    DONE = "done"


@dataclass(frozen=True)
class Suggest:
    statement: Statement
    type: TurnActionType = TurnActionType.SUGGEST


@dataclass(frozen=True)
class MakeAccusation:
    statement: Statement
    type: TurnActionType = TurnActionType.ACCUSE


@dataclass(frozen=True)
class Move:
    """Head for ``destination``; only an ``arrived`` move puts the token in the room."""
    destination: Optional[Room] = None
    arrived: bool = False
    type: TurnActionType = TurnActionType.TRAVEL


@dataclass(frozen=True)
class EndTurn:
    type: TurnActionType = TurnActionType.DONE


TurnAction = Union[Suggest, MakeAccusation, Move, EndTurn]


@dataclass(frozen=True)
class SuggestionResult:
    """Outcome of one suggestion as seen by the player who made it."""
    statement: Statement
    disprover: Optional[Person] = None
    card: Optional[Card] = None
    events: Tuple[Event, ...] = ()

    @property
    def refuted(self) -> bool:
        return self.disprover is not None

    @property
    def passed(self) -> Tuple[Person, ...]:
        """Players who were asked and could not refute, in polling order."""
        return tuple(e.action.person for e in self.events if isinstance(e.action, CouldntRefute))
