"""Event data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Union

from .cards import Person, Room, Statement


class ActionKind(str, Enum):
    """Notable things that can happen on a turn"""
    TRAVEL = "travel"
    SUGGESTION_DISPROVED = "suggestion_disproved"
    COULDNT_REFUTE = "couldnt_refute"
    SUGGESTION_UNREFUTED = "suggestion_unrefuted"
    ACCUSE = "accuse"


@dataclass(frozen=True)
class Travel:
    room: Room
    kind: ClassVar[ActionKind] = ActionKind.TRAVEL

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "room": self.room.value}


@dataclass(frozen=True)
class SuggestionDisproved:
    """Someone showed the suggester a card. Which card is private."""
    statement: Statement
    disprover: Person
    kind: ClassVar[ActionKind] = ActionKind.SUGGESTION_DISPROVED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "statement": self.statement.to_dict(),
            "disprover": self.disprover.value,
        }


@dataclass(frozen=True)
class CouldntRefute:
    """``person`` was asked and holds none of the three cards."""
    statement: Statement
    person: Person
    kind: ClassVar[ActionKind] = ActionKind.COULDNT_REFUTE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "statement": self.statement.to_dict(),
            "person": self.person.value,
        }


@dataclass(frozen=True)
class SuggestionUnrefuted:
    statement: Statement
    kind: ClassVar[ActionKind] = ActionKind.SUGGESTION_UNREFUTED

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "statement": self.statement.to_dict()}


@dataclass(frozen=True)
class Accuse:
    statement: Statement
    correct: bool
    kind: ClassVar[ActionKind] = ActionKind.ACCUSE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "statement": self.statement.to_dict(),
            "correct": self.correct,
        }


NotableAction = Union[Travel, SuggestionDisproved, CouldntRefute, SuggestionUnrefuted, Accuse]


@dataclass(frozen=True)
class Event:
    """A notable action paired with the person whose turn produced it."""
    actor: Person
    action: NotableAction

    @property
    def kind(self) -> ActionKind:
        return self.action.kind

    def to_dict(self) -> Dict[str, Any]:
        return {"actor": self.actor.value, **self.action.to_dict()}

    def __str__(self) -> str:
        action = self.action
        if isinstance(action, Travel):
            return f"{self.actor} went to the {action.room}"
        if isinstance(action, SuggestionDisproved):
            return f"{action.disprover} disproved {self.actor}'s suggestion ({action.statement})"
        if isinstance(action, CouldntRefute):
            return f"{action.person} couldn't refute {self.actor}'s suggestion ({action.statement})"
        if isinstance(action, SuggestionUnrefuted):
            return f"nobody could refute {self.actor}'s suggestion ({action.statement})"
        verdict = "correct" if action.correct else "wrong"
        return f"{self.actor} made a {verdict} accusation ({action.statement})"
