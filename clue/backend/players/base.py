"""Player interface the game engine talks to."""

from __future__ import annotations

import abc
from typing import Optional, Set

from ..game_state import GameStateView
from ..models import Card, Event, Person, Statement, SuggestionResult, TurnAction


class Player(abc.ABC):
    """Abstract base class for everyone seated at the table."""

    def __init__(self, name: str, character: Person):
        self.name = name
        self.character = character
        self.game: Optional[GameStateView] = None

    def is_automated(self) -> bool:
        return False

    def subscribe(self, game: GameStateView) -> None:
        """Bind the shared table state at game start."""
        self.game = game

    def start_turn(self) -> None:
        """Called once before the first ``make_turn`` of each turn."""

    @abc.abstractmethod
    def make_turn(self) -> TurnAction:
        """Return the next thing this player does on its turn."""

    @abc.abstractmethod
    def can_disprove(self, statement: Statement) -> bool:
        """Whether this player holds any of the statement's cards."""

    @abc.abstractmethod
    def disprove(self, statement: Statement) -> Optional[Card]:
        """Pick one matching card to show the suggester, or None."""

    @abc.abstractmethod
    def show(self, card: Card, from_person: Person) -> None:
        """``from_person`` privately shows this player ``card``."""

    @abc.abstractmethod
    def reveal_cards(self) -> Set[Card]:
        """Turn the whole hand face up after a wrong accusation."""

    def receive(self, event: Event) -> None:
        """Another player's turn produced ``event``."""

    def suggestion_resolved(self, result: SuggestionResult) -> None:
        """Feedback on this player's own suggestion."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.character.value})"
