"""Shared behaviour of computer players: a hand, a notebook and card choice."""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence, Set

from ..game_state import GameStateView
from ..knowledge import Knowledge
from ..models import Card, Event, Person, Statement, SuggestionResult
from .base import Player

logger = logging.getLogger(__name__)

Chooser = Callable[[Sequence[Card]], Card]


class ComputerPlayer(Player):
    """A player whose hand and deductions live in a :class:`Knowledge`."""

    def __init__(self, name: str, knowledge: Knowledge, chooser: Optional[Chooser] = None):
        super().__init__(name, knowledge.me)
        self.knowledge = knowledge
        self.choose: Chooser = chooser or random.choice

    def is_automated(self) -> bool:
        return True

    @property
    def cards(self) -> Set[Card]:
        return self.knowledge.cards

    def subscribe(self, game: GameStateView) -> None:
        super().subscribe(game)
        self.knowledge.game = game

    # --------------------------------------------------------------- disproval
    def matching_cards(self, statement: Statement) -> List[Card]:
        """Cards from the statement that are in hand, in person/weapon/room order."""
        hand = self.cards
        return [card for card in statement.cards() if card in hand]

    def can_disprove(self, statement: Statement) -> bool:
        return bool(self.matching_cards(statement))

    def disprove(self, statement: Statement) -> Optional[Card]:
        options = self.matching_cards(statement)
        if not options:
            logger.debug("%s cannot disprove %s", self.name, statement)
            return None
        return self.choose(options)

    # ------------------------------------------------------------ observation
    def show(self, card: Card, from_person: Person) -> None:
        self.knowledge.observe_show(card, from_person)

    def reveal_cards(self) -> Set[Card]:
        return set(self.cards)

    def receive(self, event: Event) -> None:
        self.knowledge.observe_event(event)

    def suggestion_resolved(self, result: SuggestionResult) -> None:
        # The broadcast skips the suggester, so record who passed here
        for person in result.passed:
            if person != self.character:
                self.knowledge.record_none_of(person, result.statement.cards())
        if self.knowledge.propagate:
            self.knowledge.deduce()
