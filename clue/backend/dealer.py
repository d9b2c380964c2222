"""Shuffling and dealing for games where the program holds the deck."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .models import Card, Person, Room, Statement, Weapon, full_deck

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    """The three cards in the envelope."""
    person: Person
    weapon: Weapon
    room: Room

    @property
    def statement(self) -> Statement:
        return Statement(person=self.person, weapon=self.weapon, room=self.room)

    def cards(self) -> Set[Card]:
        return set(self.statement.cards())

    def matches(self, statement: Statement) -> bool:
        return statement == self.statement

    __call__ = matches


def deal(
    seats: Sequence[Person],
    rng: Optional[random.Random] = None,
) -> Tuple[Solution, Dict[Person, List[Card]]]:
    """
    Fill the envelope with one card of each category, then deal the rest of
    the deck round-robin starting from the first seat.
    """
    if not seats:
        raise ValueError("cannot deal to an empty table")
    rng = rng or random.Random()
    solution = Solution(
        person=rng.choice(list(Person)),
        weapon=rng.choice(list(Weapon)),
        room=rng.choice(list(Room)),
    )
    deck = [card for card in full_deck() if card not in solution.cards()]
    rng.shuffle(deck)

    hands: Dict[Person, List[Card]] = {person: [] for person in seats}
    for index, card in enumerate(deck):
        hands[seats[index % len(seats)]].append(card)
    logger.debug("Dealt %d cards to %d players", len(deck), len(seats))
    return solution, hands


def hand_sizes(hands: Dict[Person, List[Card]]) -> Dict[Person, int]:
    """The public manifest: how many cards each player holds."""
    return {person: len(cards) for person, cards in hands.items()}


def even_split(seats: Sequence[Person]) -> Dict[Person, int]:
    """Hand sizes a round-robin deal of the full deck minus the envelope gives."""
    remaining = len(full_deck()) - 3
    base, extra = divmod(remaining, len(seats))
    return {person: base + (1 if index < extra else 0) for index, person in enumerate(seats)}
