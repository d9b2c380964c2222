"""A player's private belief state about the hidden solution."""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Set

from .errors import InvariantViolation
from .game_state import GameStateView
from .models import (
    Card,
    CouldntRefute,
    Event,
    InformationStatus,
    Notebook,
    Person,
    PlayerLocation,
    Room,
    Statement,
    SuggestionDisproved,
    Weapon,
    WALKING,
    full_deck,
)

logger = logging.getLogger(__name__)


class Knowledge:
    """
    Everything one player can observe about the game, without any strategy.

    Holds the notebook, the cards known to sit in each hand, the cards each
    opponent is proven not to hold (anti-cards) and the "holds at least one
    of these" facts left behind by disprovals the player did not see.

    With ``propagate`` off the store records facts exactly as observed. With
    it on, every update is followed by :meth:`deduce`.
    """

    def __init__(
        self,
        me: Person,
        hand_sizes: Mapping[Person, int],
        my_cards: Iterable[Card],
        propagate: bool = False,
    ):
        """
        Args:
            me: the suspect this player plays as
            hand_sizes: every seated player and how many cards they hold
            my_cards: the cards dealt to this player
            propagate: run constraint propagation after each update
        """
        self._me = me
        self.propagate = propagate
        self.notebook = Notebook()
        self.hand_sizes: Dict[Person, int] = dict(hand_sizes)
        self.known_cards: Dict[Person, Set[Card]] = {person: set() for person in self.hand_sizes}
        self.known_cards.setdefault(me, set())
        self.anti_cards: Dict[Person, Set[Card]] = {
            person: set() for person in self.hand_sizes if person != me
        }
        self.one_of_these: Dict[Person, Set[FrozenSet[Card]]] = {
            person: set() for person in self.hand_sizes if person != me
        }
        self.game: Optional[GameStateView] = None

        cards = list(my_cards)
        self.hand_sizes.setdefault(me, len(cards))
        self.record_own_hand(cards)

    @property
    def me(self) -> Person:
        return self._me

    @property
    def others(self) -> List[Person]:
        return [person for person in self.hand_sizes if person != self._me]

    # ----------------------------------------------------------- observations
    def record_own_hand(self, cards: Iterable[Card]) -> None:
        """Cards in my hand cannot be in the envelope."""
        for card in cards:
            self.notebook.rule_out(card)
            self.known_cards[self._me].add(card)
        self._after_update()

    def observe_show(self, card: Card, from_player: Person) -> None:
        """``from_player`` showed me ``card``: they hold it."""
        card.require_value()
        self.known_cards.setdefault(from_player, set()).add(card)
        # Seeing the card outranks anything deduced about it
        self.notebook.mark_card(card, InformationStatus.RULED_OUT, override=True)
        logger.debug("%s saw %s from %s", self._me, card, from_player)
        self._after_update()

    def observe_event(self, event: Event) -> None:
        """Learn from an event another player's turn produced."""
        if event.actor == self._me:
            return
        action = event.action
        if isinstance(action, SuggestionDisproved):
            if action.disprover != self._me:
                self.record_one_of(action.disprover, action.statement.cards())
        elif isinstance(action, CouldntRefute):
            if action.person != self._me:
                self.record_none_of(action.person, action.statement.cards())
        # Travel, unrefuted suggestions and accusations carry no card facts
        self._after_update()

    def record_one_of(self, person: Person, cards: Iterable[Card]) -> None:
        options = frozenset(cards)
        for card in options:
            card.require_value()
        self.one_of_these.setdefault(person, set()).add(options)
        logger.debug("%s: %s holds one of %s", self._me, person, sorted(map(str, options)))

    def record_none_of(self, person: Person, cards: Iterable[Card]) -> None:
        cards = set(cards)
        for card in cards:
            card.require_value()
        self.anti_cards.setdefault(person, set()).update(cards)
        logger.debug("%s: %s holds none of %s", self._me, person, sorted(map(str, cards)))

    def _after_update(self) -> None:
        if self.propagate:
            self.deduce()

    # -------------------------------------------------------------- deduction
    def deduce(self) -> None:
        """Apply the inference rules until nothing new follows."""
        while True:
            changed = self._spread_held_cards()
            changed |= self._resolve_one_of_sets()
            changed |= self._close_full_hands()
            changed |= self._confirm_unheld_cards()
            changed |= self._settle_categories()
            if not changed:
                return

    def _spread_held_cards(self) -> bool:
        """A card in one hand is in no other hand."""
        changed = False
        for holder, held in self.known_cards.items():
            for other, anti in self.anti_cards.items():
                if other == holder:
                    continue
                missing = held - anti
                if missing:
                    anti.update(missing)
                    changed = True
        return changed

    def _resolve_one_of_sets(self) -> bool:
        changed = False
        for person, option_sets in self.one_of_these.items():
            held = self.known_cards.setdefault(person, set())
            anti = self.anti_cards.get(person, set())
            for options in option_sets:
                if options & held:
                    continue
                remaining = options - anti
                if not remaining:
                    raise InvariantViolation(
                        f"{person} disproved with one of {sorted(map(str, options))} but holds none of them"
                    )
                if len(remaining) == 1:
                    card = next(iter(remaining))
                    held.add(card)
                    if self.notebook.status(card.value) != InformationStatus.RULED_OUT:
                        self.notebook.rule_out(card)
                    logger.debug("%s deduced %s holds %s", self._me, person, card)
                    changed = True
        return changed

    def _close_full_hands(self) -> bool:
        """Once a whole hand is known, that player holds nothing else."""
        changed = False
        deck = set(full_deck())
        for person in self.others:
            held = self.known_cards.get(person, set())
            if len(held) < self.hand_sizes[person]:
                continue
            anti = self.anti_cards.setdefault(person, set())
            rest = deck - held - anti
            if rest:
                anti.update(rest)
                changed = True
        return changed

    def _confirm_unheld_cards(self) -> bool:
        """A card no hand can hold must be in the envelope."""
        others = self.others
        if not others:
            return False
        changed = False
        for card in full_deck():
            if self.notebook.status(card.value) != InformationStatus.UNKNOWN:
                continue
            if all(card in self.anti_cards.get(person, ()) for person in others):
                self.notebook.mark_card(card, InformationStatus.CONFIRMED)
                logger.debug("%s deduced %s is in the envelope", self._me, card)
                changed = True
        return changed

    def _settle_categories(self) -> bool:
        """One confirmed entry rules out the rest; one survivor is confirmed."""
        changed = False
        for category in (Person, Weapon, Room):
            confirmed = self.notebook.confirmed(category)
            if confirmed:
                for value in category:
                    if self.notebook.status(value) == InformationStatus.UNKNOWN:
                        self.notebook.mark(value, InformationStatus.RULED_OUT)
                        changed = True
                continue
            remaining = self.notebook.not_ruled_out(category)
            if len(remaining) == 1:
                self.notebook.mark(remaining.pop(), InformationStatus.CONFIRMED)
                changed = True
        return changed

    # ---------------------------------------------------------------- queries
    @property
    def suspicious_rooms(self) -> Set[Room]:
        return self.notebook.not_ruled_out(Room)

    @property
    def suspicious_people(self) -> Set[Person]:
        return self.notebook.not_ruled_out(Person)

    @property
    def suspicious_weapons(self) -> Set[Weapon]:
        return self.notebook.not_ruled_out(Weapon)

    def is_suspicious(self, value) -> bool:
        return self.notebook.status(value) != InformationStatus.RULED_OUT

    @property
    def location(self) -> PlayerLocation:
        if self.game is None:
            return WALKING
        return self.game.location_of(self._me)

    def in_suspicious_room(self) -> bool:
        room = self.location.room
        return room is not None and self.is_suspicious(room)

    def solution(self) -> Optional[Statement]:
        """The envelope, if every category has been confirmed."""
        people = self.notebook.confirmed(Person)
        weapons = self.notebook.confirmed(Weapon)
        rooms = self.notebook.confirmed(Room)
        if len(people) == 1 and len(weapons) == 1 and len(rooms) == 1:
            return Statement(person=people[0], weapon=weapons[0], room=rooms[0])
        return None

    @property
    def cards(self) -> Set[Card]:
        return set(self.known_cards[self._me])
