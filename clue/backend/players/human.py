"""Console-driven player for a game played on a real table."""

from __future__ import annotations

from typing import Callable, List, Optional, Set

from ..models import (
    Card,
    EndTurn,
    Event,
    MakeAccusation,
    Move,
    Person,
    Room,
    Statement,
    Suggest,
    TurnAction,
    parse_card,
    parse_statement,
)
from .base import Player

Reader = Callable[[str], str]
Writer = Callable[[str], None]


class Human(Player):
    """
    A person at the table. Their cards are physical, so every question about
    the hand is asked on the console. Bad input is re-prompted here and never
    reaches the engine.
    """

    def __init__(self, name: str, character: Person, read: Reader = input, write: Writer = print):
        super().__init__(name, character)
        self.read = read
        self.write = write

    def _ask(self, prompt: str) -> str:
        return self.read(prompt).strip()

    def _read_statement(self, prompt: str, retry: str) -> Statement:
        self.write(prompt)
        while True:
            statement = parse_statement(self._ask("> "))
            if statement is not None:
                return statement
            self.write(retry)

    # --------------------------------------------------------------- gameplay
    def make_turn(self) -> TurnAction:
        while True:
            choice = self._ask(f"Enter {self.name}'s next action. (suggest/accuse/travel/done) ")
            if choice == "suggest":
                return Suggest(self._read_statement(
                    f"Please enter {self.name}'s suggestion in the format 'person room weapon'",
                    "Please enter that statement again.",
                ))
            if choice == "accuse":
                return MakeAccusation(self._read_statement(
                    f"Please enter {self.name}'s accusation in the format 'person room weapon'",
                    "Unrecognized input. Please enter the accusation again.",
                ))
            if choice == "travel":
                room = Room.parse(self._ask(
                    f"Enter the final destination of {self.character}. "
                    "Either '<room>', or anything else for just walking around. "
                ))
                return Move(destination=room, arrived=room is not None)
            if choice == "done":
                return EndTurn()
            self.write(f"Unrecognized input '{choice}', try again.")

    def can_disprove(self, statement: Statement) -> bool:
        answer = self._ask(f"Can {self.name} disprove '{statement}'? Enter Y/N: ")
        return answer.lower() == "y"

    def disprove(self, statement: Statement) -> Optional[Card]:
        options = statement.cards()
        while True:
            answer = self._ask(f"What card does {self.name} show to disprove this? (enter card, or enter 'none') ")
            if answer.lower() == "none":
                if not self.can_disprove(statement):
                    return None
                continue
            card = parse_card(answer)
            if card in options:
                return card
            self.write(f"That is not one of: {', '.join(str(c) for c in options)}")

    def show(self, card: Card, from_person: Person) -> None:
        self.write(f"{from_person} shows {self.name} the card: {card}")

    def reveal_cards(self) -> Set[Card]:
        cards: Set[Card] = set()
        self.write(f"Please enter all of {self.name}'s cards separated by lines. Enter 'done' when done.")
        while True:
            text = self._ask("> ").lower()
            if text == "done":
                return cards
            card = parse_card(text)
            if card is None:
                self.write("Please enter that card again.")
                continue
            cards.add(card)

    def receive(self, event: Event) -> None:
        self.write(str(event))


class ConsoleReferee:
    """Accusation check for tabletop games: whoever peeks in the envelope answers."""

    def __init__(self, read: Reader = input):
        self.read = read

    def __call__(self, statement: Statement) -> bool:
        answer = self.read(f"Was the accusation '{statement}' correct? Enter Y/N: ")
        return answer.strip().lower() == "y"


class ConsoleRoomPicker:
    """Reachable rooms for a computer token on a real board, typed in by the operator."""

    def __init__(self, name: str, read: Reader = input, write: Writer = print):
        self.name = name
        self.read = read
        self.write = write

    def __call__(self) -> List[Room]:
        rooms: List[Room] = []
        self.write(f"Please enter all the possible rooms that {self.name} can go to on this turn. Enter 'done' when done.")
        while True:
            text = self.read("> ").strip().lower()
            if text == "done":
                return rooms
            room = Room.parse(text)
            if room is None:
                self.write("Unrecognized input. Please try again.")
                continue
            rooms.append(room)
