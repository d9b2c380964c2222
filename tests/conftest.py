from typing import Iterable, List, Optional, Set

import pytest

from clue.backend.models import Card, EndTurn, Event, Person, Statement, SuggestionResult, parse_card
from clue.backend.players import Player


def card(name: str) -> Card:
    parsed = parse_card(name)
    assert parsed is not None, name
    return parsed


class ScriptedPlayer(Player):
    """Fixed hand, queued actions, and a record of every callback."""

    def __init__(self, name, character, hand: Iterable[str] = (), actions=(), poll_log: Optional[List] = None):
        super().__init__(name, character)
        self.hand: Set[Card] = {card(c) for c in hand}
        self.actions = list(actions)
        self.poll_log = poll_log if poll_log is not None else []
        self.shown = []
        self.received: List[Event] = []
        self.results: List[SuggestionResult] = []
        self.turns_started = 0

    def start_turn(self):
        self.turns_started += 1

    def make_turn(self):
        return self.actions.pop(0) if self.actions else EndTurn()

    def can_disprove(self, statement: Statement) -> bool:
        self.poll_log.append(self.character)
        return bool(self.hand & set(statement.cards()))

    def disprove(self, statement: Statement) -> Optional[Card]:
        matches = [c for c in statement.cards() if c in self.hand]
        return matches[0] if matches else None

    def show(self, card: Card, from_person: Person) -> None:
        self.shown.append((card, from_person))

    def reveal_cards(self):
        return set(self.hand)

    def receive(self, event: Event) -> None:
        self.received.append(event)

    def suggestion_resolved(self, result: SuggestionResult) -> None:
        self.results.append(result)


@pytest.fixture
def poll_log():
    return []


@pytest.fixture
def make_player(poll_log):
    def factory(name, character, hand=(), actions=()):
        return ScriptedPlayer(name, character, hand=hand, actions=actions, poll_log=poll_log)
    return factory


class Console:
    """Feeds canned answers to a Human and keeps what it printed."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)


@pytest.fixture
def console():
    return Console
