"""Card catalogue: rooms, suspects, weapons and the statements made about them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Type, TypeVar, Union

from ..errors import InvariantViolation

E = TypeVar("E", bound="_CardEnum")


class _CardEnum(str, Enum):
    """Shared parsing/display behaviour for the three card categories."""

    @classmethod
    def parse(cls: Type[E], text: str) -> Optional[E]:
        """Exact, case-sensitive lookup by canonical name. Unknown text gives None."""
        try:
            return cls(text)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class Room(_CardEnum):
    """Rooms of the mansion"""
    BALLROOM = "ballroom"
    DINING = "dining"
    STUDY = "study"
    KITCHEN = "kitchen"
    CONSERVATORY = "conservatory"
    BILLIARD = "billiard"
    HALL = "hall"
    LOUNGE = "lounge"


class Person(_CardEnum):
    """Suspects; every player plays as one of them"""
    SCARLET = "scarlet"
    WHITE = "white"
    PEACOCK = "peacock"
    PLUM = "plum"
    GREEN = "green"
    MUSTARD = "mustard"


class Weapon(_CardEnum):
    """Weapons"""
    CANDLESTICK = "candlestick"
    KNIFE = "knife"
    PIPE = "pipe"
    REVOLVER = "revolver"
    ROPE = "rope"
    WRENCH = "wrench"


class CardKind(str, Enum):
    """Which category a card belongs to"""
    ROOM = "room"
    PERSON = "person"
    WEAPON = "weapon"
    UNKNOWN = "unknown"


CardValue = Union[Room, Person, Weapon]

_KIND_BY_TYPE = {
    Room: CardKind.ROOM,
    Person: CardKind.PERSON,
    Weapon: CardKind.WEAPON,
}


@dataclass(frozen=True)
class Card:
    """A single card. ``UNKNOWN_CARD`` is a placeholder, never a real fact."""
    kind: CardKind
    value: Optional[CardValue] = None

    @classmethod
    def of(cls, value: CardValue) -> Card:
        """Wrap a room, person or weapon."""
        kind = _KIND_BY_TYPE.get(type(value))
        if kind is None:
            raise InvariantViolation(f"not a card: {value!r}")
        return cls(kind=kind, value=value)

    @property
    def is_unknown(self) -> bool:
        return self.kind == CardKind.UNKNOWN

    def require_value(self) -> CardValue:
        """Return the wrapped value; the unknown sentinel is a logic error here."""
        if self.is_unknown or self.value is None:
            raise InvariantViolation("the unknown card cannot be used as a fact")
        return self.value

    def __str__(self) -> str:
        return "unknown" if self.is_unknown else str(self.value)


UNKNOWN_CARD = Card(CardKind.UNKNOWN)


def parse_card(text: str) -> Optional[Card]:
    """Parse a card name, trying people, then weapons, then rooms."""
    for category in (Person, Weapon, Room):
        value = category.parse(text)
        if value is not None:
            return Card.of(value)
    return None


@dataclass(frozen=True)
class Statement:
    """A suggestion or accusation: who did it, with what, and where."""
    person: Person
    weapon: Weapon
    room: Room

    def cards(self) -> Tuple[Card, Card, Card]:
        return Card.of(self.person), Card.of(self.weapon), Card.of(self.room)

    def __str__(self) -> str:
        # Same token order the console expects: person room weapon
        return f"{self.person} {self.room} {self.weapon}"

    def to_dict(self) -> dict:
        return {
            "person": self.person.value,
            "weapon": self.weapon.value,
            "room": self.room.value,
        }


def parse_statement(text: str) -> Optional[Statement]:
    """Parse ``"person room weapon"``. Anything malformed gives None."""
    tokens = text.split()
    if len(tokens) != 3:
        return None
    person = Person.parse(tokens[0])
    room = Room.parse(tokens[1])
    weapon = Weapon.parse(tokens[2])
    if person is None or room is None or weapon is None:
        return None
    return Statement(person=person, weapon=weapon, room=room)


def full_deck() -> List[Card]:
    """Every real card: people, then weapons, then rooms."""
    return [Card.of(value) for category in (Person, Weapon, Room) for value in category]
