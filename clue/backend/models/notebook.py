"""The detective notebook: one status per room, suspect and weapon."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Set, Type

from ..errors import InvariantViolation, NotebookConflict
from .cards import Card, CardValue, Person, Room, Weapon


class InformationStatus(str, Enum):
    """What a player believes about one entry"""
    CONFIRMED = "confirmed"    # part of the solution
    RULED_OUT = "ruled_out"    # held by somebody, so not the solution
    UNKNOWN = "unknown"


def _fresh(category: Type[CardValue]) -> Dict[CardValue, InformationStatus]:
    return {value: InformationStatus.UNKNOWN for value in category}


@dataclass
class Notebook:
    """Status table for the three categories.

    Entries only move away from ``UNKNOWN``. Flipping a settled entry to the
    other settled status needs ``override=True``.
    """
    people: Dict[Person, InformationStatus] = field(default_factory=lambda: _fresh(Person))
    weapons: Dict[Weapon, InformationStatus] = field(default_factory=lambda: _fresh(Weapon))
    rooms: Dict[Room, InformationStatus] = field(default_factory=lambda: _fresh(Room))

    def _table(self, value: CardValue) -> Dict:
        if isinstance(value, Person):
            return self.people
        if isinstance(value, Weapon):
            return self.weapons
        if isinstance(value, Room):
            return self.rooms
        raise InvariantViolation(f"not a notebook entry: {value!r}")

    def status(self, value: CardValue) -> InformationStatus:
        return self._table(value)[value]

    def mark(self, value: CardValue, status: InformationStatus, override: bool = False) -> bool:
        """Set an entry. Returns True when the stored status changed."""
        if status == InformationStatus.UNKNOWN:
            raise InvariantViolation(f"{value} cannot be marked unknown again")
        table = self._table(value)
        current = table[value]
        if current == status:
            return False
        if current != InformationStatus.UNKNOWN and not override:
            raise NotebookConflict(f"{value} is already {current.value}, refusing {status.value}")
        table[value] = status
        return True

    def mark_card(self, card: Card, status: InformationStatus, override: bool = False) -> bool:
        return self.mark(card.require_value(), status, override=override)

    def rule_out(self, card: Card) -> bool:
        return self.mark_card(card, InformationStatus.RULED_OUT)

    # ---------------------------------------------------------------- queries
    def not_ruled_out(self, category: Type[CardValue]) -> Set[CardValue]:
        table = self._table(next(iter(category)))
        return {value for value, status in table.items() if status != InformationStatus.RULED_OUT}

    def confirmed(self, category: Type[CardValue]) -> List[CardValue]:
        table = self._table(next(iter(category)))
        return [value for value, status in table.items() if status == InformationStatus.CONFIRMED]

    def entries(self) -> Iterable[CardValue]:
        yield from self.people
        yield from self.weapons
        yield from self.rooms

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            "people": {p.value: s.value for p, s in self.people.items()},
            "weapons": {w.value: s.value for w, s in self.weapons.items()},
            "rooms": {r.value: s.value for r, s in self.rooms.items()},
        }
