"""Public table state: seating, token positions and the event log."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .errors import InvariantViolation
from .models import WALKING, Event, Person, PlayerLocation, Room


class GameState:
    """Owns the canonical public state. Only the game engine mutates it."""

    def __init__(self, roster: Iterable[Person]):
        self.roster: List[Person] = list(roster)
        if len(set(self.roster)) != len(self.roster):
            raise InvariantViolation(f"a suspect is seated twice: {self.roster}")
        self.locations: Dict[Person, PlayerLocation] = {person: WALKING for person in self.roster}
        self._event_log: List[Event] = []
        self.view = GameStateView(self)

    # ---------------------------------------------------------------- seating
    def seat_of(self, person: Person) -> int:
        return self.roster.index(person)

    def eliminate(self, person: Person) -> int:
        """Remove ``person`` from the roster and return the seat they held."""
        seat = self.seat_of(person)
        del self.roster[seat]
        return seat

    def seats_after(self, person: Person) -> List[Person]:
        """Everyone else, in seat order starting right after ``person``."""
        seat = self.seat_of(person)
        return self.roster[seat + 1:] + self.roster[:seat]

    # --------------------------------------------------------------- movement
    def move(self, person: Person, room: Optional[Room]) -> None:
        self.locations[person] = WALKING if room is None else PlayerLocation.in_room(room)

    def location_of(self, person: Person) -> PlayerLocation:
        return self.locations.get(person, WALKING)

    # ----------------------------------------------------------------- events
    def log_event(self, event: Event) -> None:
        self._event_log.append(event)

    @property
    def events(self) -> Tuple[Event, ...]:
        return tuple(self._event_log)

    def snapshot(self) -> Dict[str, object]:
        return {
            "roster": [person.value for person in self.roster],
            "locations": {person.value: str(loc) for person, loc in self.locations.items()},
            "events": [event.to_dict() for event in self._event_log],
        }


class GameStateView:
    """Read-only window onto a GameState, handed to players."""

    def __init__(self, state: GameState):
        self._state = state

    @property
    def roster(self) -> Tuple[Person, ...]:
        return tuple(self._state.roster)

    @property
    def events(self) -> Tuple[Event, ...]:
        return self._state.events

    def location_of(self, person: Person) -> PlayerLocation:
        return self._state.location_of(person)

    def current_room(self, person: Person) -> Optional[Room]:
        return self._state.location_of(person).room
