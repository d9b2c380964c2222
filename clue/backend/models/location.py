"""Where a suspect token currently is."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cards import Room


@dataclass(frozen=True)
class PlayerLocation:
    """Either inside ``room`` or, when ``room`` is None, walking the halls."""
    room: Optional[Room] = None

    @classmethod
    def in_room(cls, room: Room) -> PlayerLocation:
        return cls(room=room)

    @property
    def is_walking(self) -> bool:
        return self.room is None

    def __str__(self) -> str:
        return "walking" if self.room is None else f"in the {self.room}"


WALKING = PlayerLocation()
