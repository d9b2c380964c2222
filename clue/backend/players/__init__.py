"""Player strategies for the Clue backend."""

from .base import Player
from .basic_ai import BasicAI
from .computer import Chooser, ComputerPlayer
from .human import ConsoleReferee, ConsoleRoomPicker, Human
from .random_ai import RandomAI

__all__ = [
    "Player",
    "BasicAI",
    "Chooser",
    "ComputerPlayer",
    "ConsoleReferee",
    "ConsoleRoomPicker",
    "Human",
    "RandomAI",
]
