"""Data models for the Clue backend."""

from .cards import (
    Card,
    CardKind,
    CardValue,
    Person,
    Room,
    Statement,
    UNKNOWN_CARD,
    Weapon,
    parse_card,
    full_deck,
    parse_statement,
)
from .event import (
    Accuse,
    ActionKind,
    CouldntRefute,
    Event,
    NotableAction,
    SuggestionDisproved,
    SuggestionUnrefuted,
    Travel,
)
from .location import PlayerLocation, WALKING
from .notebook import InformationStatus, Notebook
from .turn import (
    EndTurn,
    MakeAccusation,
    Move,
    Suggest,
    SuggestionResult,
    TurnAction,
    TurnActionType,
)

__all__ = [
    # Cards
    "Card",
    "CardKind",
    "CardValue",
    "Person",
    "Room",
    "Statement",
    "UNKNOWN_CARD",
    "Weapon",
    "parse_card",
    "full_deck",
    "parse_statement",
    # Events
    "Accuse",
    "ActionKind",
    "CouldntRefute",
    "Event",
    "NotableAction",
    "SuggestionDisproved",
    "SuggestionUnrefuted",
    "Travel",
    # Location
    "PlayerLocation",
    "WALKING",
    # Notebook
    "InformationStatus",
    "Notebook",
    # Turns
    "EndTurn",
    "MakeAccusation",
    "Move",
    "Suggest",
    "SuggestionResult",
    "TurnAction",
    "TurnActionType",
]
