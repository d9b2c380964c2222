"""Validated table settings."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import Person, parse_card


class GameMode(str, Enum):
    """Who holds the deck"""
    SIMULATED = "simulated"  # the program deals and knows the envelope
    TABLETOP = "tabletop"    # real cards; people answer on the console


class PlayerKind(str, Enum):
    HUMAN = "human"
    BASIC = "basic"
    RANDOM = "random"


class PlayerSettings(BaseModel):
    name: str
    character: Person
    kind: PlayerKind = PlayerKind.BASIC
    cards: List[str] = Field(default_factory=list)
    hand_size: Optional[int] = Field(default=None, ge=0)

    @field_validator("cards")
    @classmethod
    def _known_cards(cls, cards: List[str]) -> List[str]:
        unknown = [name for name in cards if parse_card(name) is None]
        if unknown:
            raise ValueError(f"unknown cards: {', '.join(unknown)}")
        return cards


class GameOptions(BaseModel):
    mode: GameMode = GameMode.SIMULATED
    seed: Optional[int] = None
    max_rounds: int = Field(default=200, ge=1)
    max_actions_per_turn: int = Field(default=4, ge=1)


class DeductionOptions(BaseModel):
    propagate: bool = False


class TableSettings(BaseModel):
    """Everything needed to seat a table and start a game."""
    game: GameOptions = Field(default_factory=GameOptions)
    deduction: DeductionOptions = Field(default_factory=DeductionOptions)
    players: List[PlayerSettings] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_table(self) -> TableSettings:
        characters = [player.character for player in self.players]
        if len(set(characters)) != len(characters):
            raise ValueError("each character can only be played once")

        if self.game.mode == GameMode.SIMULATED:
            humans = [p.name for p in self.players if p.kind == PlayerKind.HUMAN]
            if humans:
                raise ValueError(f"simulated games deal their own cards; no humans allowed: {humans}")
            listed = [p.name for p in self.players if p.cards]
            if listed:
                raise ValueError(f"simulated games deal their own cards; remove cards for: {listed}")
        else:
            missing = [p.name for p in self.players if p.kind != PlayerKind.HUMAN and not p.cards]
            if missing:
                raise ValueError(f"computer players need their cards listed in tabletop games: {missing}")
        return self
