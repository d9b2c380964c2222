"""Seat the players described by a settings file and hand back a ready game."""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Mapping

from .clue_game import AccusationCheck, ClueGame
from .dealer import deal, even_split, hand_sizes
from .knowledge import Knowledge
from .models import Card, Person, parse_card
from .players import BasicAI, ConsoleReferee, ConsoleRoomPicker, Human, Player, RandomAI
from .players.human import Reader, Writer
from .settings import GameMode, PlayerKind, PlayerSettings, TableSettings

logger = logging.getLogger(__name__)


def _tabletop_hand_sizes(settings: TableSettings) -> Dict[Person, int]:
    seats = [player.character for player in settings.players]
    sizes = even_split(seats)
    for player in settings.players:
        if player.hand_size is not None:
            sizes[player.character] = player.hand_size
        elif player.cards:
            sizes[player.character] = len(player.cards)
    return sizes


def _build_player(
    config: PlayerSettings,
    sizes: Mapping[Person, int],
    cards: List[Card],
    settings: TableSettings,
    rng: random.Random,
    read: Reader,
    write: Writer,
) -> Player:
    if config.kind == PlayerKind.HUMAN:
        return Human(config.name, config.character, read=read, write=write)

    knowledge = Knowledge(
        me=config.character,
        hand_sizes=sizes,
        my_cards=cards,
        propagate=settings.deduction.propagate,
    )
    if config.kind == PlayerKind.RANDOM:
        return RandomAI(config.name, knowledge, chooser=rng.choice, rng=rng)
    reachable = None
    if settings.game.mode == GameMode.TABLETOP:
        # The token moves on a real board, so the operator says where it can go
        reachable = ConsoleRoomPicker(config.name, read=read, write=write)
    return BasicAI(config.name, knowledge, chooser=rng.choice, reachable_rooms=reachable)


def build_game(settings: TableSettings, read: Reader = input, write: Writer = print) -> ClueGame:
    """Deal (or read) every hand, build each player and seat them in order."""
    rng = random.Random(settings.game.seed)
    seats = [player.character for player in settings.players]

    check: AccusationCheck
    if settings.game.mode == GameMode.SIMULATED:
        solution, hands = deal(seats, rng)
        sizes = hand_sizes(hands)
        check = solution
        logger.debug("Envelope: %s", solution.statement)
    else:
        sizes = _tabletop_hand_sizes(settings)
        hands = {
            player.character: [parse_card(name) for name in player.cards]
            for player in settings.players
        }
        check = ConsoleReferee(read)

    players = [
        _build_player(config, sizes, hands[config.character], settings, rng, read, write)
        for config in settings.players
    ]
    logger.info("Seated %s", ", ".join(f"{p.name} as {p.character}" for p in players))
    return ClueGame(players, check, max_actions_per_turn=settings.game.max_actions_per_turn)
