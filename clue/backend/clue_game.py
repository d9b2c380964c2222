"""Clue Game Core Logic"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

from .errors import InvariantViolation, RuleViolation
from .game_state import GameState
from .models import (
    Accuse,
    CouldntRefute,
    EndTurn,
    Event,
    MakeAccusation,
    Move,
    NotableAction,
    Person,
    Room,
    Statement,
    Suggest,
    SuggestionDisproved,
    SuggestionResult,
    SuggestionUnrefuted,
    Travel,
    TurnAction,
)
from .players import Player

logger = logging.getLogger(__name__)

AccusationCheck = Callable[[Statement], bool]


class GamePhase(str, Enum):
    """Game Phase"""
    RUNNING = "running"
    ENDED = "ended"


class ClueGame:
    """Clue Game Manager: runs turns and gives every action its meaning."""

    def __init__(
        self,
        players: Sequence[Player],
        accusation_check: AccusationCheck,
        max_actions_per_turn: int = 4,
    ):
        """
        Args:
            players: everyone at the table, in seating order
            accusation_check: authoritative answer to "is this the envelope?"
            max_actions_per_turn: safety cap on ``make_turn`` calls per turn
        """
        if not players:
            raise ValueError("a game needs at least one player")
        if max_actions_per_turn < 1:
            raise ValueError("max_actions_per_turn must be at least 1")

        self.players: Dict[Person, Player] = {}
        for player in players:
            if player.character in self.players:
                raise InvariantViolation(f"{player.character} is played twice")
            self.players[player.character] = player

        self.state = GameState(player.character for player in players)
        self.check_accusation = accusation_check
        self.max_actions_per_turn = max_actions_per_turn

        self.phase = GamePhase.RUNNING
        self.winner: Optional[Player] = None
        self.turn_index = 0
        self.turn_number = 0
        self.round_number = 1

        for player in players:
            player.subscribe(self.state.view)
        self._debug(f"Game initialized, seating: {', '.join(p.value for p in self.state.roster)}")

    # ------------------------------------------------------------------ roster
    @property
    def roster(self) -> List[Player]:
        return [self.players[person] for person in self.state.roster]

    @property
    def current_player(self) -> Optional[Player]:
        if not self.state.roster:
            return None
        return self.players[self.state.roster[self.turn_index % len(self.state.roster)]]

    @property
    def events(self) -> Sequence[Event]:
        return self.state.events

    # --------------------------------------------------------------- game loop
    def run(self, max_rounds: Optional[int] = None) -> Optional[Player]:
        """Play turns until someone wins, nobody is left, or the round limit passes."""
        while self.phase == GamePhase.RUNNING:
            if max_rounds is not None and self.round_number > max_rounds:
                logger.info("Stopping after %d rounds without a winner", max_rounds)
                break
            self.play_turn()
        return self.winner

    def play_turn(self) -> None:
        """Let the current player act until it ends its turn or leaves the game."""
        if self.phase != GamePhase.RUNNING:
            raise RuleViolation("the game is over")
        player = self.current_player
        if player is None:
            self._end(None)
            return

        self.turn_number += 1
        seat = self.state.seat_of(player.character)
        self._debug(f"{player.name} ({player.character}) takes seat {seat}'s turn")
        player.start_turn()

        for _ in range(self.max_actions_per_turn):
            action = player.make_turn()
            if isinstance(action, EndTurn):
                break
            self.apply(player, action)
            if self.phase != GamePhase.RUNNING or player.character not in self.state.roster:
                break
        else:
            self._debug(f"{player.name} hit the action limit")

        self._advance(player, seat)

    def _advance(self, player: Player, seat: int) -> None:
        if self.phase != GamePhase.RUNNING:
            return
        size = len(self.state.roster)
        if size == 0:
            self._end(None)
            return
        if player.character in self.state.roster:
            next_index = (seat + 1) % size
            wrapped = next_index == 0
        else:
            # The next player slid into the eliminated player's seat
            next_index = seat % size
            wrapped = seat >= size
        if wrapped:
            self.round_number += 1
        self.turn_index = next_index

    def apply(self, player: Player, action: TurnAction) -> None:
        """Resolve one action returned by ``make_turn``."""
        if isinstance(action, Suggest):
            self.resolve_suggestion(player, action.statement)
        elif isinstance(action, MakeAccusation):
            self.resolve_accusation(player, action.statement)
        elif isinstance(action, Move):
            self.resolve_travel(player, action.destination, action.arrived)
        else:
            raise RuleViolation(f"{player.name} returned an unknown action: {action!r}")

    # ----------------------------------------------------------------- actions
    def resolve_suggestion(self, actor: Player, statement: Statement) -> SuggestionResult:
        """
        Pull the named suspect into the room, then ask each player in seat
        order after the actor until one of them shows a card.
        """
        self._require_seated(actor)
        self.state.move(statement.person, statement.room)
        logger.info("%s suggests %s", actor.name, statement)

        events: List[Event] = []
        options = statement.cards()
        for person in self.state.seats_after(actor.character):
            candidate = self.players[person]
            if not candidate.can_disprove(statement):
                events.append(self._record(actor, CouldntRefute(statement=statement, person=person)))
                continue

            card = candidate.disprove(statement)
            if card is None and not candidate.is_automated():
                # A person at the table took back their "yes"
                events.append(self._record(actor, CouldntRefute(statement=statement, person=person)))
                continue
            if card is None or card not in options:
                raise RuleViolation(
                    f"{candidate.name} said it could disprove '{statement}' but showed {card}"
                )
            actor.show(card, person)
            events.append(self._record(actor, SuggestionDisproved(statement=statement, disprover=person)))
            logger.info("%s disproved %s's suggestion", candidate.name, actor.name)
            result = SuggestionResult(statement=statement, disprover=person, card=card, events=tuple(events))
            break
        else:
            events.append(self._record(actor, SuggestionUnrefuted(statement=statement)))
            logger.info("Nobody could refute %s's suggestion", actor.name)
            result = SuggestionResult(statement=statement, events=tuple(events))

        actor.suggestion_resolved(result)
        return result

    def resolve_accusation(self, actor: Player, statement: Statement) -> bool:
        """Right: the actor wins. Wrong: the hand is revealed and the actor is out."""
        self._require_seated(actor)
        correct = bool(self.check_accusation(statement))
        self._record(actor, Accuse(statement=statement, correct=correct))

        if correct:
            self.winner = actor
            self.phase = GamePhase.ENDED
            logger.info("%s accused correctly (%s) and wins", actor.name, statement)
            return True

        logger.info("%s accused wrongly (%s) and is out", actor.name, statement)
        hand = sorted(actor.reveal_cards(), key=str)
        for card in hand:
            card.require_value()
            for other in self.roster:
                if other is not actor:
                    other.show(card, actor.character)
        self.state.eliminate(actor.character)
        if not self.state.roster:
            self._end(None)
        return False

    def resolve_travel(
        self,
        actor: Player,
        destination: Optional[Room] = None,
        arrived: bool = False,
    ) -> None:
        self._require_seated(actor)
        room = destination if arrived else None
        self.state.move(actor.character, room)
        if room is not None:
            self._record(actor, Travel(room=room))
        else:
            self._debug(f"{actor.name} is walking")

    def broadcast(self, event: Event) -> None:
        """Tell every seated player except the actor."""
        for person in list(self.state.roster):
            if person != event.actor:
                self.players[person].receive(event)

    # ----------------------------------------------------------------- helpers
    def _record(self, actor: Player, action: NotableAction) -> Event:
        event = Event(actor=actor.character, action=action)
        self.state.log_event(event)
        self._debug(str(event))
        self.broadcast(event)
        return event

    def _require_seated(self, actor: Player) -> None:
        if self.phase != GamePhase.RUNNING:
            raise RuleViolation("the game is over")
        if actor.character not in self.state.roster:
            raise RuleViolation(f"{actor.name} is not in the game")

    def _end(self, winner: Optional[Player]) -> None:
        self.winner = winner
        self.phase = GamePhase.ENDED
        if winner is None:
            logger.info("Every player has been eliminated; nobody wins")

    def snapshot(self) -> Dict[str, Any]:
        """Get game state snapshot"""
        current = self.current_player
        return {
            "phase": self.phase.value,
            "round": self.round_number,
            "turn": self.turn_number,
            "current_player": current.name if current else None,
            "winner": self.winner.name if self.winner else None,
            **self.state.snapshot(),
        }

    def _debug(self, msg: str) -> None:
        logger.debug("[%s][turn %d] %s", self.phase.value, self.turn_number, msg)
