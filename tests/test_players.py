import itertools
import random

import pytest
from conftest import card

from clue.backend.dealer import deal, hand_sizes
from clue.backend.game_state import GameState
from clue.backend.knowledge import Knowledge
from clue.backend.models import (
    CouldntRefute,
    EndTurn,
    Event,
    InformationStatus,
    MakeAccusation,
    Move,
    Person,
    Room,
    Statement,
    Suggest,
    SuggestionResult,
    Travel,
    Weapon,
    parse_statement,
)
from clue.backend.players import BasicAI, ConsoleReferee, ConsoleRoomPicker, Human, RandomAI

WHITE, PLUM, GREEN = Person.WHITE, Person.PLUM, Person.GREEN
SIZES = {WHITE: 6, PLUM: 6, GREEN: 5}
MY_HAND = ["white", "scarlet", "knife", "rope", "hall", "lounge"]
MURDER = parse_statement("mustard ballroom knife")


def make_basic(**kwargs):
    knowledge = Knowledge(WHITE, SIZES, [card(name) for name in MY_HAND], propagate=True)
    return BasicAI("Basic White", knowledge, **kwargs)


@pytest.fixture
def seated():
    """A BasicAI bound to a table it can be moved around on."""
    state = GameState([WHITE, PLUM, GREEN])
    player = make_basic(chooser=lambda options: options[0])
    player.subscribe(state.view)
    return player, state


# ------------------------------------------------------------------ disproval
@pytest.mark.parametrize("seed", range(3))
def test_computer_only_ever_shows_a_matching_card(seed):
    _, hands = deal([WHITE, PLUM, GREEN], random.Random(seed))
    player = BasicAI("Basic White", Knowledge(WHITE, hand_sizes(hands), hands[WHITE]))
    for person, weapon, room in itertools.product(Person, Weapon, Room):
        statement = Statement(person=person, weapon=weapon, room=room)
        matching = set(statement.cards()) & set(hands[WHITE])
        shown = player.disprove(statement)
        assert player.can_disprove(statement) == bool(matching)
        if matching:
            assert shown in matching
        else:
            assert shown is None


def test_chooser_picks_among_matching_cards():
    knowledge = Knowledge(WHITE, SIZES, [card("mustard"), card("knife"), card("ballroom")])
    player = BasicAI("Basic White", knowledge, chooser=lambda options: options[-1])
    assert player.matching_cards(MURDER) == [card("mustard"), card("knife"), card("ballroom")]
    assert player.disprove(MURDER) == card("ballroom")


def test_computer_players_are_automated_and_reveal_their_hand():
    player = make_basic()
    assert player.is_automated()
    assert player.reveal_cards() == {card(name) for name in MY_HAND}
    assert not Human("Sylvan", Person.MUSTARD).is_automated()


def test_shown_cards_and_events_reach_the_notebook():
    player = make_basic()
    player.show(card("study"), PLUM)
    player.receive(Event(GREEN, CouldntRefute(statement=MURDER, person=PLUM)))
    assert player.knowledge.notebook.status(Room.STUDY) == InformationStatus.RULED_OUT
    assert card("mustard") in player.knowledge.anti_cards[PLUM]


def test_players_who_passed_on_my_suggestion_are_recorded():
    player = make_basic()
    passed = Event(WHITE, CouldntRefute(statement=MURDER, person=GREEN))
    player.suggestion_resolved(SuggestionResult(statement=MURDER, disprover=PLUM, card=card("ballroom"), events=(passed,)))
    assert set(MURDER.cards()) <= player.knowledge.anti_cards[GREEN]
    assert player.knowledge.anti_cards[PLUM] >= {card(name) for name in MY_HAND}


# ------------------------------------------------------------------- BasicAI
def test_basic_ai_travels_then_suggests_then_ends(seated):
    player, state = seated
    player.start_turn()

    move = player.make_turn()
    assert move == Move(destination=Room.BALLROOM, arrived=True)
    state.move(WHITE, move.destination)

    suggestion = player.make_turn()
    assert suggestion == Suggest(Statement(person=Person.PEACOCK, weapon=Weapon.CANDLESTICK, room=Room.BALLROOM))
    assert player.make_turn() == EndTurn()


def test_basic_ai_suggests_straight_away_in_a_suspicious_room(seated):
    player, state = seated
    state.move(WHITE, Room.STUDY)
    player.start_turn()
    action = player.make_turn()
    assert isinstance(action, Suggest)
    assert action.statement.room == Room.STUDY


def test_basic_ai_leaves_a_room_it_has_ruled_out(seated):
    player, state = seated
    state.move(WHITE, Room.HALL)
    player.start_turn()
    assert player.make_turn() == Move(destination=Room.BALLROOM, arrived=True)


def test_basic_ai_accuses_after_an_unrefuted_suggestion(seated):
    player, state = seated
    state.move(WHITE, Room.STUDY)
    player.start_turn()
    suggestion = player.make_turn()

    player.suggestion_resolved(SuggestionResult(statement=suggestion.statement))

    assert player.make_turn() == MakeAccusation(suggestion.statement)


def test_basic_ai_accuses_once_the_notebook_is_solved(seated):
    player, _ = seated
    notebook = player.knowledge.notebook
    notebook.mark(Person.PLUM, InformationStatus.CONFIRMED)
    notebook.mark(Weapon.PIPE, InformationStatus.CONFIRMED)
    notebook.mark(Room.KITCHEN, InformationStatus.CONFIRMED)
    player.start_turn()
    assert player.make_turn() == MakeAccusation(parse_statement("plum kitchen pipe"))


def test_basic_ai_walks_when_no_suspicious_room_is_reachable(seated, caplog):
    player, _ = seated
    player.reachable_rooms = lambda: [Room.HALL, Room.LOUNGE]
    player.start_turn()
    with caplog.at_level("INFO"):
        assert player.make_turn() == Move()
    assert "wants to travel toward" in caplog.text
    assert player.make_turn() == EndTurn()


# -------------------------------------------------------------------- RandomAI
def test_random_ai_moves_once_per_turn():
    knowledge = Knowledge(GREEN, SIZES, [card("green")])
    player = RandomAI("Wanderer", knowledge, rng=random.Random(5))

    for _ in range(3):
        player.start_turn()
        move = player.make_turn()
        assert move.arrived and move.destination in set(Room)
        assert player.make_turn() == EndTurn()


# ----------------------------------------------------------------------- Human
def test_human_turn_reprompts_until_it_understands(console):
    io = console("dance", "suggest", "mustard knife", "mustard ballroom knife")
    human = Human("Sylvan", Person.MUSTARD, read=io.read, write=io.write)

    assert human.make_turn() == Suggest(MURDER)
    assert "Unrecognized input 'dance', try again." in io.output
    assert "Please enter that statement again." in io.output


@pytest.mark.parametrize("answers, expected", [
    (["accuse", "plum lounge rope"], MakeAccusation(parse_statement("plum lounge rope"))),
    (["travel", "hall"], Move(destination=Room.HALL, arrived=True)),
    (["travel", "corridor"], Move()),
    (["done"], EndTurn()),
])
def test_human_turn_choices(console, answers, expected):
    io = console(*answers)
    human = Human("Sylvan", Person.MUSTARD, read=io.read, write=io.write)
    assert human.make_turn() == expected


def test_human_disproval_is_checked_before_the_engine_sees_it(console):
    io = console("y", "hall", "knife")
    human = Human("Sylvan", Person.MUSTARD, read=io.read, write=io.write)

    assert human.can_disprove(MURDER)
    assert human.disprove(MURDER) == card("knife")
    assert "That is not one of: mustard, knife, ballroom" in io.output


def test_human_can_take_back_a_mistaken_yes(console):
    io = console("none", "n")
    human = Human("Sylvan", Person.MUSTARD, read=io.read, write=io.write)
    assert human.disprove(MURDER) is None


def test_human_answering_none_then_yes_is_asked_for_the_card_again(console):
    io = console("none", "y", "ballroom")
    human = Human("Sylvan", Person.MUSTARD, read=io.read, write=io.write)
    assert human.disprove(MURDER) == card("ballroom")


def test_human_reveals_cards_typed_in(console):
    io = console("Knife", "bogus", "hall", "done")
    human = Human("Sylvan", Person.MUSTARD, read=io.read, write=io.write)
    assert human.reveal_cards() == {card("knife"), card("hall")}
    assert "Please enter that card again." in io.output


def test_human_sees_shown_cards_and_events(console):
    io = console()
    human = Human("Sylvan", Person.MUSTARD, read=io.read, write=io.write)
    human.show(card("knife"), PLUM)
    human.receive(Event(GREEN, Travel(room=Room.STUDY)))
    assert io.output == ["plum shows Sylvan the card: knife", "green went to the study"]


def test_console_referee(console):
    assert ConsoleReferee(console(" Y ").read)(MURDER)
    assert not ConsoleReferee(console("n").read)(MURDER)


def test_room_picker_reads_rooms_until_done(console):
    io = console("Study", "attic", "kitchen", "done")
    pick = ConsoleRoomPicker("Basic AI", read=io.read, write=io.write)
    assert pick() == [Room.STUDY, Room.KITCHEN]
    assert io.output[0].startswith("Please enter all the possible rooms that Basic AI can go to")
    assert "Unrecognized input. Please try again." in io.output


def test_basic_ai_only_travels_where_the_operator_allows(seated, console):
    player, _ = seated
    io = console("hall", "kitchen", "done")
    player.reachable_rooms = ConsoleRoomPicker(player.name, read=io.read, write=io.write)
    player.start_turn()
    assert player.make_turn() == Move(destination=Room.KITCHEN, arrived=True)
