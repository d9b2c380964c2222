import pytest

from clue.backend.errors import InvariantViolation, NotebookConflict
from clue.backend.models import UNKNOWN_CARD, Card, InformationStatus, Notebook, Person, Room, Weapon


def test_every_entry_starts_unknown():
    notebook = Notebook()
    assert all(notebook.status(value) == InformationStatus.UNKNOWN for value in notebook.entries())
    assert len(list(notebook.entries())) == 20


def test_mark_reports_whether_anything_changed():
    notebook = Notebook()
    assert notebook.mark(Room.HALL, InformationStatus.RULED_OUT) is True
    assert notebook.mark(Room.HALL, InformationStatus.RULED_OUT) is False
    assert notebook.status(Room.HALL) == InformationStatus.RULED_OUT


def test_entries_never_go_back_to_unknown():
    notebook = Notebook()
    notebook.mark(Weapon.ROPE, InformationStatus.CONFIRMED)
    with pytest.raises(InvariantViolation):
        notebook.mark(Weapon.ROPE, InformationStatus.UNKNOWN)


def test_flipping_a_settled_entry_needs_override():
    notebook = Notebook()
    notebook.mark(Person.PLUM, InformationStatus.CONFIRMED)
    with pytest.raises(NotebookConflict):
        notebook.mark(Person.PLUM, InformationStatus.RULED_OUT)
    assert notebook.status(Person.PLUM) == InformationStatus.CONFIRMED

    assert notebook.mark(Person.PLUM, InformationStatus.RULED_OUT, override=True)
    assert notebook.status(Person.PLUM) == InformationStatus.RULED_OUT


def test_unknown_card_cannot_be_ruled_out():
    with pytest.raises(InvariantViolation):
        Notebook().rule_out(UNKNOWN_CARD)


def test_category_queries():
    notebook = Notebook()
    notebook.rule_out(Card.of(Weapon.KNIFE))
    notebook.rule_out(Card.of(Weapon.PIPE))
    notebook.mark(Weapon.ROPE, InformationStatus.CONFIRMED)

    assert notebook.not_ruled_out(Weapon) == {Weapon.CANDLESTICK, Weapon.REVOLVER, Weapon.ROPE, Weapon.WRENCH}
    assert notebook.confirmed(Weapon) == [Weapon.ROPE]
    assert notebook.confirmed(Room) == []


def test_to_dict_uses_display_names():
    notebook = Notebook()
    notebook.rule_out(Card.of(Room.STUDY))
    data = notebook.to_dict()
    assert data["rooms"]["study"] == "ruled_out"
    assert data["people"]["scarlet"] == "unknown"
    assert set(data) == {"people", "weapons", "rooms"}
