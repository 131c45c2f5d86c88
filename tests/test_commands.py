"""Unit tests for the remaining commands: unmarkpaid, add, delete, list, find."""

import pytest

from feebook.application import (
    AddCommand,
    CommandError,
    DeleteCommand,
    FindCommand,
    Index,
    ListCommand,
    NameContainsKeywords,
    UnmarkPaidCommand,
)
from feebook.domain import Contact, MonthPaid, Tag
from feebook.infrastructure import ModelManager


def _contact(name: str, phone: str, months: tuple[str, ...] = ()) -> Contact:
    return Contact(
        name=name,
        phone=phone,
        email=f"{name.split()[0].lower()}@example.com",
        address="Blk 1 Example Road",
        fees="200",
        class_id="A1",
        months_paid=frozenset(MonthPaid(m) for m in months),
    )


def _model() -> ModelManager:
    return ModelManager(
        [
            _contact("Alice Pauline", "94351253", ("2024-01", "2024-02")),
            _contact("Benson Meier", "98765432"),
            _contact("Carl Kurz", "95352563"),
        ],
        phone_region="SG",
    )


def test_unmark_paid_removes_months() -> None:
    model = _model()
    result = UnmarkPaidCommand(Index(0), {MonthPaid("2024-01")}).execute(model)
    assert model.get_contact_list()[0].months_paid == {MonthPaid("2024-02")}
    assert result.feedback == (
        "Unmarked paid months for contact: Alice Pauline; Months Paid: 2024-02"
    )


def test_unmark_paid_month_not_paid_fails_unchanged() -> None:
    model = _model()
    before = model.get_contact_list()
    with pytest.raises(CommandError) as exc:
        UnmarkPaidCommand(Index(0), {MonthPaid("2024-01"), MonthPaid("2024-05")}).execute(model)
    assert exc.value.message == "Month not marked as paid: 2024-05"
    assert model.get_contact_list() == before


def test_unmark_paid_validates_format_and_index() -> None:
    model = _model()
    with pytest.raises(CommandError, match="^Invalid month format: 2024-13"):
        UnmarkPaidCommand(Index(0), {MonthPaid("2024-13")}).execute(model)
    with pytest.raises(CommandError, match="invalid: 9"):
        UnmarkPaidCommand(Index(8), {MonthPaid("2024-01")}).execute(model)


def test_add_contact() -> None:
    model = _model()
    new = Contact(
        name="Daniel Meier",
        phone="87652533",
        email="cornelia@example.com",
        address="10th street",
        fees="150.50",
        class_id="B2",
        tags=frozenset({Tag("friends")}),
    )
    result = AddCommand(new).execute(model)
    assert model.get_contact_list()[-1] == new
    assert result.feedback == (
        "New contact added: Daniel Meier; Phone: 87652533; Email: cornelia@example.com; "
        "Address: 10th street; Fees: 150.50; Class Id: B2; Months Paid: ; Tags: [friends]"
    )


def test_add_duplicate_name_fails() -> None:
    model = _model()
    with pytest.raises(CommandError, match="already exists"):
        AddCommand(_contact("alice pauline", "81234567")).execute(model)
    assert len(model.get_contact_list()) == 3


def test_add_duplicate_phone_fails() -> None:
    model = _model()
    AddCommand(_contact("Dan Tan", "8123 4567")).execute(model)
    with pytest.raises(CommandError, match="already exists"):
        AddCommand(_contact("Someone Else", "+65 8123 4567")).execute(model)
    assert len(model.get_contact_list()) == 4


def test_delete_contact() -> None:
    model = _model()
    result = DeleteCommand(Index(1)).execute(model)
    assert [c.name for c in model.get_contact_list()] == ["Alice Pauline", "Carl Kurz"]
    assert result.feedback.startswith("Deleted contact: Benson Meier; Phone: 98765432")


def test_delete_out_of_range() -> None:
    model = _model()
    with pytest.raises(CommandError, match="^The contact index provided is invalid: 4$"):
        DeleteCommand(Index(3)).execute(model)


def test_find_then_list() -> None:
    model = _model()
    result = FindCommand(NameContainsKeywords(("MEIER", "kurz"))).execute(model)
    assert result.feedback == "2 contacts listed!"
    assert [c.name for c in model.get_filtered_contact_list()] == ["Benson Meier", "Carl Kurz"]

    result = ListCommand().execute(model)
    assert result.feedback == "Listed all contacts"
    assert len(model.get_filtered_contact_list()) == 3


def test_find_matches_whole_words_only() -> None:
    model = _model()
    FindCommand(NameContainsKeywords(("Ali",))).execute(model)
    assert model.get_filtered_contact_list() == []


def test_command_equality() -> None:
    assert DeleteCommand(Index(0)) == DeleteCommand(Index(0))
    assert DeleteCommand(Index(0)) != DeleteCommand(Index(1))
    assert ListCommand() == ListCommand()
    assert FindCommand(NameContainsKeywords(("a",))) != FindCommand(NameContainsKeywords(("b",)))
