"""Contacts used to populate an empty address book on first start."""

from feebook.domain import Contact, MonthPaid, Tag


def _months(*values: str) -> frozenset[MonthPaid]:
    return frozenset(MonthPaid(v) for v in values)


def _tags(*names: str) -> frozenset[Tag]:
    return frozenset(Tag(n) for n in names)


def sample_contacts() -> list[Contact]:
    return [
        Contact(
            name="Alex Yeoh",
            phone="87438807",
            email="alexyeoh@example.com",
            address="Blk 30 Geylang Street 29, #06-40",
            fees="300",
            class_id="1",
            months_paid=_months("2024-01", "2024-02"),
            tags=_tags("friends"),
        ),
        Contact(
            name="Bernice Yu",
            phone="99272758",
            email="berniceyu@example.com",
            address="Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            fees="250",
            class_id="2",
            months_paid=_months("2024-01"),
            tags=_tags("colleagues", "friends"),
        ),
        Contact(
            name="Charlotte Oliveiro",
            phone="93210283",
            email="charlotte@example.com",
            address="Blk 11 Ang Mo Kio Street 74, #11-04",
            fees="300",
            class_id="1",
            tags=_tags("neighbours"),
        ),
        Contact(
            name="David Li",
            phone="91031282",
            email="lidavid@example.com",
            address="Blk 436 Serangoon Gardens Street 26, #16-43",
            fees="400.50",
            class_id="3",
            tags=_tags("family"),
        ),
    ]
