"""Domain values: Contact and the field types it is built from."""

import re
from dataclasses import dataclass, field

MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ]*$")
_PHONE_PATTERN = re.compile(r"^\+?[0-9][0-9 \-]*$")
_EMAIL_PATTERN = re.compile(r"^[\w.+\-]+@[A-Za-z0-9\-]+(\.[A-Za-z0-9\-]+)+$")
_FEES_PATTERN = re.compile(r"^\d+(\.\d{1,2})?$")
_ALNUM_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


@dataclass(frozen=True, order=True)
class MonthPaid:
    """
    A calendar month (YYYY-MM) for which fees have been received.
    Surrounding whitespace and bracket decoration are stripped; the format
    itself is checked by whoever consumes the value (see is_valid / parse).
    """

    value: str

    def __post_init__(self):
        object.__setattr__(self, "value", (self.value or "").strip().strip("[]").strip())

    @classmethod
    def parse(cls, raw: str) -> "MonthPaid":
        """Build a MonthPaid, raising ValueError unless it is a valid YYYY-MM month."""
        month = cls(raw)
        if not month.is_valid():
            raise ValueError(invalid_month_message(month.value))
        return month

    def is_valid(self) -> bool:
        return MONTH_PATTERN.match(self.value) is not None

    def __str__(self) -> str:
        return self.value


def as_months(values) -> frozenset[MonthPaid]:
    """Freeze values into a set of MonthPaid, wrapping plain strings."""
    return frozenset(v if isinstance(v, MonthPaid) else MonthPaid(v) for v in values)


def invalid_month_message(token: str) -> str:
    return (
        f"Invalid month format: {token}. "
        "Month must be in YYYY-MM format, where MM is 01-12."
    )


@dataclass(frozen=True, order=True)
class Tag:
    name: str

    def __post_init__(self):
        name = (self.name or "").strip()
        if not _ALNUM_PATTERN.match(name):
            raise ValueError("Tag names should be alphanumeric.")
        object.__setattr__(self, "name", name)

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True)
class Contact:
    """
    A person tracked by the address book, with tuition fee details and the
    months already paid. Immutable: edits produce a new Contact.
    """

    name: str
    phone: str
    email: str
    address: str
    fees: str
    class_id: str
    months_paid: frozenset[MonthPaid] = field(default_factory=frozenset)
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        name = " ".join((self.name or "").split())
        if not _NAME_PATTERN.match(name):
            raise ValueError(
                "Names should only contain alphanumeric characters and spaces, "
                "and it should not be blank."
            )
        phone = (self.phone or "").strip()
        if not _PHONE_PATTERN.match(phone) or sum(c.isdigit() for c in phone) < 3:
            raise ValueError(
                "Phone numbers should only contain digits, spaces, '+' and '-', "
                "and be at least 3 digits long."
            )
        email = (self.email or "").strip()
        if not _EMAIL_PATTERN.match(email):
            raise ValueError("Emails should be of the format local-part@domain.")
        address = (self.address or "").strip()
        if not address:
            raise ValueError("Addresses can take any values, and it should not be blank.")
        fees = str(self.fees if self.fees is not None else "").strip()
        if not _FEES_PATTERN.match(fees):
            raise ValueError(
                "Fees should be a non-negative amount with at most two decimal places."
            )
        class_id = (self.class_id or "").strip()
        if not _ALNUM_PATTERN.match(class_id):
            raise ValueError("Class id should be a non-empty alphanumeric identifier.")

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "phone", phone)
        object.__setattr__(self, "email", email)
        object.__setattr__(self, "address", address)
        object.__setattr__(self, "fees", fees)
        object.__setattr__(self, "class_id", class_id)
        object.__setattr__(self, "months_paid", as_months(self.months_paid))
        object.__setattr__(
            self, "tags", frozenset(t if isinstance(t, Tag) else Tag(t) for t in self.tags)
        )

    def sorted_months_paid(self) -> list[MonthPaid]:
        return sorted(self.months_paid)

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags)
