"""Result and index types passed across the application boundary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """
    Position of a contact in the displayed (filtered) list.
    Stored zero-based; users type one-based numbers.
    """

    zero_based: int

    def __post_init__(self):
        if self.zero_based < 0:
            raise ValueError("Index must not be negative.")

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1


@dataclass(frozen=True)
class CommandResult:
    """Feedback for the user after a command ran successfully."""

    feedback: str
