"""Errors raised by the application layer. Messages are shown to the user as-is."""


class CommandError(Exception):
    """A command could not be carried out; the model was left unchanged."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(CommandError):
    """Raw command text could not be turned into a command."""


class ContactNotFoundError(LookupError):
    """The model holds no contact equal to the one being replaced or removed."""
