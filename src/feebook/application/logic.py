"""Entry point of the application layer: parse, execute, report."""

import logging
import threading

from feebook.application.commands import Command
from feebook.application.dto import CommandResult
from feebook.application.errors import CommandError
from feebook.application.parser import parse_command
from feebook.application.ports import Model
from feebook.domain import Contact

logger = logging.getLogger(__name__)


class Logic:
    """Runs user commands against one model.
    Commands run one at a time: each reads, validates and writes under a single lock.
    """

    def __init__(self, model: Model) -> None:
        self._model = model
        self._lock = threading.Lock()

    def execute(self, command_text: str) -> CommandResult:
        """Parse and execute command_text. Raises CommandError (or ParseError) on failure."""
        logger.info("----------------[USER COMMAND][%s]", command_text)
        try:
            command = parse_command(command_text)
        except CommandError as e:
            logger.warning("Could not parse %r: %s", command_text, e.message)
            raise
        return self.execute_command(command)

    def execute_command(self, command: Command) -> CommandResult:
        with self._lock:
            try:
                return command.execute(self._model)
            except CommandError as e:
                logger.warning("Command %r failed: %s", command, e.message)
                raise

    def get_filtered_contact_list(self) -> list[Contact]:
        with self._lock:
            return self._model.get_filtered_contact_list()
