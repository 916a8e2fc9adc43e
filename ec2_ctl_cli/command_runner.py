import logging
import shlex
import subprocess
from typing import List

from .display import Display
from .errors import ConfirmationDeclinedError

log = logging.getLogger(__name__)

AFFIRMATIVE = "y"


class CommandRunner:
    """Runs external commands, optionally behind an operator confirmation."""

    def __init__(self, display: Display):
        self.display = display

    def run(self, command: List[str], confirm: bool = False, log_output: bool = False) -> str:
        """
        Runs a command and returns its standard output.

        The exit status is not checked: callers judge success by the output.
        There is no timeout, so a hung command blocks the caller.

        Raises:
            ConfirmationDeclinedError: confirm was requested and the reply was not "y".
        """
        command_line = shlex.join(command)
        if confirm:
            self.confirm(command_line)

        log.debug(f"Running: {command_line}")
        result = subprocess.run(command, stdout=subprocess.PIPE, text=True)
        if result.returncode != 0:
            log.warning(f"Command exited with status {result.returncode}: {command_line}")

        output = result.stdout or ""
        if log_output:
            log.info(output.rstrip("\n"))
        return output

    def confirm(self, action: str):
        reply = self.display.confirm(action)
        if (reply or "").strip() != AFFIRMATIVE:
            raise ConfirmationDeclinedError(action, reply=reply)
