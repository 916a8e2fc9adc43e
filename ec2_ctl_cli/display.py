import logging
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel


class Display:
    """
    A centralized display handler for all CLI output.

    STREAMS:

    - stdout: lookup results only, as pretty-printed JSON, so the output can be
      piped into other tools.
    - stderr: log records, error panels and the confirmation prompt.

    Other modules use logging.getLogger(__name__) for progress and state lines
    and never write to the consoles directly. The only exception is the
    confirmation prompt, which has to pair a printed action with a line of
    operator input.
    """

    def __init__(self, verbose: bool = False):
        self._console = Console()
        self._err_console = Console(stderr=True)

        # Clear any existing handlers to avoid duplicate logs
        root_logger = logging.getLogger()
        if root_logger.hasHandlers():
            root_logger.handlers.clear()

        logging.basicConfig(
            level="DEBUG" if verbose else "INFO",
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=self._err_console, rich_tracebacks=True, show_path=verbose)]
        )

    def error(self, message: str, suggestion: Optional[str] = None):
        """Prints an error message and an optional suggestion."""
        error_panel = Panel(
            f"[bold red]Error:[/] {escape(message)}\n"
            + (f"\n[bold]Suggestion:[/] {suggestion}" if suggestion else ""),
            border_style="red",
            expand=False,
        )
        self._err_console.print(error_panel)

    def json(self, data: Any):
        """Prints data as indented JSON on stdout."""
        self._console.print_json(data=data, indent=2)

    def confirm(self, action: str) -> str:
        """Shows the action to be confirmed and returns the operator's reply."""
        self._err_console.print(action, markup=False, highlight=False)
        return typer.prompt("Confirm [y/n]", default="", show_default=False, err=True)
