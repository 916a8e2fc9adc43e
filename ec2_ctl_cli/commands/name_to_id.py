"""
Name-to-id command implementation for the ec2-ctl CLI.

Resolves the id of the single instance whose `Name` tag equals the argument
and prints it as a JSON string on stdout.
"""

import logging

import typer
from typing_extensions import Annotated

from ..context import AppContext
from ..errors import Ec2CtlError

log = logging.getLogger(__name__)


def name_to_id_logic(app_context: AppContext, name: str) -> str:
    """Business logic for resolving an instance id from its Name tag."""
    instance = app_context.locator.by_name(name)
    app_context.display.json(instance.instance_id)
    return instance.instance_id


def name_to_id(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Value of the instance's Name tag.")],
):
    """Prints the id of the instance with the given Name tag."""
    app_context: AppContext = ctx.obj
    try:
        name_to_id_logic(app_context, name)
    except Ec2CtlError as e:
        log.debug(f"name-to-id failed: {type(e).__name__}", exc_info=True)
        app_context.display.error(str(e), e.suggestion)
        raise typer.Exit(1)
