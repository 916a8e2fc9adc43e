import logging

import typer
from typing_extensions import Annotated

from ..context import AppContext
from ..errors import Ec2CtlError

log = logging.getLogger(__name__)


def get_instance_logic(app_context: AppContext, instance_id: str) -> dict:
    """Business logic for describing a single instance."""
    instance = app_context.locator.by_id(instance_id)
    app_context.display.json(instance.description)
    return instance.description


def get(
    ctx: typer.Context,
    instance_id: Annotated[str, typer.Argument(help="The instance id, e.g. i-0123456789abcdef0.")],
):
    """Prints the describe-instances description of one instance as JSON."""
    app_context: AppContext = ctx.obj
    try:
        get_instance_logic(app_context, instance_id)
    except Ec2CtlError as e:
        log.debug(f"get failed: {type(e).__name__}", exc_info=True)
        app_context.display.error(str(e), e.suggestion)
        raise typer.Exit(1)
