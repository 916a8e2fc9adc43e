import typer
from typing_extensions import Annotated
from .context import AppContext
from .commands.name_to_id import name_to_id
from .commands.get import get
from .commands.force_restart import force_restart

app = typer.Typer(
    help="A CLI for looking up and force-restarting EC2 instances.",
    add_completion=False,
)

app.command("name-to-id")(name_to_id)
app.command()(get)
app.command("force-restart")(force_restart)

@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output for debugging.",
        ),
    ] = False,
):
    """
    Initialize the AppContext and attach it to the Typer context.
    """
    ctx.obj = AppContext(verbose=verbose)

if __name__ == "__main__":
    app()
