"""
Force-restart command implementation for the ec2-ctl CLI.

Force-stops an instance, waits until it reports `stopped`, starts it, and waits
until it reports `running`. The stop is confirmed interactively; the start is not.

## Execution Flow Diagram

```mermaid
sequenceDiagram
    participant CLI as CLI
    participant Cmd as force_restart.py
    participant RM as restart_manager.py<br/>(RestartManager)
    participant Loc as instance.py<br/>(InstanceLocator)
    participant Inst as instance.py<br/>(Instance)
    participant Run as command_runner.py<br/>(CommandRunner)
    participant AWS as aws ec2

    CLI->>Cmd: ec2-ctl force-restart i-123
    Cmd->>RM: force_restart("i-123")
    RM->>Loc: by_id("i-123")
    Loc->>Run: run([aws, ec2, describe-instances, ...])
    Run->>AWS: subprocess.run
    RM->>Inst: stop(force=True)
    Inst->>Run: run([... stop-instances --force ...], confirm=True)
    Run->>CLI: "Confirm [y/n]: "
    loop until converged
        RM->>RM: sleep(poll_interval)
        RM->>Loc: reload(instance)
        alt awaiting stop and stopped
            RM->>Inst: start()
            RM->>RM: poll_interval *= 2
        else awaiting run and running
            RM->>RM: converged
        end
    end
```

## Key Architecture Points

- **Fresh Observations**: every poll is a full describe-instances call
- **Single Start**: `start` is issued once, on the first `stopped` observation
- **Backoff**: the poll interval doubles once, when `start` is issued
- **Fail Fast**: lookup errors during polling end the command; nothing is retried
"""

import logging

import typer
from typing_extensions import Annotated

from ..context import AppContext
from ..errors import Ec2CtlError

log = logging.getLogger(__name__)


def force_restart_logic(app_context: AppContext, instance_id: str):
    """Business logic for force-restarting an instance."""
    if app_context.config.fell_back_to_defaults:
        log.warning(
            "The configuration file is invalid; using the default AWS CLI path and poll interval. "
            "Profile and region come from the .env file only."
        )
    return app_context.restart_manager.force_restart(instance_id)


def force_restart(
    ctx: typer.Context,
    instance_id: Annotated[str, typer.Argument(help="The instance id to force-stop and start.")],
):
    """Force-stops and starts an instance, waiting until it is running again."""
    app_context: AppContext = ctx.obj
    try:
        force_restart_logic(app_context, instance_id)
    except Ec2CtlError as e:
        log.debug(f"force-restart failed: {type(e).__name__}", exc_info=True)
        app_context.display.error(str(e), e.suggestion)
        raise typer.Exit(1)
