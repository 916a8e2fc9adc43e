from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class AppConfig(BaseModel):
    """Defines the configuration for talking to the AWS CLI."""
    aws_cli: str = "aws"
    profile: Optional[str] = None
    region: Optional[str] = None
    poll_interval: float = Field(default=21.0, gt=0, description="Initial seconds between state polls")


class LifecycleState(str, Enum):
    """The closed set of EC2 instance states, spelled as the provider reports them."""
    PENDING = "pending"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"
    SHUTTING_DOWN = "shutting-down"
    TERMINATED = "terminated"


class RestartPhase(str, Enum):
    AWAITING_STOP = "awaiting-stop"
    AWAITING_RUN = "awaiting-run"
    CONVERGED = "converged"


class RestartSession(BaseModel):
    """Tracks a single force-restart while it polls the instance."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    instance: Any
    phase: RestartPhase = RestartPhase.AWAITING_STOP
    poll_interval: float
    polls: int = 0

    @property
    def converged(self) -> bool:
        return self.phase == RestartPhase.CONVERGED
