import json
import logging
from typing import Any, Dict, List

from .command_runner import CommandRunner
from .errors import ArgumentError, MalformedResultError
from .results import singular
from .schemas import AppConfig, LifecycleState

log = logging.getLogger(__name__)


def ec2_command(config: AppConfig, *args: str) -> List[str]:
    """Builds an `aws ec2 ...` argument list honouring the configured profile and region."""
    command = [config.aws_cli]
    if config.profile:
        command.extend(["--profile", config.profile])
    if config.region:
        command.extend(["--region", config.region])
    command.append("ec2")
    command.extend(args)
    return command


def described_instances(output: str) -> List[Dict[str, Any]]:
    """Flattens the instances of every reservation in describe-instances output."""
    try:
        payload = json.loads(output)
        instances = []
        for reservation in payload["Reservations"]:
            if not isinstance(reservation["Instances"], list):
                raise MalformedResultError(f"Instances is not a list: {reservation['Instances']!r}")
            instances.extend(reservation["Instances"])
    except json.JSONDecodeError as e:
        raise MalformedResultError(f"Could not parse describe-instances output: {e}") from e
    except (KeyError, TypeError) as e:
        raise MalformedResultError(f"Unexpected describe-instances structure: {e!r}") from e
    return instances


class Instance:
    """A read-only view over one instance description from describe-instances."""

    def __init__(self, description: Dict[str, Any], runner: CommandRunner, config: AppConfig):
        self.description = description
        self.runner = runner
        self.config = config

    def __repr__(self) -> str:
        return f"Instance({self.instance_id!r}, state={self.state!r})"

    @property
    def instance_id(self) -> str:
        return self.description["InstanceId"]

    @property
    def state(self) -> str:
        return self.description["State"]["Name"]

    def is_state(self, state: LifecycleState) -> bool:
        return self.state == state.value

    @property
    def is_pending(self) -> bool:
        return self.is_state(LifecycleState.PENDING)

    @property
    def is_running(self) -> bool:
        return self.is_state(LifecycleState.RUNNING)

    @property
    def is_stopping(self) -> bool:
        return self.is_state(LifecycleState.STOPPING)

    @property
    def is_stopped(self) -> bool:
        return self.is_state(LifecycleState.STOPPED)

    @property
    def is_shutting_down(self) -> bool:
        return self.is_state(LifecycleState.SHUTTING_DOWN)

    @property
    def is_terminated(self) -> bool:
        return self.is_state(LifecycleState.TERMINATED)

    def stop(self, force: bool = False) -> str:
        """Stops the instance after operator confirmation."""
        args = ["stop-instances"]
        if force:
            args.append("--force")
        args.extend(["--instance-ids", self.instance_id])
        return self.runner.run(ec2_command(self.config, *args), confirm=True, log_output=True)

    def start(self) -> str:
        return self.runner.run(
            ec2_command(self.config, "start-instances", "--instance-ids", self.instance_id),
            log_output=True,
        )


class InstanceLocator:
    """Resolves instances by Name tag or id. Every lookup is a fresh describe-instances call."""

    def __init__(self, runner: CommandRunner, config: AppConfig):
        self.runner = runner
        self.config = config

    def by_name(self, name: str) -> Instance:
        return self._find("tag:Name", name)

    def by_id(self, instance_id: str) -> Instance:
        return self._find("instance-id", instance_id)

    def reload(self, instance: Instance) -> Instance:
        """Returns a new Instance describing the current state of the same instance."""
        return self.by_id(instance.instance_id)

    def _find(self, key: str, value: str) -> Instance:
        value = str(value if value is not None else "").strip()
        if not value:
            raise ArgumentError(f"Empty value for filter {key}", context={"filter": key})

        output = self.runner.run(
            ec2_command(self.config, "describe-instances", "--filters", f"Name={key},Values={value}")
        )
        log.debug(output)
        description = singular(described_instances(output))
        self._check_description(description)
        return Instance(description, self.runner, self.config)

    @staticmethod
    def _check_description(description: Any):
        try:
            description["InstanceId"]
            description["State"]["Name"]
        except (KeyError, TypeError) as e:
            raise MalformedResultError(
                f"Instance description lacks InstanceId or State.Name: {description!r}"
            ) from e
