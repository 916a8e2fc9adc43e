import logging
import time
from typing import Callable, Optional

from .instance import Instance, InstanceLocator
from .schemas import AppConfig, RestartPhase, RestartSession

log = logging.getLogger(__name__)

BACKOFF_FACTOR = 2


class RestartManager:
    """
    Drives a force restart: force-stop, wait for "stopped", start, wait for "running".

    Each poll is a full describe-instances lookup that supersedes the previous
    observation. Lookup errors are not caught, so a failed poll ends the whole
    restart, leaving the instance in whatever state it reached.
    """

    def __init__(self, locator: InstanceLocator, config: AppConfig, sleep: Callable[[float], None] = time.sleep):
        self.locator = locator
        self.config = config
        self.sleep = sleep

    def force_restart(self, instance_id: str) -> RestartSession:
        instance = self.locator.by_id(instance_id)
        self._log_state(instance)
        instance.stop(force=True)

        session = RestartSession(instance=instance, poll_interval=self.config.poll_interval)
        while not session.converged:
            self.poll(session)

        log.info(f"Instance {session.instance.instance_id} is running again.")
        return session

    def poll(self, session: RestartSession):
        """Waits one interval, re-observes the instance and advances the session."""
        self.sleep(session.poll_interval)
        session.instance = self.locator.reload(session.instance)
        session.polls += 1
        self._log_state(session.instance, session.polls)

        if session.phase == RestartPhase.AWAITING_STOP and session.instance.is_stopped:
            session.instance.start()
            session.poll_interval *= BACKOFF_FACTOR
            session.phase = RestartPhase.AWAITING_RUN
        elif session.phase == RestartPhase.AWAITING_RUN and session.instance.is_running:
            session.phase = RestartPhase.CONVERGED

    @staticmethod
    def _log_state(instance: Instance, polls: Optional[int] = None):
        if polls is None:
            log.info(f"state: {instance.state}")
        else:
            log.info(f"state: {instance.state} (poll {polls})")
