import sys
import logging
from .config import Config
from .display import Display
from .command_runner import CommandRunner
from .instance import InstanceLocator
from .restart_manager import RestartManager

log = logging.getLogger(__name__)

class AppContext:
    """A central container for the application's runtime state."""

    def __init__(self, verbose: bool = False):
        try:
            self.display = Display(verbose=verbose)
            self.config = Config(self.display)
            self.runner = CommandRunner(self.display)
            self.locator = InstanceLocator(self.runner, self.config.app_config)
            self.restart_manager = RestartManager(self.locator, self.config.app_config)
        except Exception as e:
            log.error(f"Failed to initialize application: {e}", exc_info=True)
            sys.exit(1)
