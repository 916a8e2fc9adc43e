import json
import logging
from pathlib import Path

from dotenv import dotenv_values, set_key
from pydantic import ValidationError

from .display import Display
from .schemas import AppConfig

log = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".ec2-ctl"
DEFAULT_ENV_FILE = DEFAULT_CONFIG_DIR / ".env"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / ".ec2-ctl.json"


def load_config(
    display: Display,
    config_path: Path = DEFAULT_CONFIG_FILE,
    env_path: Path = DEFAULT_ENV_FILE,
) -> tuple[AppConfig, bool]:
    """
    Loads the application configuration from JSON and .env files.
    Missing files are created with defaults; an existing file is never overwritten.

    Returns:
        tuple: (AppConfig, fell_back_to_defaults)
    """
    if not config_path.exists():
        log.debug(f"Creating default configuration file {config_path}")
        save_config(display, AppConfig(), config_path, env_path)
    elif not env_path.exists():
        log.debug(f"Creating empty environment file {env_path}")
        env_path.parent.mkdir(parents=True, exist_ok=True)
        env_path.touch()

    try:
        with open(config_path, "r") as f:
            data = json.load(f)
        app_config = AppConfig.model_validate(data)
        fell_back = False
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        log.warning(f"Ignoring invalid configuration in {config_path}: {type(e).__name__}")
        app_config = AppConfig()
        fell_back = True

    # .env values take precedence over the JSON file
    env_vars = dotenv_values(env_path)
    if env_vars.get("AWS_PROFILE"):
        app_config.profile = env_vars.get("AWS_PROFILE")
    if env_vars.get("AWS_REGION"):
        app_config.region = env_vars.get("AWS_REGION")

    return app_config, fell_back


def save_config(
    display: Display,
    config: AppConfig,
    config_path: Path = DEFAULT_CONFIG_FILE,
    env_path: Path = DEFAULT_ENV_FILE,
):
    """Saves the application configuration to JSON and .env files."""
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            f.write(config.model_dump_json(indent=4, exclude={"profile", "region"}))

        env_path.parent.mkdir(parents=True, exist_ok=True)
        env_path.touch(exist_ok=True)
        if config.profile:
            set_key(env_path, "AWS_PROFILE", config.profile)
        if config.region:
            set_key(env_path, "AWS_REGION", config.region)

    except IOError:
        log.error(f"Could not save configuration to {config_path}.", exc_info=True)


class Config:
    """A configuration manager that handles loading and accessing app configuration."""

    def __init__(self, display: Display, config_path: Path = DEFAULT_CONFIG_FILE, env_path: Path = DEFAULT_ENV_FILE):
        self._app_config, self._fell_back_to_defaults = load_config(display, config_path, env_path)

    @property
    def app_config(self) -> AppConfig:
        """Returns the loaded AppConfig object."""
        return self._app_config

    @property
    def fell_back_to_defaults(self) -> bool:
        """Returns True if the config fell back to defaults due to loading errors."""
        return self._fell_back_to_defaults
