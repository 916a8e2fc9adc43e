import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from dotenv import dotenv_values

from ec2_ctl_cli.config import Config, load_config, save_config
from ec2_ctl_cli.schemas import AppConfig


@pytest.fixture
def mock_display():
    """Fixture for a mocked Display object."""
    return MagicMock()


def test_load_config_creates_default_when_not_exists(tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"

    config, fell_back = load_config(mock_display, config_file, env_file)

    assert config_file.exists()
    assert env_file.exists()
    assert config == AppConfig()
    assert config.aws_cli == "aws"
    assert config.poll_interval == 21
    assert fell_back is False


def test_save_and_load_config(tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"
    custom = AppConfig(aws_cli="/usr/local/bin/aws", profile="ops", region="us-east-2", poll_interval=7.5)

    save_config(mock_display, custom, config_file, env_file)
    loaded, fell_back = load_config(mock_display, config_file, env_file)

    assert loaded == custom
    assert fell_back is False
    # Profile and region live in the .env file only
    saved = json.loads(config_file.read_text())
    assert "profile" not in saved and "region" not in saved
    assert dotenv_values(env_file) == {"AWS_PROFILE": "ops", "AWS_REGION": "us-east-2"}


def test_env_file_overrides_json(tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"
    config_file.write_text(json.dumps({"profile": "from-json", "region": "eu-west-1"}))
    env_file.write_text("AWS_PROFILE=from-env\n")

    config, _ = load_config(mock_display, config_file, env_file)

    assert config.profile == "from-env"
    assert config.region == "eu-west-1"


def test_load_config_with_corrupt_file(tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"
    config_file.write_text("{not json")
    env_file.touch()

    config, fell_back = load_config(mock_display, config_file, env_file)

    assert config == AppConfig()
    assert fell_back is True


def test_load_config_with_invalid_poll_interval(tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"
    config_file.write_text(json.dumps({"poll_interval": 0}))
    env_file.touch()

    config, fell_back = load_config(mock_display, config_file, env_file)

    assert config.poll_interval == 21
    assert fell_back is True


@pytest.mark.parametrize("content", ["[]", '"x"', "null", "42"])
def test_load_config_with_non_object_json(content, tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"
    config_file.write_text(content)
    env_file.touch()

    config, fell_back = load_config(mock_display, config_file, env_file)

    assert config == AppConfig()
    assert fell_back is True


def test_env_file_applies_when_json_file_missing(tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"
    env_file.write_text("AWS_PROFILE=prod\nAWS_REGION=eu-west-1\n")

    config, fell_back = load_config(mock_display, config_file, env_file)

    assert config.profile == "prod"
    assert config.region == "eu-west-1"
    assert fell_back is False
    assert config_file.exists()
    # The operator's .env file is left as it was
    assert env_file.read_text() == "AWS_PROFILE=prod\nAWS_REGION=eu-west-1\n"


def test_json_file_kept_when_env_file_missing(tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"
    config_file.write_text(json.dumps({"aws_cli": "/opt/aws", "poll_interval": 3}))

    config, fell_back = load_config(mock_display, config_file, env_file)

    assert config.aws_cli == "/opt/aws"
    assert config.poll_interval == 3
    assert fell_back is False
    assert env_file.exists()
    assert json.loads(config_file.read_text()) == {"aws_cli": "/opt/aws", "poll_interval": 3}


def test_env_file_applies_when_json_invalid(tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"
    config_file.write_text("{not json")
    env_file.write_text("AWS_REGION=us-west-2\n")

    config, fell_back = load_config(mock_display, config_file, env_file)

    assert config.region == "us-west-2"
    assert fell_back is True


def test_config_class_reports_fallback(tmp_path: Path, mock_display: MagicMock):
    config_file = tmp_path / ".ec2-ctl.json"
    env_file = tmp_path / ".env"

    assert Config(mock_display, config_file, env_file).fell_back_to_defaults is False

    config_file.write_text("[]")
    config = Config(mock_display, config_file, env_file)

    assert config.fell_back_to_defaults is True
    assert config.app_config == AppConfig()
