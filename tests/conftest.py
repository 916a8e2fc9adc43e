import json

import pytest
from unittest.mock import MagicMock

from ec2_ctl_cli.schemas import AppConfig


@pytest.fixture
def instance_description():
    """Factory for a single describe-instances instance entry."""
    def _make(instance_id="i-123", state="running", **extra):
        description = {"InstanceId": instance_id, "State": {"Code": 16, "Name": state}}
        description.update(extra)
        return description
    return _make


@pytest.fixture
def describe_output():
    """Factory for describe-instances JSON; each argument lists the instances of one reservation."""
    def _make(*reservations):
        return json.dumps({"Reservations": [{"Instances": list(instances)} for instances in reservations]})
    return _make


@pytest.fixture
def mock_app_context():
    """Fixture to mock the AppContext and its components."""
    mock_context = MagicMock()
    mock_context.display = MagicMock()
    mock_context.config = MagicMock()
    mock_context.config.fell_back_to_defaults = False
    mock_context.locator = MagicMock()
    mock_context.restart_manager = MagicMock()
    return mock_context


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def mock_runner():
    """A CommandRunner double; set run.return_value or run.side_effect per test."""
    return MagicMock()
