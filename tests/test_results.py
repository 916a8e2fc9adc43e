import pytest

from ec2_ctl_cli.errors import (
    AmbiguousResultError,
    EmptyResultError,
    LookupFailedError,
    UnexpectedResultError,
)
from ec2_ctl_cli.results import singular


def test_singular_returns_only_element():
    assert singular([{"InstanceId": "i-1"}]) == {"InstanceId": "i-1"}


def test_singular_accepts_tuple():
    assert singular(("only",)) == "only"


def test_singular_empty_raises():
    with pytest.raises(EmptyResultError, match="Empty result"):
        singular([])


def test_singular_ambiguous_raises_with_all_matches():
    matches = [{"InstanceId": "i-1"}, {"InstanceId": "i-2"}, {"InstanceId": "i-3"}]

    with pytest.raises(AmbiguousResultError) as excinfo:
        singular(matches)

    assert excinfo.value.matches == matches
    message = str(excinfo.value)
    assert message.startswith("Ambiguous result:")
    for match in matches:
        assert match["InstanceId"] in message


@pytest.mark.parametrize("result", [None, "i-1", {"InstanceId": "i-1"}, 42])
def test_singular_non_sequence_raises(result):
    with pytest.raises(UnexpectedResultError) as excinfo:
        singular(result)
    assert excinfo.value.result == result


def test_lookup_errors_share_base_class():
    for error in (EmptyResultError(), AmbiguousResultError([1, 2]), UnexpectedResultError(None)):
        assert isinstance(error, LookupFailedError)
        assert error.suggestion
