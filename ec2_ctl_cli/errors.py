"""
Error classifications for ec2-ctl.

Every error here is unrecoverable where it is raised. Nothing below the
command layer catches them; the command layer reports the message and exits
with a non-zero status.
"""

from typing import Any, Dict, List, Optional


class Ec2CtlError(Exception):
    """Base class for classified ec2-ctl failures."""

    suggestion: Optional[str] = None

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class ArgumentError(Ec2CtlError):
    """An empty or blank name or instance id was supplied."""

    suggestion = "Pass a non-blank value."


class ConfirmationDeclinedError(Ec2CtlError):
    """The operator did not confirm a destructive command."""

    def __init__(self, action: str, reply: Optional[str] = None, **kwargs):
        super().__init__(f"Confirmation declined for: {action}", **kwargs)
        self.action = action
        self.reply = reply


class LookupFailedError(Ec2CtlError):
    """Base class for lookups that did not yield exactly one instance."""

    suggestion = "Check the filter value and your AWS credentials, profile and region."


class EmptyResultError(LookupFailedError):
    """The lookup matched no instances."""

    def __init__(self, message: str = "Empty result", **kwargs):
        super().__init__(message, **kwargs)


class AmbiguousResultError(LookupFailedError):
    """The lookup matched more than one instance."""

    def __init__(self, matches: List[Any], **kwargs):
        super().__init__(f"Ambiguous result:\n{matches!r}", **kwargs)
        self.matches = matches


class UnexpectedResultError(LookupFailedError):
    """The lookup payload was not list-shaped."""

    def __init__(self, result: Any, **kwargs):
        super().__init__(f"Unexpected result:\n{result!r}", **kwargs)
        self.result = result


class MalformedResultError(LookupFailedError):
    """The lookup output could not be parsed into instance descriptions."""
