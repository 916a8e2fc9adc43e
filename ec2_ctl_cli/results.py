from typing import Any

from .errors import AmbiguousResultError, EmptyResultError, UnexpectedResultError


def singular(result: Any) -> Any:
    """Returns the only element of a lookup result, raising when there is not exactly one."""
    if not isinstance(result, (list, tuple)):
        raise UnexpectedResultError(result)
    if len(result) > 1:
        raise AmbiguousResultError(list(result))
    if not result:
        raise EmptyResultError()
    return result[0]
