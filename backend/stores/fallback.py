"""Remote-then-local attempt sequence used by every repository operation."""

import logging
from typing import Callable, TypeVar

from errors import RemoteUnavailableError

logger = logging.getLogger(__name__)

R = TypeVar("R")


def with_fallback(
    operation: str,
    remote_call: Callable[[], R],
    local_call: Callable[[], R],
    *,
    fallback_on: tuple[type[Exception], ...] = (RemoteUnavailableError,),
    fallback_on_empty: bool = False,
) -> R:
    """Run ``remote_call``; run ``local_call`` instead if it raises one of
    ``fallback_on`` (or, with ``fallback_on_empty``, returns nothing).

    There is exactly one fallback step and no retry. Errors from the local
    call propagate to the caller.
    """
    try:
        result = remote_call()
    except fallback_on as e:
        logger.warning("%s: record store failed (%s), using local fallback", operation, e)
        return local_call()

    if fallback_on_empty and not result:
        logger.debug("%s: no remote result, checking local fallback", operation)
        return local_call()
    return result
